"""``elasticlean process`` — decode and print the documents of a family."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from elasticlean.cli.runtime import fail, get_processor
from elasticlean.errors import ElasticleanError

console = Console()


def process_cmd(
    ctx: typer.Context,
    name: str = typer.Option(
        ...,
        "--basename",
        "-n",
        help="Registered family name, e.g. 'deprecate'.",
    ),
    start: Optional[int] = typer.Option(
        None,
        "--start",
        "-s",
        help="Keep indices at most this many days old.",
    ),
    end: Optional[int] = typer.Option(
        None,
        "--end",
        "-e",
        help="Keep indices strictly older than this many days.",
    ),
) -> None:
    """Retrieve and print the typed documents stored in a family's indices.

    Unknown family names are reported and exit with code 1.
    """
    try:
        documents = get_processor(ctx).process(name, start, end)
    except ElasticleanError as exc:
        raise fail(console, exc)

    for doc in documents:
        render = getattr(doc, "render", None)
        text = render() if callable(render) else str(doc)
        console.print(text, markup=False, highlight=False, soft_wrap=True)
    console.print(f"Number of Documents: {len(documents)}", highlight=False)
