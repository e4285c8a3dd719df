"""``elasticlean query`` — list dated indices or their base names."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from elasticlean.cli.runtime import fail, get_processor
from elasticlean.errors import ElasticleanError

console = Console()


def query_cmd(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(
        None,
        "--basename",
        "-n",
        help="Base name of the index (sans date).",
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
    names_only: bool = typer.Option(
        False,
        "--names-only",
        "-o",
        help="Print the unique base names instead of dated indices.",
    ),
) -> None:
    """Query indices by base name and age window."""
    try:
        processor = get_processor(ctx)
        if names_only:
            results = processor.query_names(name, start, end)
        else:
            results = [str(i) for i in processor.query(name, start, end)]
    except ElasticleanError as exc:
        raise fail(console, exc)

    for line in results:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
    console.print(f"Number of Indices: {len(results)}", highlight=False)
