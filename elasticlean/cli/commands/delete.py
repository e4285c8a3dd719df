"""``elasticlean delete`` — delete indices older than a retention window.

The end bound is clamped to the configured retention floor before the
delete set is computed.  ``--dry-run`` prints the set without contacting
the cluster's delete endpoint.
"""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console

from elasticlean.cli.runtime import fail, get_processor
from elasticlean.errors import ElasticleanError

console = Console()


def delete_cmd(
    ctx: typer.Context,
    name: str = typer.Option(
        ...,
        "--basename",
        "-n",
        help="Base name of the index (sans date).",
    ),
    start: Optional[int] = typer.Option(
        None,
        "--start",
        "-s",
        help="Only consider indices at most this many days old.",
    ),
    end: int = typer.Option(
        ...,
        "--end",
        "-e",
        help="Delete indices strictly older than this many days (never below the floor).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "-d",
        help="Report what would be deleted without deleting.",
    ),
) -> None:
    """Delete indices of one base name past the retention window."""
    try:
        report = get_processor(ctx).delete(name, start, end, dry_run=dry_run)
    except ElasticleanError as exc:
        raise fail(console, exc)

    if report.was_clamped:
        console.print(
            f"[yellow]Requested end {report.requested_end} is within the retention "
            f"floor; using {report.effective_end}.[/yellow]"
        )
    console.print(
        f"joined indices for delete: {report.joined()}",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )
    console.print(f"{report.count} indices will be deleted", highlight=False)

    if report.dry_run:
        console.print("dry-run", highlight=False)
        return

    if report.outcome is None:
        console.print("[dim]Nothing to delete.[/dim]")
        return

    console.print(
        f"delete results: status={report.outcome.status_code} "
        f"acknowledged={report.outcome.acknowledged}",
        highlight=False,
    )
    if not report.outcome.acknowledged:
        console.print("[bold red]The cluster did not acknowledge the delete.[/bold red]")
        raise typer.Exit(code=1)
