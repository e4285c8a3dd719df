"""``elasticlean families`` — list the registered index families."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from elasticlean.core.processor import IndexProcessor
from elasticlean.families.registry import default_registry

console = Console()


def families_cmd(ctx: typer.Context) -> None:
    """List the index families the ``process`` command understands."""
    obj = ctx.find_root().obj
    registry = obj.registry if isinstance(obj, IndexProcessor) else default_registry()

    if not len(registry):
        console.print("[dim]No families registered.[/dim]")
        return

    table = Table(title="Index Families")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for family in registry.families():
        table.add_row(family.name, family.description)
    console.print(table)
