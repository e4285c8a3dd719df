"""Main Typer application — imports and registers all CLI commands.

Entry point: ``elasticlean`` (configured via pyproject.toml scripts).

Logging goes to stderr and is controlled with ``--log-level`` or the
``ELASTICLEAN_LOG_LEVEL`` environment variable, e.g.
``ELASTICLEAN_LOG_LEVEL=DEBUG elasticlean query -s 5 -o``.
"""

from __future__ import annotations

import typer

from elasticlean.cli.commands.delete import delete_cmd
from elasticlean.cli.commands.families import families_cmd
from elasticlean.cli.commands.process import process_cmd
from elasticlean.cli.commands.query import query_cmd
from elasticlean.cli.runtime import LogLevel, configure_logging

app = typer.Typer(
    name="elasticlean",
    help="elasticlean: inspect and clean up dated Elasticsearch indices.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="query", help="Query indices.")(query_cmd)
app.command(name="process", help="Apply a family decoder to indices.")(process_cmd)
app.command(name="delete", help="Delete indices past a retention window.")(delete_cmd)
app.command(name="families", help="List registered index families.")(families_cmd)


@app.callback()
def root(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING,
        "--log-level",
        envvar="ELASTICLEAN_LOG_LEVEL",
        case_sensitive=False,
        help="Logging level for stderr output.",
    ),
) -> None:
    """Inspect and clean up dated Elasticsearch indices."""
    configure_logging(log_level)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
