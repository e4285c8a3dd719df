"""Shared command plumbing: logging setup, processor construction, errors."""

from __future__ import annotations

import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from elasticlean.config import load_config
from elasticlean.core.processor import IndexProcessor
from elasticlean.errors import ElasticleanError

logger = logging.getLogger(__name__)


class LogLevel(str, Enum):
    """Level names accepted by ``--log-level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(level: LogLevel | str) -> None:
    """Route log records to stderr through Rich at *level*."""
    level = LogLevel(level.upper())
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def get_processor(ctx: typer.Context) -> IndexProcessor:
    """Return the processor for this invocation, building it on first use.

    A processor placed in the root context's ``obj`` (as tests do through
    ``CliRunner.invoke(..., obj=...)``) is used as-is.  Otherwise the
    configuration is loaded from the environment, which raises
    ``ConfigurationMissingError`` when a required setting is absent.
    """
    root = ctx.find_root()
    if isinstance(root.obj, IndexProcessor):
        return root.obj

    processor = IndexProcessor(load_config())
    root.obj = processor
    root.call_on_close(processor.close)
    logger.debug("Built processor for %s", processor.config.base_url)
    return processor


def fail(console: Console, exc: ElasticleanError) -> typer.Exit:
    """Print *exc* and return the exit to raise."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}", soft_wrap=True)
    return typer.Exit(code=1)
