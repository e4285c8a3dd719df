"""elasticlean CLI — Typer-based command-line interface.

Provides the ``elasticlean`` command with subcommands for querying dated
indices, decoding the documents of a known family, and deleting indices
past a retention window.

All output uses Rich for terminal display.
"""
