"""CLI entry point for termtop."""

from tt_ui.cli.main import app, main

__all__ = ["app", "main"]
