"""UI package for termtop: the table engine, widgets, screens and CLI."""

from tt_ui.tui import DataTable, TableConfig

__all__ = ["DataTable", "TableConfig"]
