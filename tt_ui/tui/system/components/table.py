from __future__ import annotations

from rich.console import Console

from tt_ui.tui.core.theme import StyleSheet
from tt_ui.tui.system.components.table_layout import build_rich_table
from tt_ui.tui.system.models import RenderableTable
from tt_ui.tui.system.protocols import TableSink


class RichTableSink(TableSink):
    """Prints drawn tables to a Rich console."""

    def __init__(self, console: Console, stylesheet: StyleSheet | None = None):
        self._console = console
        self._stylesheet = stylesheet or StyleSheet()

    def show(self, table: RenderableTable) -> None:
        self._console.print(build_rich_table(table, stylesheet=self._stylesheet))


def render_ansi(
    table: RenderableTable,
    *,
    width: int,
    height: int,
    stylesheet: StyleSheet | None = None,
) -> str:
    """Render a table to an ANSI string sized for a ``width`` x ``height`` area."""
    console = Console(
        force_terminal=True,
        color_system="truecolor",
        width=max(1, width),
        height=max(1, height),
        legacy_windows=False,
    )
    with console.capture() as cap:
        console.print(build_rich_table(table, stylesheet=stylesheet), end="")
    return cap.get()
