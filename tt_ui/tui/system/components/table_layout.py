from __future__ import annotations

from rich import box
from rich.table import Table
from rich.text import Text

from tt_ui.tui.core import theme
from tt_ui.tui.core.theme import StyleSheet
from tt_ui.tui.system.models import RenderableTable, RenderedRow


def _row_style(row: RenderedRow, stylesheet: StyleSheet) -> str:
    if not row.selected:
        return row.style
    return f"{row.style} {stylesheet.selected_text}".strip()


def build_rich_table(
    model: RenderableTable,
    *,
    stylesheet: StyleSheet | None = None,
    box_style: box.Box | None = None,
) -> Table:
    """
    Build a Rich Table from a drawn RenderableTable.

    Column widths are taken as-is; columns that were allotted no width are
    left out, and cells longer than their column are cut with an ellipsis.
    """
    styles = stylesheet or StyleSheet()
    visible = [index for index, width in enumerate(model.widths) if width > 0]

    title_text = None
    if model.title:
        title_text = Text(model.title, style=styles.title)
        title_text.no_wrap = True
        title_text.overflow = "ellipsis"

    rich_table = Table(
        title=title_text,
        box=box_style,
        show_edge=False,
        pad_edge=False,
        padding=(0, 0),
        expand=False,
        header_style=styles.table_header,
        style=styles.text,
    )
    if not visible:
        return rich_table

    for index in visible:
        cell = model.header[index]
        rich_table.add_column(
            f"{cell.name}{theme.sort_marker(cell.sort_order)}",
            width=cell.width,
            min_width=cell.width,
            max_width=cell.width,
            no_wrap=True,
            overflow="ellipsis",
        )
    if model.gap:
        rich_table.add_row(*["" for _ in visible])
    for row in model.rows:
        rich_table.add_row(
            *(row.cells[index] for index in visible),
            style=_row_style(row, styles),
        )
    return rich_table
