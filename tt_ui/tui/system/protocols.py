from __future__ import annotations

from typing import Hashable, Protocol, TypeVar

from tt_ui.tui.system.models import RenderableTable, SortKey

ItemT = TypeVar("ItemT", contravariant=True)


class RowAdapter(Protocol[ItemT]):
    """Turns domain items into table cells, styles and sort keys."""

    def to_cell(self, item: ItemT, column: Hashable, width: int) -> str | None: ...

    def row_style(self, item: ItemT) -> str: ...

    def sort_key(self, item: ItemT, column: Hashable) -> SortKey: ...


class TableSink(Protocol):
    def show(self, table: RenderableTable) -> None: ...
