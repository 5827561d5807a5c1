"""Scrollable, sortable table of domain items for a fixed terminal viewport."""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Sequence, TypeVar

from tt_ui.tui.system.components.column_widths import allocate_widths
from tt_ui.tui.system.components.scroll_state import ScrollState
from tt_ui.tui.system.components.sort import SortSpec
from tt_ui.tui.system.config import TableConfig
from tt_ui.tui.system.models import (
    Column,
    Event,
    HeaderCell,
    KeyEvent,
    MouseKind,
    Rect,
    RenderableTable,
    RenderedRow,
    RowActivated,
    RowSelected,
    SortKey,
    SortOrder,
    SortToggled,
    Status,
    TableMessage,
)
from tt_ui.tui.system.protocols import RowAdapter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataTable(Generic[T]):
    """
    Owns the items, columns, scroll state and optional sort of one table.

    ``set_data`` re-applies the active sort, so hosts only push fresh items.
    ``draw`` is called once per frame with the table's bounds and returns a
    ``RenderableTable``; ``on_event`` consumes mouse input for the same bounds
    and appends any host messages to the list it is given.

    ``first_draw_index`` selects a row the first time data arrives; negative
    values count from the end of the sorted items.
    """

    def __init__(
        self,
        columns: Sequence[Column],
        adapter: RowAdapter[T],
        *,
        config: TableConfig | None = None,
        sort: SortSpec | None = None,
        first_draw_index: int | None = None,
    ) -> None:
        self._columns: tuple[Column, ...] = tuple(columns)
        self._adapter = adapter
        self._config = config or TableConfig()
        if sort is None and self._config.sortable:
            sort = SortSpec(order=self._columns[0].default_order) if self._columns else None
        if sort is not None and not self._columns:
            sort = None
        if sort is not None:
            column = sort.active_column
            if not 0 <= column < len(self._columns):
                column = 0
            sort = SortSpec(column, sort.order)
        self._sort = sort
        self._state = ScrollState()
        self._first_draw_index = first_draw_index
        self._items: list[T] = []
        self._widths: list[int] = [0] * len(self._columns)

    @property
    def columns(self) -> tuple[Column, ...]:
        return self._columns

    @property
    def config(self) -> TableConfig:
        return self._config

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def sort_spec(self) -> SortSpec | None:
        return self._sort

    @property
    def scroll_state(self) -> ScrollState:
        return self._state

    @property
    def widths(self) -> tuple[int, ...]:
        """Column widths from the last draw."""
        return tuple(self._widths)

    @property
    def title(self) -> str | None:
        """Configured title, with the scroll position when enabled."""
        return self._title()

    @property
    def selected_index(self) -> int | None:
        return self._state.selected_index

    @property
    def selected_item(self) -> T | None:
        index = self._state.selected_index
        if index is None:
            return None
        return self._items[index]

    def set_data(self, items: Iterable[T]) -> None:
        """Replace every item; the active sort, if any, is applied again."""
        self._items = list(items)
        if self._sort is not None:
            self._items = self._sort.sort(self._items, self._active_sort_key)
        self._state.set_num_items(len(self._items))
        if self._first_draw_index is not None and self._items:
            if self._state.selected_index is None:
                index = self._first_draw_index
                if index < 0:
                    index += len(self._items)
                self._state.select(index)
            self._first_draw_index = None
        logger.debug("Table data replaced with %d items", len(self._items))

    def sort_by(self, column_index: int, order: SortOrder | None = None) -> Status:
        """Sort by a column; picking the active column again flips the order."""
        if not 0 <= column_index < len(self._columns):
            return Status.IGNORED
        column = self._columns[column_index]
        if self._sort is None:
            self._sort = SortSpec(column_index, order or column.default_order)
        elif order is not None:
            self._sort.active_column = column_index
            self._sort.order = order
        else:
            self._sort.set_column(column_index, column.default_order)
        self._items = self._sort.sort(self._items, self._active_sort_key)
        logger.debug(
            "Sorting by %s (%s)", column.name, self._sort.order.value
        )
        return Status.CAPTURED

    def move_up(self, amount: int = 1, messages: list[TableMessage] | None = None) -> Status:
        return self._report_selection(self._state.move_up(amount), messages)

    def move_down(self, amount: int = 1, messages: list[TableMessage] | None = None) -> Status:
        return self._report_selection(self._state.move_down(amount), messages)

    def draw(self, bounds: Rect) -> RenderableTable:
        gap = self._gap_for(bounds)
        self._widths = self._allocate(bounds)
        start, end = self._state.visible_window(self._content_height(bounds, gap))

        selected = self._state.selected_index
        rows = tuple(
            RenderedRow(
                cells=self._cells(self._items[index]),
                style=self._adapter.row_style(self._items[index]),
                selected=self._config.show_selected_entry and index == selected,
            )
            for index in range(start, end)
        )
        return RenderableTable(
            header=self._header(),
            rows=rows,
            widths=tuple(self._widths),
            gap=gap,
            title=self._title(),
        )

    def on_event(
        self, bounds: Rect, event: Event, messages: list[TableMessage]
    ) -> Status:
        """Handle one input event; keyboard input is left to the host."""
        if isinstance(event, KeyEvent):
            return Status.IGNORED
        if not bounds.contains(event.column, event.row):
            return Status.IGNORED

        if event.kind is MouseKind.SCROLL_DOWN:
            return self.move_down(1, messages)
        if event.kind is MouseKind.SCROLL_UP:
            return self.move_up(1, messages)
        if event.kind is not MouseKind.LEFT_DOWN:
            return Status.IGNORED

        y = event.row - bounds.y
        if y == 0:
            if self._config.sortable:
                return self._on_header_click(bounds, event.column - bounds.x, messages)
            return Status.IGNORED

        gap = self._gap_for(bounds)
        header_rows = 1 + gap
        if y < header_rows:
            return Status.IGNORED

        start, end = self._state.visible_window(self._content_height(bounds, gap))
        visual_offset = y - header_rows
        if visual_offset >= end - start:
            return Status.IGNORED

        index = start + visual_offset
        if index == self._state.selected_index:
            messages.append(RowActivated(index))
            return Status.CAPTURED
        status = self._state.set_selected_by_visual_offset(visual_offset)
        return self._report_selection(status, messages)

    def _on_header_click(
        self, bounds: Rect, x: int, messages: list[TableMessage]
    ) -> Status:
        left = 0
        for index, width in enumerate(self._allocate(bounds)):
            if width > 0 and left <= x < left + width:
                self.sort_by(index)
                messages.append(SortToggled(index))
                return Status.CAPTURED
            left += width
        return Status.IGNORED

    def _report_selection(
        self, status: Status, messages: list[TableMessage] | None
    ) -> Status:
        index = self._state.selected_index
        if status is Status.CAPTURED and messages is not None and index is not None:
            messages.append(RowSelected(index))
        return status

    def _active_sort_key(self, item: T) -> SortKey:
        assert self._sort is not None
        return self._adapter.sort_key(item, self._columns[self._sort.active_column].key)

    def _allocate(self, bounds: Rect) -> list[int]:
        return allocate_widths(
            bounds.width, [(column.policy, column.name) for column in self._columns]
        )

    def _gap_for(self, bounds: Rect) -> int:
        if not self._config.show_gap:
            return 0
        if (
            len(self._items) + 2 > bounds.height
            and bounds.height < self._config.gap_height_limit
        ):
            return 0
        return 1

    @staticmethod
    def _content_height(bounds: Rect, gap: int) -> int:
        return max(0, bounds.height - 1 - gap)

    def _cells(self, item: T) -> tuple[str, ...]:
        cells: list[str] = []
        for column, width in zip(self._columns, self._widths):
            text = self._adapter.to_cell(item, column.key, width) if width > 0 else None
            cells.append(text or "")
        return tuple(cells)

    def _header(self) -> tuple[HeaderCell, ...]:
        active = self._sort.active_column if self._sort and self._config.sortable else None
        return tuple(
            HeaderCell(
                name=column.name,
                width=width,
                sort_order=self._sort.order if index == active and self._sort else None,
            )
            for index, (column, width) in enumerate(zip(self._columns, self._widths))
        )

    def _title(self) -> str | None:
        title = self._config.title
        if not self._config.show_scroll_position:
            return title
        index = self._state.selected_index
        if index is None:
            return title
        position = f"({index + 1} of {len(self._items)})"
        return f"{title} {position}" if title else position
