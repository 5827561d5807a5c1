"""Scroll offset and row selection for a table viewport."""

from __future__ import annotations

from tt_ui.tui.system.models import Status


class ScrollState:
    """Tracks the first visible row and the selected row.

    All inputs are clamped; nothing here raises on out-of-range values.
    """

    def __init__(self, num_items: int = 0, selected_index: int | None = None) -> None:
        self._num_items = max(0, num_items)
        self._start_offset = 0
        self._selected_index: int | None = None
        self._window: tuple[int, int] = (0, 0)
        if selected_index is not None:
            self.select(selected_index)

    @property
    def num_items(self) -> int:
        return self._num_items

    @property
    def start_offset(self) -> int:
        return self._start_offset

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    @property
    def window(self) -> tuple[int, int]:
        """The window returned by the last ``visible_window`` call."""
        return self._window

    def set_num_items(self, num_items: int) -> None:
        """Adopt a new item count, keeping the selection when it is still valid."""
        self._num_items = max(0, num_items)
        if self._num_items == 0:
            self._selected_index = None
        elif self._selected_index is not None and self._selected_index >= self._num_items:
            self._selected_index = self._num_items - 1
        self._start_offset = min(self._start_offset, max(0, self._num_items - 1))
        start, end = self._window
        self._window = (min(start, self._num_items), min(end, self._num_items))

    def select(self, index: int) -> Status:
        if self._num_items == 0:
            return Status.IGNORED
        return self._set_selected(max(0, min(index, self._num_items - 1)))

    def move_down(self, amount: int = 1) -> Status:
        if self._num_items == 0:
            return Status.IGNORED
        if self._selected_index is None:
            return self._set_selected(0)
        return self._set_selected(
            min(self._selected_index + max(0, amount), self._num_items - 1)
        )

    def move_up(self, amount: int = 1) -> Status:
        if self._num_items == 0:
            return Status.IGNORED
        if self._selected_index is None:
            return self._set_selected(self._num_items - 1)
        return self._set_selected(max(self._selected_index - max(0, amount), 0))

    def set_selected_by_visual_offset(self, visual_offset: int) -> Status:
        """Select the row ``visual_offset`` rows below the top of the viewport."""
        start, end = self._window
        if visual_offset < 0 or visual_offset >= end - start:
            return Status.IGNORED
        return self._set_selected(start + visual_offset)

    def visible_window(self, viewport_height: int) -> tuple[int, int]:
        """Adjust the offset to keep the selection in view and return ``(start, end)``."""
        height = max(0, viewport_height)
        if height == 0:
            self._window = (self._start_offset, self._start_offset)
            return self._window

        start = self._start_offset
        if self._num_items <= height:
            start = 0
        else:
            selected = self._selected_index
            if selected is not None:
                if selected < start:
                    start = selected
                elif selected >= start + height:
                    start = selected - height + 1
            start = max(0, min(start, self._num_items - height))

        self._start_offset = start
        self._window = (start, min(self._num_items, start + height))
        return self._window

    def _set_selected(self, index: int) -> Status:
        if index == self._selected_index:
            return Status.IGNORED
        self._selected_index = index
        return Status.CAPTURED
