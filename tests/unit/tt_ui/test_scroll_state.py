"""Tests for scroll offset and selection tracking."""

from __future__ import annotations

import pytest

from tt_ui.tui.system.components.scroll_state import ScrollState
from tt_ui.tui.system.models import Status

pytestmark = pytest.mark.unit_ui


def test_move_down_past_end_clamps_and_scrolls() -> None:
    state = ScrollState(12, selected_index=0)
    assert state.visible_window(5) == (0, 5)

    assert state.move_down(11) is Status.CAPTURED
    assert state.selected_index == 11
    assert state.visible_window(5) == (7, 12)
    assert state.start_offset == 7


def test_first_move_selects_an_end() -> None:
    down = ScrollState(4)
    assert down.move_down(3) is Status.CAPTURED
    assert down.selected_index == 0

    up = ScrollState(4)
    assert up.move_up(1) is Status.CAPTURED
    assert up.selected_index == 3


def test_moves_on_empty_state_are_ignored() -> None:
    state = ScrollState()
    assert state.move_down() is Status.IGNORED
    assert state.move_up() is Status.IGNORED
    assert state.selected_index is None
    assert state.visible_window(5) == (0, 0)


def test_move_without_change_is_ignored() -> None:
    state = ScrollState(3, selected_index=0)
    assert state.move_up(3) is Status.IGNORED
    assert state.selected_index == 0

    state.select(2)
    assert state.move_down(1) is Status.IGNORED


def test_selection_above_window_pulls_offset_down() -> None:
    state = ScrollState(20, selected_index=15)
    assert state.visible_window(5) == (11, 16)
    state.move_up(10)
    assert state.visible_window(5) == (5, 10)


def test_short_lists_always_start_at_zero() -> None:
    state = ScrollState(4, selected_index=3)
    assert state.visible_window(10) == (0, 4)


def test_visual_offset_is_relative_to_window() -> None:
    state = ScrollState(10)
    state.select(6)
    assert state.visible_window(5) == (2, 7)

    assert state.set_selected_by_visual_offset(1) is Status.CAPTURED
    assert state.selected_index == 3


def test_visual_offset_past_visible_rows_is_ignored() -> None:
    state = ScrollState(3)
    state.visible_window(5)
    assert state.set_selected_by_visual_offset(3) is Status.IGNORED
    assert state.set_selected_by_visual_offset(-1) is Status.IGNORED
    assert state.selected_index is None


def test_shrinking_data_clamps_selection() -> None:
    state = ScrollState(10, selected_index=9)
    state.set_num_items(12)
    assert state.selected_index == 9
    state.set_num_items(4)
    assert state.selected_index == 3
    state.set_num_items(0)
    assert state.selected_index is None


def test_zero_height_viewport_shows_nothing() -> None:
    state = ScrollState(5, selected_index=2)
    start, end = state.visible_window(0)
    assert start == end


@pytest.mark.parametrize("num_items", [1, 5, 12, 40])
@pytest.mark.parametrize("height", [1, 3, 5, 20])
def test_selection_stays_visible(num_items: int, height: int) -> None:
    state = ScrollState(num_items)
    operations = [
        lambda: state.move_down(1),
        lambda: state.move_down(7),
        lambda: state.set_selected_by_visual_offset(height - 1),
        lambda: state.move_up(2),
        lambda: state.move_down(100),
        lambda: state.set_selected_by_visual_offset(0),
        lambda: state.move_up(100),
        lambda: state.set_selected_by_visual_offset(height + 3),
        lambda: state.move_down(3),
    ]
    state.visible_window(height)
    for operation in operations:
        operation()
        start, end = state.visible_window(height)
        selected = state.selected_index
        assert selected is not None
        assert 0 <= selected < num_items
        assert start <= selected < start + height
        assert end == min(num_items, start + height)
        if num_items >= height:
            assert start + height <= num_items
