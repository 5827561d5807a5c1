"""Tests for column width allocation."""

from __future__ import annotations

import pytest

from tt_ui.tui.system.components.column_widths import allocate_widths, desired_width
from tt_ui.tui.system.models import Fill, Fixed, MaxFixed, MaxPercentage, Percentage

pytestmark = pytest.mark.unit_ui


def test_fill_columns_split_evenly() -> None:
    columns = [(Fill(), f"C{i}") for i in range(10)]
    assert allocate_widths(100, columns) == [10] * 10


def test_leftover_goes_to_leftmost_columns_first() -> None:
    columns = [(Fixed(10), "A"), (Percentage(20), "B"), (Fill(), "Name")]
    # 10 + 10 + 5 leaves 25: 8 each, plus one extra for the first column.
    assert allocate_widths(50, columns) == [19, 18, 13]


def test_capped_policies_use_header_width() -> None:
    columns = [(MaxFixed(3), "Header"), (MaxPercentage(10), "Name")]
    # MaxFixed -> 3, MaxPercentage -> min(5, 2) = 2, leftover 15 split 8/7.
    assert allocate_widths(20, columns) == [11, 9]


def test_later_columns_only_get_remaining_width() -> None:
    columns = [(Fixed(4), "A"), (Fixed(4), "B"), (Fill(), "C")]
    assert allocate_widths(5, columns) == [4, 1, 0]


def test_zero_width_collapses_every_column() -> None:
    columns = [(Fixed(4), "A"), (Percentage(50), "B"), (Fill(), "C")]
    assert allocate_widths(0, columns) == [0, 0, 0]


def test_negative_width_is_treated_as_zero() -> None:
    assert allocate_widths(-3, [(Fill(), "A")]) == [0]


def test_no_columns_gives_empty_result() -> None:
    assert allocate_widths(80, []) == []


def test_headers_are_measured_in_grapheme_clusters() -> None:
    assert desired_width("名前") == 3
    assert desired_width("e\u0301te\u0301") == 4
    assert allocate_widths(40, [(MaxFixed(10), "温度"), (Fill(), "x")]) == [21, 19]


@pytest.mark.parametrize("available", [0, 1, 3, 7, 12, 25, 40, 81, 160])
def test_widths_sum_to_available_width(available: int) -> None:
    columns = [
        (Fill(), "PID"),
        (MaxFixed(12), "Name"),
        (Percentage(25), "CPU%"),
        (MaxPercentage(30), "Memory"),
        (Fixed(6), "User"),
    ]
    widths = allocate_widths(available, columns)
    assert len(widths) == len(columns)
    assert all(width >= 0 for width in widths)
    assert sum(widths) == available
