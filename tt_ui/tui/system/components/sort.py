"""Column sorting with pinned aggregate rows."""

from __future__ import annotations

import functools
import logging
import math
from dataclasses import dataclass
from typing import Callable, Sequence, TypeVar

from tt_ui.tui.system.models import Normal, Pinned, SortKey, SortOrder

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _is_nan(value: object) -> bool:
    return isinstance(value, float) and math.isnan(value)


def compare_values(left: object, right: object) -> int:
    """Three-way compare that never raises.

    NaN ranks after every other value and equal to another NaN, which keeps
    the ordering transitive. Mixed types that cannot be compared are equal.
    """
    left_nan, right_nan = _is_nan(left), _is_nan(right)
    if left_nan or right_nan:
        return int(left_nan) - int(right_nan)
    try:
        if left < right:  # type: ignore[operator]
            return -1
        if left > right:  # type: ignore[operator]
            return 1
    except TypeError:
        return 0
    return 0


def compare_keys(left: SortKey, right: SortKey, order: SortOrder) -> int:
    """Order two sort keys; only normal-vs-normal results follow ``order``."""
    if isinstance(left, Pinned):
        if isinstance(right, Pinned):
            return compare_values(left.rank, right.rank)
        return 1
    if isinstance(right, Pinned):
        return -1
    result = compare_values(left.value, right.value)
    return -result if order is SortOrder.DESCENDING else result


@dataclass
class SortSpec:
    """The active sort column and direction of a table."""

    active_column: int = 0
    order: SortOrder = SortOrder.ASCENDING

    def toggle(self) -> SortOrder:
        self.order = self.order.flipped()
        return self.order

    def set_column(self, index: int, default_order: SortOrder = SortOrder.ASCENDING) -> None:
        """Make ``index`` active; re-selecting the active column flips the order."""
        if index == self.active_column:
            self.toggle()
            return
        self.active_column = index
        self.order = default_order

    def sort(self, rows: Sequence[T], key_for: Callable[[T], SortKey]) -> list[T]:
        """Return ``rows`` reordered by ``key_for``; the sort is stable."""
        keyed = [(key_for(row), row) for row in rows]
        keyed.sort(
            key=functools.cmp_to_key(
                lambda left, right: compare_keys(left[0], right[0], self.order)
            )
        )
        logger.debug(
            "Sorted %d rows by column %d (%s)",
            len(keyed),
            self.active_column,
            self.order.value,
        )
        return [row for _, row in keyed]
