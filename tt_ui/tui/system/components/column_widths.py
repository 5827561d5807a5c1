"""Column width allocation for fixed-size table viewports."""

from __future__ import annotations

from typing import Sequence

import regex

from tt_ui.tui.system.models import (
    Fill,
    Fixed,
    MaxFixed,
    MaxPercentage,
    Percentage,
    SizePolicy,
)

_GRAPHEME = regex.compile(r"\X")


def desired_width(header: str) -> int:
    """Grapheme clusters in the header, plus one cell of separation."""
    return len(_GRAPHEME.findall(header)) + 1


def _percent_of(total: int, percent: int) -> int:
    return total * max(0, percent) // 100


def _policy_width(policy: SizePolicy, header: str, total: int, remaining: int) -> int:
    if isinstance(policy, Fixed):
        return min(max(0, policy.length), remaining)
    if isinstance(policy, Percentage):
        return min(_percent_of(total, policy.percent), remaining)
    if isinstance(policy, MaxFixed):
        return min(max(0, policy.length), desired_width(header), remaining)
    if isinstance(policy, MaxPercentage):
        return min(desired_width(header), _percent_of(total, policy.percent), remaining)
    if isinstance(policy, Fill):
        return min(desired_width(header), remaining)
    raise TypeError(f"Unknown size policy: {policy!r}")


def allocate_widths(
    available_width: int, columns: Sequence[tuple[SizePolicy, str]]
) -> list[int]:
    """
    Split ``available_width`` across ``columns`` given as (policy, header) pairs.

    Columns are sized left to right against the width the earlier ones left
    over. Whatever is still free afterwards is spread evenly, with the first
    ``leftover % len(columns)`` columns taking one extra cell each.
    """
    if not columns:
        return []

    total = max(0, available_width)
    remaining = total
    widths: list[int] = []
    for policy, header in columns:
        width = _policy_width(policy, header, total, remaining)
        remaining -= width
        widths.append(width)

    per_column, extra = divmod(remaining, len(widths))
    return [
        width + per_column + (1 if index < extra else 0)
        for index, width in enumerate(widths)
    ]
