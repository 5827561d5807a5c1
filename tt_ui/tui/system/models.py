from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, TypeAlias


@dataclass(frozen=True)
class Rect:
    """A rectangle in character cells; ``x``/``y`` are the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + max(0, self.width)

    @property
    def bottom(self) -> int:
        return self.y + max(0, self.height)

    def contains(self, column: int, row: int) -> bool:
        return self.x <= column < self.right and self.y <= row < self.bottom


class Status(Enum):
    """Whether an input event was consumed or declined."""

    CAPTURED = "captured"
    IGNORED = "ignored"


# Column size policies.


@dataclass(frozen=True)
class Fill:
    """Fit the header, then share leftover space."""


@dataclass(frozen=True)
class Fixed:
    length: int


@dataclass(frozen=True)
class Percentage:
    percent: int


@dataclass(frozen=True)
class MaxFixed:
    """Fit the header, capped at ``length`` cells."""

    length: int


@dataclass(frozen=True)
class MaxPercentage:
    """Fit the header, capped at ``percent`` of the total width."""

    percent: int


SizePolicy: TypeAlias = Fill | Fixed | Percentage | MaxFixed | MaxPercentage


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"

    def flipped(self) -> "SortOrder":
        if self is SortOrder.ASCENDING:
            return SortOrder.DESCENDING
        return SortOrder.ASCENDING


@dataclass(frozen=True)
class Column:
    key: Hashable
    name: str
    policy: SizePolicy = field(default_factory=Fill)
    default_order: SortOrder = SortOrder.ASCENDING


# Sort keys produced by row adapters.


@dataclass(frozen=True)
class Pinned:
    """An aggregate row that sorts after every normal row in either order."""

    rank: int = 0


@dataclass(frozen=True)
class Normal:
    value: Any


SortKey: TypeAlias = Pinned | Normal


# Input events.


@dataclass(frozen=True)
class KeyEvent:
    key: str


class MouseKind(Enum):
    LEFT_DOWN = "left_down"
    SCROLL_UP = "scroll_up"
    SCROLL_DOWN = "scroll_down"
    OTHER = "other"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event in absolute terminal coordinates."""

    kind: MouseKind
    row: int
    column: int


Event: TypeAlias = KeyEvent | MouseEvent


# Messages emitted to the host.


@dataclass(frozen=True)
class RowSelected:
    index: int


@dataclass(frozen=True)
class RowActivated:
    """The already-selected row was clicked again."""

    index: int


@dataclass(frozen=True)
class SortToggled:
    column_index: int


TableMessage: TypeAlias = RowSelected | RowActivated | SortToggled


# Render output.


@dataclass(frozen=True)
class HeaderCell:
    name: str
    width: int
    sort_order: SortOrder | None = None


@dataclass(frozen=True)
class RenderedRow:
    cells: tuple[str, ...]
    style: str = ""
    selected: bool = False


@dataclass(frozen=True)
class RenderableTable:
    header: tuple[HeaderCell, ...]
    rows: tuple[RenderedRow, ...]
    widths: tuple[int, ...]
    gap: int = 0
    title: str | None = None

    @property
    def height(self) -> int:
        """Rows this table occupies, header and gap included."""
        return 1 + self.gap + len(self.rows)
