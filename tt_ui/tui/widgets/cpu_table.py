"""Per-core CPU usage table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Sequence, TypeAlias

from tt_ui.tui.core.theme import CpuPalette
from tt_ui.tui.system.components.data_table import DataTable
from tt_ui.tui.system.components.sort import SortSpec
from tt_ui.tui.system.config import TableConfig
from tt_ui.tui.system.models import (
    Column,
    Fill,
    MaxFixed,
    Normal,
    Pinned,
    SortKey,
    SortOrder,
)

# Below this width the CPU column drops the "CPU" prefix.
CPU_TRUNCATE_BREAKPOINT = 5

ALL_RANK = 1
AVG_RANK = 0


class CpuColumn(Enum):
    CPU = "CPU"
    USE = "Use"


@dataclass(frozen=True)
class CpuAll:
    """The "All" row that toggles showing every core."""


@dataclass(frozen=True)
class CpuEntry:
    """One usage reading; ``core`` is None for the average row."""

    core: int | None
    usage: float

    @property
    def is_average(self) -> bool:
        return self.core is None


CpuRow: TypeAlias = CpuAll | CpuEntry


def build_rows(
    per_core: Sequence[float], *, show_average: bool = True
) -> list[CpuRow]:
    """Rows for one sample: All, then the average (optional), then each core."""
    rows: list[CpuRow] = [CpuAll()]
    if show_average:
        average = sum(per_core) / len(per_core) if per_core else math.nan
        rows.append(CpuEntry(core=None, usage=average))
    rows.extend(CpuEntry(core=index, usage=usage) for index, usage in enumerate(per_core))
    return rows


class CpuRowAdapter:
    def __init__(self, palette: CpuPalette | None = None) -> None:
        self._palette = palette or CpuPalette()

    def to_cell(self, item: CpuRow, column: Hashable, width: int) -> str | None:
        # "All" only ever shows in the CPU column, which collapses first when
        # the table is too narrow.
        if isinstance(item, CpuAll):
            return "All" if column is CpuColumn.CPU else None
        if width <= 0:
            return None
        if column is CpuColumn.CPU:
            if item.is_average:
                return "AVG"
            if width < CPU_TRUNCATE_BREAKPOINT:
                return str(item.core)
            return f"CPU{item.core}"
        if column is CpuColumn.USE:
            if math.isnan(item.usage):
                return "N/A"
            return f"{round(item.usage):.0f}%"
        return None

    def row_style(self, item: CpuRow) -> str:
        if isinstance(item, CpuAll):
            return self._palette.all
        if item.core is None:
            return self._palette.avg
        return self._palette.for_core(item.core)

    def sort_key(self, item: CpuRow, column: Hashable) -> SortKey:
        if isinstance(item, CpuAll):
            return Pinned(ALL_RANK)
        if item.core is None:
            return Pinned(AVG_RANK)
        if column is CpuColumn.USE:
            return Normal(item.usage)
        return Normal(item.core)


def cpu_columns() -> list[Column]:
    return [
        Column(CpuColumn.CPU, CpuColumn.CPU.value, MaxFixed(8)),
        Column(CpuColumn.USE, CpuColumn.USE.value, Fill(), SortOrder.DESCENDING),
    ]


def create_cpu_table(
    *,
    config: TableConfig | None = None,
    palette: CpuPalette | None = None,
    start_on_average: bool = False,
    show_average: bool = True,
) -> DataTable[CpuRow]:
    """Build the CPU table, sorted by core index with All/AVG anchored last."""
    resolved = config or TableConfig(sortable=True, title="CPU")
    first_draw_index = None
    if start_on_average and show_average:
        # The average sits just above "All" at the bottom of a fresh table.
        first_draw_index = -2
    table: DataTable[CpuRow] = DataTable(
        cpu_columns(),
        CpuRowAdapter(palette),
        config=resolved,
        sort=SortSpec(active_column=0, order=SortOrder.ASCENDING),
        first_draw_index=first_draw_index,
    )
    return table
