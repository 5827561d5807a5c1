"""Temperature sensor table."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Hashable

from tt_ui.tui.core import theme
from tt_ui.tui.system.components.data_table import DataTable
from tt_ui.tui.system.config import TableConfig
from tt_ui.tui.system.models import Column, Fill, MaxPercentage, Normal, SortKey


class TempColumn(Enum):
    SENSOR = "Sensor"
    TEMP = "Temp"


@dataclass(frozen=True)
class SensorReading:
    sensor: str
    celsius: float


class TempRowAdapter:
    def to_cell(self, item: SensorReading, column: Hashable, width: int) -> str | None:
        if column is TempColumn.SENSOR:
            return item.sensor
        if column is TempColumn.TEMP:
            if math.isnan(item.celsius):
                return "N/A"
            return f"{item.celsius:.0f}°C"
        return None

    def row_style(self, item: SensorReading) -> str:
        if math.isnan(item.celsius):
            return ""
        return theme.temperature_style(item.celsius)

    def sort_key(self, item: SensorReading, column: Hashable) -> SortKey:
        if column is TempColumn.TEMP:
            return Normal(item.celsius)
        return Normal(item.sensor.lower())


def temp_columns() -> list[Column]:
    return [
        Column(TempColumn.SENSOR, TempColumn.SENSOR.value, Fill()),
        Column(TempColumn.TEMP, TempColumn.TEMP.value, MaxPercentage(30)),
    ]


def create_temp_table(config: TableConfig | None = None) -> DataTable[SensorReading]:
    return DataTable(
        temp_columns(),
        TempRowAdapter(),
        config=config or TableConfig(sortable=True, title="Temperatures"),
    )
