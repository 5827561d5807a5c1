from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from tt_ui.tui.system.models import SortOrder

RICH_ACCENT = "blue"
RICH_ACCENT_BOLD = f"bold {RICH_ACCENT}"
RICH_BORDER_STYLE = RICH_ACCENT

CPU_ALL_STYLE = "green"
CPU_AVG_STYLE = "red"
CPU_CORE_STYLES: tuple[str, ...] = (
    "magenta",
    "yellow",
    "cyan",
    "bright_green",
    "bright_blue",
    "bright_red",
    "bright_cyan",
    "bright_magenta",
)

TEMP_STYLES: dict[str, str] = {
    "normal": "",
    "warm": "yellow",
    "hot": "bold red",
}

SORT_MARKERS: dict[SortOrder, str] = {
    SortOrder.ASCENDING: "▲",
    SortOrder.DESCENDING: "▼",
}


@dataclass(frozen=True)
class StyleSheet:
    """Rich styles for a data table."""

    text: str = ""
    selected_text: str = "reverse"
    table_header: str = RICH_ACCENT_BOLD
    title: str = RICH_ACCENT_BOLD


@dataclass(frozen=True)
class CpuPalette:
    all: str = CPU_ALL_STYLE
    avg: str = CPU_AVG_STYLE
    entries: tuple[str, ...] = field(default=CPU_CORE_STYLES)

    def for_core(self, index: int) -> str:
        if not self.entries:
            return ""
        return self.entries[index % len(self.entries)]


def sort_marker(order: SortOrder | None) -> str:
    if order is None:
        return ""
    return SORT_MARKERS[order]


def temperature_style(celsius: float, warm: float = 70.0, hot: float = 85.0) -> str:
    if celsius >= hot:
        return TEMP_STYLES["hot"]
    if celsius >= warm:
        return TEMP_STYLES["warm"]
    return TEMP_STYLES["normal"]


def prompt_toolkit_screen_style() -> Mapping[str, str]:
    return {
        "status": "reverse",
        "status.key": "bold",
        "separator": "fg:#0000aa",
    }
