"""
Terminal table engine with Rich rendering and a prompt_toolkit host screen.
"""

from tt_ui.tui.system.components.column_widths import allocate_widths
from tt_ui.tui.system.components.data_table import DataTable
from tt_ui.tui.system.components.scroll_state import ScrollState
from tt_ui.tui.system.components.sort import SortSpec
from tt_ui.tui.system.components.table import RichTableSink
from tt_ui.tui.system.config import TableConfig
from tt_ui.tui.system.protocols import RowAdapter, TableSink

__all__ = [
    "allocate_widths",
    "DataTable",
    "RichTableSink",
    "RowAdapter",
    "ScrollState",
    "SortSpec",
    "TableConfig",
    "TableSink",
]
