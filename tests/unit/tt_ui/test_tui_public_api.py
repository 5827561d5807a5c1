import pytest

from tt_ui import tui

pytestmark = pytest.mark.unit_ui


def test_tui_public_api_exports() -> None:
    for name in tui.__all__:
        assert hasattr(tui, name)
    assert hasattr(tui, "DataTable")
    assert hasattr(tui, "ScrollState")
    assert hasattr(tui, "SortSpec")
    assert hasattr(tui, "allocate_widths")
    assert hasattr(tui, "RichTableSink")
