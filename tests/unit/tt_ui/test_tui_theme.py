from types import SimpleNamespace

import pytest

from tt_ui.tui.core import capabilities, theme
from tt_ui.tui.system.models import SortOrder

pytestmark = pytest.mark.unit_ui


def test_sort_markers() -> None:
    assert theme.sort_marker(None) == ""
    assert theme.sort_marker(SortOrder.ASCENDING) == "▲"
    assert theme.sort_marker(SortOrder.DESCENDING) == "▼"


def test_palette_cycles_core_styles() -> None:
    palette = theme.CpuPalette()
    count = len(theme.CPU_CORE_STYLES)
    assert palette.for_core(0) == palette.for_core(count)
    assert theme.CpuPalette(entries=()).for_core(4) == ""


@pytest.mark.parametrize(
    ("celsius", "style"),
    [(20.0, ""), (70.0, "yellow"), (84.9, "yellow"), (85.0, "bold red")],
)
def test_temperature_style_thresholds(celsius: float, style: str) -> None:
    assert theme.temperature_style(celsius) == style


def test_screen_style_has_status_classes() -> None:
    style = theme.prompt_toolkit_screen_style()
    assert "status" in style
    assert "status.key" in style


def test_is_tty_available_checks_stdio(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        capabilities,
        "sys",
        SimpleNamespace(
            stdin=SimpleNamespace(isatty=lambda: True),
            stdout=SimpleNamespace(isatty=lambda: False),
        ),
    )
    assert capabilities.is_tty_available() is False
    assert capabilities.supports_fullscreen_ui() is False
