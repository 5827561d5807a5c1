from __future__ import annotations

import math
from types import SimpleNamespace

import psutil
import pytest

from tt_app import sampling
from tt_common.errors import SamplingError

pytestmark = pytest.mark.unit_app


def _entry(label: str, current: float | None) -> SimpleNamespace:
    return SimpleNamespace(label=label, current=current, high=None, critical=None)


def test_cpu_usage_is_per_core(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict[str, object]] = []

    def fake_cpu_percent(**kwargs: object) -> list[int]:
        calls.append(kwargs)
        return [12, 50]

    monkeypatch.setattr(sampling.psutil, "cpu_percent", fake_cpu_percent)
    assert sampling.sample_cpu_usage(0.2) == [12.0, 50.0]
    assert calls == [{"interval": 0.2, "percpu": True}]


def test_cpu_usage_errors_are_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken(**kwargs: object) -> list[float]:
        raise psutil.AccessDenied()

    monkeypatch.setattr(sampling.psutil, "cpu_percent", broken)
    with pytest.raises(SamplingError) as excinfo:
        sampling.sample_cpu_usage()
    assert isinstance(excinfo.value.__cause__, psutil.AccessDenied)
    assert excinfo.value.context == {"interval": None}


def test_temperatures_are_named_by_chip(monkeypatch: pytest.MonkeyPatch) -> None:
    chips = {
        "nvme": [_entry("Composite", 38.9)],
        "coretemp": [_entry("", 51.0), _entry("coretemp core 1", None)],
    }
    monkeypatch.setattr(sampling.psutil, "sensors_temperatures", lambda: chips, raising=False)

    readings = sampling.sample_temperatures()

    assert [name for name, _ in readings] == [
        "coretemp0",
        "coretemp core 1",
        "nvme Composite",
    ]
    assert readings[0][1] == 51.0
    assert math.isnan(readings[1][1])


def test_temperatures_unsupported_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delattr(sampling.psutil, "sensors_temperatures", raising=False)
    assert sampling.sample_temperatures() == []


def test_temperature_errors_are_wrapped(monkeypatch: pytest.MonkeyPatch) -> None:
    def broken() -> dict[str, list[object]]:
        raise OSError("no hwmon")

    monkeypatch.setattr(sampling.psutil, "sensors_temperatures", broken, raising=False)
    with pytest.raises(SamplingError):
        sampling.sample_temperatures()
