"""Host metric sampling backed by psutil."""

from __future__ import annotations

import logging
import math

import psutil

from tt_common.errors import SamplingError, wrap_error

logger = logging.getLogger(__name__)


def sample_cpu_usage(interval: float | None = None) -> list[float]:
    """Per-core usage in percent.

    Without ``interval`` the usage is measured since the previous call, so the
    first call after start-up returns zeros. With ``interval`` the call blocks
    for that many seconds and measures across it.
    """
    try:
        values = psutil.cpu_percent(interval=interval, percpu=True)
        return [float(value) for value in values]
    except (psutil.Error, OSError) as exc:
        raise wrap_error(
            SamplingError,
            "Failed to sample CPU usage",
            context={"interval": interval},
            cause=exc,
        ) from exc


def sample_temperatures() -> list[tuple[str, float]]:
    """Return ``(sensor name, celsius)`` pairs; empty where unsupported."""
    reader = getattr(psutil, "sensors_temperatures", None)
    if reader is None:
        logger.debug("Temperature sensors are not supported on this platform")
        return []
    try:
        chips = reader()
    except (psutil.Error, OSError) as exc:
        raise wrap_error(
            SamplingError, "Failed to read temperature sensors", cause=exc
        ) from exc

    readings: list[tuple[str, float]] = []
    for chip, entries in sorted(chips.items()):
        for position, entry in enumerate(entries):
            label = entry.label or f"{chip}{position}"
            name = label if label.startswith(chip) else f"{chip} {label}"
            current = entry.current
            readings.append((name, float(current) if current is not None else math.nan))
    return readings
