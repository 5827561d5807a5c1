"""Public API surface for tt_common."""

from tt_common.errors import (
    ConfigurationError,
    DisplayError,
    SamplingError,
    TTError,
    wrap_error,
)
from tt_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "ConfigurationError",
    "DisplayError",
    "SamplingError",
    "TTError",
    "wrap_error",
]
