"""Shared helpers for termtop."""

from tt_common.api import TTError, configure_logging

__all__ = ["configure_logging", "TTError"]
