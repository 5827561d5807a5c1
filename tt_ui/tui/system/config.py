"""Construction-time options for data tables."""

from __future__ import annotations

import os
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tt_common.config.env import parse_bool_env, parse_int_env
from tt_common.errors import ConfigurationError, wrap_error

# Below this many rows the header gap is dropped when data would not fit.
TABLE_GAP_HEIGHT_LIMIT = 7

_ENV_FIELDS: dict[str, tuple[str, Any]] = {
    "TT_TABLE_GAP": ("show_gap", parse_bool_env),
    "TT_TABLE_GAP_LIMIT": ("gap_height_limit", parse_int_env),
    "TT_TABLE_HIGHLIGHT": ("show_selected_entry", parse_bool_env),
    "TT_TABLE_SORTABLE": ("sortable", parse_bool_env),
    "TT_TABLE_SCROLL_POSITION": ("show_scroll_position", parse_bool_env),
}


class TableConfig(BaseModel):
    """Display options fixed when a table is built."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    show_gap: bool = Field(
        default=True,
        description="Try to leave a blank row between the header and the data.",
    )
    gap_height_limit: int = Field(
        default=TABLE_GAP_HEIGHT_LIMIT,
        ge=0,
        description="Heights below this drop the gap when the data does not fit.",
    )
    show_selected_entry: bool = Field(
        default=True, description="Highlight the selected row."
    )
    sortable: bool = Field(
        default=False, description="Allow sorting by clicking column headers."
    )
    show_scroll_position: bool = Field(
        default=False, description="Append '(n of total)' to the title."
    )
    title: str | None = None

    @classmethod
    def build(cls, **values: Any) -> "TableConfig":
        """Validate ``values`` and raise ConfigurationError on bad input."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise wrap_error(
                ConfigurationError,
                "Invalid table configuration",
                context={"errors": [err["msg"] for err in exc.errors()]},
                cause=exc,
            ) from exc

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> "TableConfig":
        """Build a config from TT_TABLE_* variables; ``overrides`` win."""
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for var, (field_name, parser) in _ENV_FIELDS.items():
            parsed = parser(env.get(var))
            if parsed is not None:
                values[field_name] = parsed
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.build(**values)
