"""Tests for tt_common.config.env parsing utilities."""

import pytest

from tt_common.config import parse_bool_env, parse_int_env

pytestmark = pytest.mark.unit_common


class TestParseBoolEnv:
    def test_returns_none_for_none(self) -> None:
        assert parse_bool_env(None) is None

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "on", "  On "])
    def test_truthy_values(self, value: str) -> None:
        assert parse_bool_env(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "random", ""])
    def test_falsy_values(self, value: str) -> None:
        assert parse_bool_env(value) is False


class TestParseIntEnv:
    def test_int(self) -> None:
        assert parse_int_env("7") == 7
        assert parse_int_env("-2") == -2
        assert parse_int_env("seven") is None
        assert parse_int_env(None) is None
