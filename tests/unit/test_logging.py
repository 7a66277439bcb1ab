"""Tests for structured logging setup."""

from __future__ import annotations

import json

import pytest

from fincharts.utils.logging import (
    bind_symbol,
    clear_context,
    get_logger,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _reset_context() -> None:
    clear_context()


class TestSetupLogging:
    def test_setup_logging_returns_none(self) -> None:
        assert setup_logging(level="INFO", log_format="json") is None

    def test_get_logger_returns_bound_logger(self) -> None:
        setup_logging(level="INFO", log_format="json")
        assert get_logger("test") is not None


class TestJsonFormat:
    def test_json_output_is_valid(self, capsys: pytest.CaptureFixture[str]) -> None:
        setup_logging(level="INFO", log_format="json")
        get_logger("test_json").info("series_loaded", point_count=3)

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["event"] == "series_loaded"
        assert parsed["point_count"] == 3
        assert parsed["level"] == "info"
        assert "timestamp" in parsed

    def test_bound_symbol_in_every_entry(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="INFO", log_format="json")
        bind_symbol("AAPL")
        get_logger("test_ctx").info("indicator_computed")

        parsed = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
        assert parsed["symbol"] == "AAPL"

    def test_level_filters_lower_entries(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="WARNING", log_format="json")
        get_logger("test_level").info("hidden")
        assert "hidden" not in capsys.readouterr().err


class TestConsoleFormat:
    def test_console_output_is_not_json(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        setup_logging(level="INFO", log_format="console")
        get_logger("test_console").info("console test")

        output = capsys.readouterr().err
        assert "console test" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output)
