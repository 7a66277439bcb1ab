"""Tests for display formatters."""

from __future__ import annotations

from datetime import date

import pytest

from fincharts.utils.formatters import (
    format_date,
    format_number,
    format_percent,
    format_volume,
)


class TestFormatDate:
    def test_short_month(self) -> None:
        assert format_date(date(2024, 1, 5)) == "Jan 5, 2024"

    def test_two_digit_day(self) -> None:
        assert format_date(date(2023, 12, 25)) == "Dec 25, 2023"


class TestFormatNumber:
    def test_two_decimals(self) -> None:
        assert format_number(3.14159) == "3.14"

    def test_thousands_separator(self) -> None:
        assert format_number(1234567.891) == "1,234,567.89"

    def test_pads_decimals(self) -> None:
        assert format_number(5) == "5.00"


class TestFormatVolume:
    @pytest.mark.parametrize(
        ("volume", "expected"),
        [
            (2_500_000_000, "2.50B"),
            (1_000_000_000, "1.00B"),
            (1_234_567, "1.23M"),
            (45_600, "45.60K"),
            (1_000, "1.00K"),
            (999, "999"),
            (0, "0"),
        ],
    )
    def test_thresholds(self, volume: float, expected: str) -> None:
        assert format_volume(volume) == expected

    def test_fractional_small_volume(self) -> None:
        assert format_volume(12.5) == "12.5"


class TestFormatPercent:
    def test_ratio_to_percent(self) -> None:
        assert format_percent(0.0512) == "5.12%"

    def test_negative(self) -> None:
        assert format_percent(-0.25) == "-25.00%"
