"""Tests for the random-walk series generator and symbol table."""

from __future__ import annotations

from datetime import date, timedelta

from fincharts.data.symbols import available_symbols, symbol_name
from fincharts.data.synthetic import generate_random_price_series


class TestGenerateRandomPriceSeries:
    def test_length_and_consecutive_dates(self) -> None:
        series = generate_random_price_series(date(2024, 1, 1), 30, seed=1)
        assert len(series) == 30
        assert series[0].date == date(2024, 1, 1)
        assert series[-1].date == date(2024, 1, 1) + timedelta(days=29)

    def test_first_open_is_start_price(self) -> None:
        series = generate_random_price_series(date(2024, 1, 1), 5, 250.0, seed=7)
        assert series[0].open == 250.0

    def test_ohlc_consistent(self) -> None:
        series = generate_random_price_series(date(2024, 1, 1), 200, seed=3)
        for p in series:
            assert p.low <= min(p.open, p.close)
            assert p.high >= max(p.open, p.close)

    def test_volume_bounds(self) -> None:
        series = generate_random_price_series(date(2024, 1, 1), 200, seed=3)
        assert all(100_000 <= (p.volume or 0) < 1_100_000 for p in series)

    def test_seed_is_reproducible(self) -> None:
        a = generate_random_price_series(date(2024, 1, 1), 20, seed=42)
        b = generate_random_price_series(date(2024, 1, 1), 20, seed=42)
        assert a == b

    def test_zero_days(self) -> None:
        assert generate_random_price_series(date(2024, 1, 1), 0) == []


class TestSymbols:
    def test_available_symbols(self) -> None:
        assert "AAPL" in available_symbols()
        assert len(available_symbols()) == 7

    def test_symbol_name(self) -> None:
        assert symbol_name("NVDA") == "NVIDIA Corporation"
        assert symbol_name("msft") == "Microsoft Corporation"

    def test_unknown_symbol_falls_back(self) -> None:
        assert symbol_name("XYZ") == "XYZ"

    def test_unknown_symbol_fallback_is_upper_case(self) -> None:
        assert symbol_name("aapl_x") == "AAPL_X"
