"""Price series domain types shared by the engines and data sources.

Frozen dataclasses for value objects. Prices are float because every
consumer (indicators, chart scales) works in float space.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum


class AggregationPeriod(str, Enum):
    """Calendar bucket size for OHLCV roll-ups."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"


@dataclass(frozen=True)
class PricePoint:
    """One trading session of OHLCV data.

    volume is None when unknown (not zero). OHLC consistency
    (low <= open/close <= high) is not validated.
    """

    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float | None = None


PriceSeries = Sequence[PricePoint]

# Index-aligned with the input series; math.nan marks undefined positions.
IndicatorSeries = list[float]


@dataclass(frozen=True)
class MACDResult:
    """MACD line, signal line and histogram, all index-aligned to the input."""

    macd: IndicatorSeries
    signal: IndicatorSeries
    histogram: IndicatorSeries


@dataclass(frozen=True)
class BollingerResult:
    """Upper, middle (SMA) and lower bands, all index-aligned to the input."""

    upper: IndicatorSeries
    middle: IndicatorSeries
    lower: IndicatorSeries


@dataclass(frozen=True)
class PriceRange:
    """Min/max pair used for chart axis domains."""

    min: float
    max: float
