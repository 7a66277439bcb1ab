"""Whole-series summary figures for chart headers and axis domains."""

from __future__ import annotations

from fincharts.data.types import PricePoint, PriceRange, PriceSeries


def is_up_day(point: PricePoint) -> bool:
    """True if the session closed at or above its open."""
    return point.close >= point.open


def calculate_change(series: PriceSeries) -> float:
    """Percent change from the first close to the last close.

    Returns 0.0 when there are fewer than two points.
    """
    if len(series) < 2:
        return 0.0
    first = series[0].close
    last = series[-1].close
    return (last - first) / first * 100


def price_range(series: PriceSeries) -> PriceRange:
    """Lowest low and highest high, or (0, 0) for an empty series."""
    if not series:
        return PriceRange(min=0.0, max=0.0)
    return PriceRange(
        min=min(p.low for p in series),
        max=max(p.high for p in series),
    )


def volume_range(series: PriceSeries) -> PriceRange:
    """Min/max over points with a known volume, or (0, 0) if none."""
    volumes = [p.volume for p in series if p.volume is not None]
    if not volumes:
        return PriceRange(min=0.0, max=0.0)
    return PriceRange(min=min(volumes), max=max(volumes))
