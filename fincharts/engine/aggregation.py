"""Calendar roll-ups and ordering helpers for price series.

Points are grouped into week or month buckets keyed by their date. Each
bucket becomes one OHLCV point dated at its last member. None of these
functions mutate their input.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from fincharts.data.types import AggregationPeriod, PricePoint, PriceSeries
from fincharts.utils.time import iso_week_number


def sort_price_series(series: PriceSeries) -> list[PricePoint]:
    """New list ordered ascending by date. Stable for equal dates."""
    return sorted(series, key=lambda p: p.date)


def filter_by_date_range(
    series: PriceSeries,
    start: date,
    end: date,
) -> list[PricePoint]:
    """Points with start <= date <= end, in input order."""
    return [p for p in series if start <= p.date <= end]


def period_key(d: date, period: AggregationPeriod | str) -> str:
    """Bucket key for a date: '<year>-W<week>' or '<year>-M<month>'.

    The year is always the date's calendar year, even when its ISO week
    belongs to the neighbouring year (e.g. 2024-12-30 keys as '2024-W1').
    """
    period = AggregationPeriod(period)
    if period is AggregationPeriod.WEEK:
        return f"{d.year}-W{iso_week_number(d)}"
    if period is AggregationPeriod.MONTH:
        return f"{d.year}-M{d.month}"
    raise ValueError(f"No bucket key for period {period.value!r}")


def aggregate_price_series(
    series: PriceSeries,
    period: AggregationPeriod | str = AggregationPeriod.DAY,
) -> list[PricePoint]:
    """Roll a series up into calendar buckets.

    'day' passes points through unchanged. For 'week' and 'month' the result
    is sorted ascending by each bucket's representative date.
    """
    period = AggregationPeriod(period)
    if period is AggregationPeriod.DAY:
        return list(series)

    # dicts keep first-occurrence order; members stay in input order
    buckets: dict[str, list[PricePoint]] = {}
    for point in series:
        buckets.setdefault(period_key(point.date, period), []).append(point)

    return sort_price_series([_build_bucket(points) for points in buckets.values()])


def _build_bucket(points: Sequence[PricePoint]) -> PricePoint:
    """Build one OHLCV point from a bucket's members."""
    first = points[0]
    last = points[-1]
    return PricePoint(
        date=last.date,
        open=first.open,
        high=max(p.high for p in points),
        low=min(p.low for p in points),
        close=last.close,
        volume=sum(p.volume or 0 for p in points),
    )
