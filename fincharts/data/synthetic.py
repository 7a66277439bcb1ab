"""Random-walk price series for demos and chart previews.

Each session opens at the previous close and moves by up to +/-4%.
Pass a seed for a reproducible series.
"""

from __future__ import annotations

import random
from datetime import date, timedelta

from fincharts.data.types import PricePoint

_VOLATILITY = 0.02
_MIN_VOLUME = 100_000
_VOLUME_SPAN = 1_000_000


def generate_random_price_series(
    start: date,
    days: int,
    start_price: float = 100.0,
    seed: int | None = None,
) -> list[PricePoint]:
    """Generate `days` consecutive calendar-day sessions starting at `start`."""
    rng = random.Random(seed)
    points: list[PricePoint] = []
    current = start_price

    for i in range(days):
        change = (rng.random() - 0.5) * 4
        open_ = current
        close = open_ * (1 + change * _VOLATILITY)
        high = max(open_, close) * (1 + rng.random() * _VOLATILITY)
        low = min(open_, close) * (1 - rng.random() * _VOLATILITY)
        volume = rng.randrange(_MIN_VOLUME, _MIN_VOLUME + _VOLUME_SPAN)

        points.append(
            PricePoint(
                date=start + timedelta(days=i),
                open=round(open_, 2),
                high=round(high, 2),
                low=round(low, 2),
                close=round(close, 2),
                volume=float(volume),
            )
        )
        current = close

    return points
