"""Technical indicators over price series.

SMA and EMA are standalone streaming classes with O(1) updates.
The calculate_* functions are pure batch transforms built on them: each
returns a list index-aligned with its input, using math.nan for positions
without enough history. Invalid parameters raise ValueError; short or
empty input never does.
"""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence

from fincharts.data.types import (
    BollingerResult,
    IndicatorSeries,
    MACDResult,
    PriceSeries,
)


def _check_period(name: str, period: int) -> None:
    if period < 1:
        raise ValueError(f"{name} period must be >= 1, got {period}")


def is_defined(value: float | None) -> bool:
    """True if an indicator position holds a finite number."""
    return value is not None and math.isfinite(value)


class SMA:
    """Simple Moving Average via ring buffer. O(1) per update.

    The value is an exact per-window sum (math.fsum), so a huge value that
    has left the window leaves no residue behind.
    """

    __slots__ = ("_buf", "_period")

    def __init__(self, period: int) -> None:
        _check_period("SMA", period)
        self._period = period
        self._buf: deque[float] = deque(maxlen=period)

    def update(self, value: float) -> None:
        """Add a value. Evicts oldest if at capacity."""
        self._buf.append(value)

    @property
    def value(self) -> float | None:
        """Current SMA, or None if not warm."""
        if len(self._buf) < self._period:
            return None
        return math.fsum(self._buf) / self._period

    @property
    def is_warm(self) -> bool:
        """True when buffer has enough values for a valid SMA."""
        return len(self._buf) >= self._period

    @property
    def count(self) -> int:
        """Number of values currently in the buffer."""
        return len(self._buf)

    @property
    def window(self) -> tuple[float, ...]:
        """Buffered values, oldest first."""
        return tuple(self._buf)


class EMA:
    """Exponential Moving Average seeded with the first value.

    alpha = 2 / (period + 1). There is no warm-up gap: the first update
    sets the value directly.
    """

    __slots__ = ("_alpha", "_period", "_value")

    def __init__(self, period: int) -> None:
        _check_period("EMA", period)
        self._period = period
        self._alpha = 2.0 / (period + 1)
        self._value: float | None = None

    def update(self, value: float) -> None:
        if self._value is None:
            self._value = value
            return
        # alpha == 1 reproduces the input exactly
        self._value = self._alpha * value + (1.0 - self._alpha) * self._value

    @property
    def value(self) -> float | None:
        """Current EMA, or None before the first update."""
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha


# --- Numeric-sequence primitives ---


def sma_values(values: Sequence[float], period: int) -> IndicatorSeries:
    """SMA over a plain numeric sequence."""
    sma = SMA(period)
    out: IndicatorSeries = []
    for v in values:
        sma.update(v)
        current = sma.value
        out.append(math.nan if current is None else current)
    return out


def ema_values(values: Sequence[float], period: int) -> IndicatorSeries:
    """EMA over a plain numeric sequence. Same length as input, no gaps."""
    ema = EMA(period)
    out: IndicatorSeries = []
    for v in values:
        ema.update(v)
        out.append(ema.value)  # type: ignore[arg-type]
    return out


def _closes(series: PriceSeries) -> list[float]:
    return [p.close for p in series]


# --- Price-series indicators ---


def calculate_sma(series: PriceSeries, period: int) -> IndicatorSeries:
    """Arithmetic mean of close over the trailing window of `period` points."""
    return sma_values(_closes(series), period)


def calculate_ema(series: PriceSeries, period: int) -> IndicatorSeries:
    """Exponential moving average of close, seeded with the first close."""
    return ema_values(_closes(series), period)


def calculate_rsi(series: PriceSeries, period: int = 14) -> IndicatorSeries:
    """Relative Strength Index using simple averages of gains and losses.

    Gains/losses are derived from consecutive closes, so the first position
    is always undefined. RSI is 100 when the window has no losses.
    """
    _check_period("RSI", period)
    closes = _closes(series)
    if not closes:
        return []

    gains = SMA(period)
    losses = SMA(period)
    rsi: IndicatorSeries = [math.nan]
    for prev, curr in zip(closes, closes[1:]):
        change = curr - prev
        gains.update(max(change, 0.0))
        losses.update(max(-change, 0.0))

        if not losses.is_warm:
            rsi.append(math.nan)
            continue

        # exact window sums: avg_loss is 0 only when the window has no losses
        avg_gain = math.fsum(gains.window) / period
        avg_loss = math.fsum(losses.window) / period
        if avg_loss == 0:
            rsi.append(100.0)
        else:
            rs = avg_gain / avg_loss
            rsi.append(100.0 - 100.0 / (1.0 + rs))
    return rsi


def calculate_macd(
    series: PriceSeries,
    fast_period: int = 12,
    slow_period: int = 26,
    signal_period: int = 9,
) -> MACDResult:
    """MACD line (fast EMA - slow EMA), its signal EMA, and the histogram."""
    closes = _closes(series)
    fast = ema_values(closes, fast_period)
    slow = ema_values(closes, slow_period)

    macd = [f - s for f, s in zip(fast, slow)]
    signal = ema_values(macd, signal_period)
    histogram = [m - s for m, s in zip(macd, signal)]
    return MACDResult(macd=macd, signal=signal, histogram=histogram)


def calculate_bollinger_bands(
    series: PriceSeries,
    period: int = 20,
    std_dev: float = 2.0,
) -> BollingerResult:
    """Bands at +/- std_dev population standard deviations around the SMA."""
    sma = SMA(period)
    upper: IndicatorSeries = []
    middle: IndicatorSeries = []
    lower: IndicatorSeries = []

    for point in series:
        sma.update(point.close)
        mean = sma.value
        if mean is None:
            upper.append(math.nan)
            middle.append(math.nan)
            lower.append(math.nan)
            continue

        variance = sum((c - mean) ** 2 for c in sma.window) / period
        offset = math.sqrt(variance) * std_dev
        upper.append(mean + offset)
        middle.append(mean)
        lower.append(mean - offset)

    return BollingerResult(upper=upper, middle=middle, lower=lower)
