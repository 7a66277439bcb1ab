"""Engine layer: technical indicators and calendar aggregation."""

from fincharts.engine.aggregation import (
    aggregate_price_series,
    filter_by_date_range,
    period_key,
    sort_price_series,
)
from fincharts.engine.indicators import (
    EMA,
    SMA,
    calculate_bollinger_bands,
    calculate_ema,
    calculate_macd,
    calculate_rsi,
    calculate_sma,
    ema_values,
    is_defined,
    sma_values,
)

__all__ = [
    "EMA",
    "SMA",
    "aggregate_price_series",
    "calculate_bollinger_bands",
    "calculate_ema",
    "calculate_macd",
    "calculate_rsi",
    "calculate_sma",
    "ema_values",
    "filter_by_date_range",
    "is_defined",
    "period_key",
    "sma_values",
    "sort_price_series",
]
