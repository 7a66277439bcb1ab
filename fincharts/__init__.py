"""fincharts: indicator and calendar-aggregation engine for OHLCV price charts."""

__version__ = "0.1.0"
