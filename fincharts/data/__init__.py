"""Price series types and data sources.

Re-exports the domain types for convenient imports:
    from fincharts.data import PricePoint, AggregationPeriod
"""

from fincharts.data.errors import (
    CsvFormatError,
    DataSourceError,
    DataSourceNotFoundError,
)
from fincharts.data.types import (
    AggregationPeriod,
    BollingerResult,
    IndicatorSeries,
    MACDResult,
    PricePoint,
    PriceRange,
    PriceSeries,
)

__all__ = [
    "AggregationPeriod",
    "BollingerResult",
    "CsvFormatError",
    "DataSourceError",
    "DataSourceNotFoundError",
    "IndicatorSeries",
    "MACDResult",
    "PricePoint",
    "PriceRange",
    "PriceSeries",
]
