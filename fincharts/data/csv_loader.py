"""Daily OHLCV CSV loading.

Expected layout: one header row, then `date,open,high,low,close[,volume]`
rows. Rows that cannot produce a usable PricePoint are dropped rather than
failing the whole file; the result is always sorted oldest-first.
"""

from __future__ import annotations

import csv
import io
import math
from pathlib import Path

import structlog

from fincharts.data.errors import CsvFormatError, DataSourceNotFoundError
from fincharts.data.types import PricePoint
from fincharts.engine.aggregation import sort_price_series
from fincharts.utils.time import parse_date

log = structlog.get_logger()

_MIN_COLUMNS = 5


def _parse_float(raw: str) -> float | None:
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_row(row: list[str]) -> PricePoint | None:
    """Convert one data row, or None if it is unusable."""
    if len(row) < _MIN_COLUMNS:
        return None
    try:
        day = parse_date(row[0])
    except ValueError:
        return None

    prices = [_parse_float(cell) for cell in row[1:5]]
    if any(p is None for p in prices):
        return None
    open_, high, low, close = prices

    volume: float | None = None
    if len(row) > _MIN_COLUMNS and row[5].strip():
        volume = _parse_float(row[5])
    return PricePoint(
        date=day,
        open=open_,  # type: ignore[arg-type]
        high=high,  # type: ignore[arg-type]
        low=low,  # type: ignore[arg-type]
        close=close,  # type: ignore[arg-type]
        volume=volume,
    )


def parse_csv(content: str) -> list[PricePoint]:
    """Parse CSV text into an ascending price series.

    Raises:
        CsvFormatError: If the content is empty or has no header row.
    """
    rows = [row for row in csv.reader(io.StringIO(content.strip())) if row]
    if not rows:
        raise CsvFormatError("CSV content is empty")

    header = rows[0]
    if _parse_row(header) is not None:
        raise CsvFormatError("missing header row", line=1)

    points: list[PricePoint] = []
    dropped = 0
    for line_no, row in enumerate(rows[1:], start=2):
        point = _parse_row(row)
        if point is None:
            dropped += 1
            log.debug("csv_row_dropped", line=line_no)
            continue
        points.append(point)

    if dropped:
        log.info("csv_rows_dropped", dropped=dropped, kept=len(points))
    return sort_price_series(points)


def load_csv_file(path: str | Path) -> list[PricePoint]:
    """Read and parse a CSV file.

    Raises:
        DataSourceNotFoundError: If the file does not exist or cannot be read.
        CsvFormatError: If the file is not UTF-8 or its content is unusable.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise CsvFormatError(f"{path} is not UTF-8 text: {e}") from e
    except OSError as e:
        raise DataSourceNotFoundError(f"Cannot read {path}: {e}") from e

    points = parse_csv(content)
    log.info("series_loaded", path=str(path), point_count=len(points))
    return points


def symbol_csv_path(symbol: str, data_dir: str | Path) -> Path:
    """Path of a symbol's daily data file: <data_dir>/<SYMBOL>_daily_data.csv."""
    return Path(data_dir) / f"{symbol.upper()}_daily_data.csv"


def load_symbol(symbol: str, data_dir: str | Path) -> list[PricePoint]:
    """Load the daily series for a symbol from the data directory.

    Raises:
        DataSourceNotFoundError: If the symbol has no data file.
    """
    path = symbol_csv_path(symbol, data_dir)
    if not path.is_file():
        raise DataSourceNotFoundError(f"No data for {symbol.upper()} at {path}")
    return load_csv_file(path)
