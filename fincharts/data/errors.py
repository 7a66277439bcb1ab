"""Data source error hierarchy.

All loader exceptions inherit from DataSourceError so callers can handle
them at the boundary without catching unrelated failures.
"""

from __future__ import annotations


class DataSourceError(Exception):
    """Base exception for price data loading failures."""


class DataSourceNotFoundError(DataSourceError):
    """Requested file or symbol has no data on disk."""


class CsvFormatError(DataSourceError):
    """CSV content is structurally unusable (e.g. missing header).

    Stores the offending line number (1-based) when known.
    """

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        self.message = message
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(f"{prefix}{message}")
