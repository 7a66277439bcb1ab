"""Symbols shipped with the bundled daily data set."""

from __future__ import annotations

_SYMBOL_NAMES: dict[str, str] = {
    "AAPL": "Apple Inc.",
    "AMZN": "Amazon.com Inc.",
    "GOOGL": "Alphabet Inc.",
    "META": "Meta Platforms Inc.",
    "MSFT": "Microsoft Corporation",
    "NVDA": "NVIDIA Corporation",
    "TSLA": "Tesla Inc.",
}


def available_symbols() -> list[str]:
    return list(_SYMBOL_NAMES)


def symbol_name(symbol: str) -> str:
    """Company name for a symbol, or the symbol itself if unknown."""
    symbol = symbol.upper()
    return _SYMBOL_NAMES.get(symbol, symbol)
