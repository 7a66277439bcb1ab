"""Display formatting for tooltips and axis labels."""

from __future__ import annotations

from datetime import date


def format_date(d: date) -> str:
    """Format as 'Jan 5, 2024'."""
    return f"{d:%b} {d.day}, {d.year}"


def format_number(value: float) -> str:
    """Two decimals with thousands separators: 1234.5 -> '1,234.50'."""
    return f"{value:,.2f}"


def format_volume(volume: float) -> str:
    """Abbreviate large volumes: 1_500_000 -> '1.50M'.

    Values below one thousand are returned unabbreviated.
    """
    if volume >= 1e9:
        return f"{volume / 1e9:.2f}B"
    if volume >= 1e6:
        return f"{volume / 1e6:.2f}M"
    if volume >= 1e3:
        return f"{volume / 1e3:.2f}K"
    if float(volume).is_integer():
        return str(int(volume))
    return str(volume)


def format_percent(ratio: float) -> str:
    """Format a ratio as a percentage: 0.0512 -> '5.12%'."""
    return f"{ratio * 100:.2f}%"
