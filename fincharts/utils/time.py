"""Calendar helpers for session dates.

Price points carry day-granularity dates; time of day is discarded on
parse and never consulted.
"""

from __future__ import annotations

from datetime import date, datetime

_DATE_FORMATS = ("%Y-%m-%d", "%Y/%m/%d", "%m/%d/%Y")


def iso_week_number(d: date) -> int:
    """ISO-8601 week number (1-53).

    Weeks run Monday-Sunday; week 1 is the week containing the year's
    first Thursday.
    """
    return d.isocalendar().week


def parse_date(s: str) -> date:
    """Parse a session date, ignoring any time-of-day component.

    Accepts ISO 8601 (with or without a time part, including a Z suffix)
    plus a few common slash formats.

    Raises:
        ValueError: If the string matches none of the accepted formats.
    """
    s = s.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date: {s!r}")
