"""Calendar date parsing for timesheet period fields."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

# Tried in order for text that is not an extended ISO date.
DATE_FORMATS: tuple[str, ...] = ("%Y/%m/%d", "%m/%d/%Y", "%m-%d-%Y")

# Extended calendar form only; compact (20240301) and week dates are rejected.
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}(?:[T ]|$)")


def parse_date(value: str) -> Optional[date]:
    """Return the calendar date in ``value``, or None if it is not a date.

    Accepts ISO dates and datetimes (``2024-03-01``, ``2024-03-01T08:00``),
    ``YYYY/MM/DD`` and US ``MM/DD/YYYY`` or ``MM-DD-YYYY`` spellings.
    """
    text = value.strip()
    if not text:
        return None
    if _ISO_DATE.match(text):
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def years_before(anchor: date, years: int) -> date:
    """Same month/day ``years`` earlier; Feb 29 falls back to Feb 28."""
    try:
        return anchor.replace(year=anchor.year - years)
    except ValueError:
        return anchor.replace(year=anchor.year - years, day=28)
