"""Hour-field destringing — converts string-encoded hour buckets to Decimal.

Blank or non-numeric values become 0. A leading numeric prefix is honoured,
so ``"7.5h"`` reads as 7.5 and ``"abc"`` as 0.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from sheetcheck.core.types import RawRow
from sheetcheck.models.timesheet_record import HOUR_FIELDS, hours_in_range

_NUMERIC_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

ZERO = Decimal("0")


def to_decimal(value: str | None) -> Decimal:
    """Parse the leading number of ``value``; 0 when there is none or it is out of range."""
    if not value:
        return ZERO
    match = _NUMERIC_PREFIX.match(value.strip())
    if not match:
        return ZERO
    try:
        number = Decimal(match.group(0))
    except InvalidOperation:
        return ZERO
    if not number or not hours_in_range(number):
        return ZERO
    return number


def destring_row(row: RawRow) -> dict[str, object]:
    """Coerce hour buckets to Decimal and trim every other value."""
    out: dict[str, object] = {}
    for key, value in row.items():
        if key in HOUR_FIELDS:
            out[key] = to_decimal(value)
        else:
            out[key] = (value or "").strip()
    return out


def format_hours(value: Decimal) -> str:
    """Shortest plain rendering of an hour value: 40, 7.5, -2."""
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text
