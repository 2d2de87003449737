"""JSON export of records using canonical field names."""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Iterable

from sheetcheck.models.timesheet_record import TimesheetRecord


class _DecimalEncoder(json.JSONEncoder):
    """Encode Decimal values as int or float for JSON serialization."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Decimal):
            return int(o) if o == int(o) else float(o)
        return super().default(o)


def export_json(records: Iterable[TimesheetRecord], indent: int = 2) -> str:
    """Indented JSON array of canonical record fields. Extra columns are dropped."""
    return json.dumps([r.canonical() for r in records], cls=_DecimalEncoder, indent=indent)
