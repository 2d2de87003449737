"""CSV export — re-serializes records with a fixed, ordered column list."""

from __future__ import annotations

from typing import Iterable

from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.ingest.destring import format_hours

EXPORT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Employee ID", "employee_id"),
    ("Start Date", "start_date"),
    ("End Date", "end_date"),
    ("Timesheet Status", "timesheet_status"),
    ("Schedule Hours", "schedule_hours"),
    ("Reported Hours", "reported_hours"),
    ("Regular Hours", "regular_hours"),
    ("Overtime Hours", "overtime_hours"),
    ("Holiday Hours", "holiday_hours"),
    ("Leave Hours", "leave_hours"),
    ("Total Hours", "total_hours"),
)

# Status text may contain commas or slashes; always quoted.
QUOTED_ATTRS = frozenset({"timesheet_status"})


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _cell(record: TimesheetRecord, attr: str) -> str:
    value = getattr(record, attr)
    if attr in QUOTED_ATTRS:
        return _quote(value)
    if isinstance(value, str):
        return _quote(value) if any(c in value for c in ',"\r\n') else value
    return format_hours(value)


def export_csv(records: Iterable[TimesheetRecord]) -> str:
    """Serialize records to CSV text. Re-parses to equal records."""
    lines = [",".join(header for header, _ in EXPORT_COLUMNS)]
    for record in records:
        lines.append(",".join(_cell(record, attr) for _, attr in EXPORT_COLUMNS))
    return "\n".join(lines)
