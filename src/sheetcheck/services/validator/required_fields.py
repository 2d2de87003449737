"""Required-field checks."""

from __future__ import annotations

from sheetcheck.models.findings import Finding, error
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.validator.context import RuleContext

REQUIRED_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("employee_id", "employeeId", "Employee ID is required"),
    ("start_date", "startDate", "Start date is required"),
    ("end_date", "endDate", "End date is required"),
    ("timesheet_status", "timesheetStatus", "Timesheet status is required"),
)


def check_required_fields(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    return [
        error(row, field, message)
        for attr, field, message in REQUIRED_FIELDS
        if not getattr(record, attr)
    ]
