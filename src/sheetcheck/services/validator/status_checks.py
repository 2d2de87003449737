"""Status checks: unknown status values and status/hours consistency."""

from __future__ import annotations

from sheetcheck.models.findings import Finding, warning
from sheetcheck.models.timesheet_record import (
    KNOWN_STATUSES,
    TimesheetRecord,
    TimesheetStatus,
)
from sheetcheck.services.validator.context import RuleContext

FIELD = "timesheetStatus"


def check_status_known(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    status = record.timesheet_status
    if not status or status in KNOWN_STATUSES:
        return []
    return [warning(
        row, FIELD,
        f'Unknown status "{status}". Expected: {", ".join(KNOWN_STATUSES)}',
    )]


def check_status_consistency(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    """Compare recorded hours against what the status implies."""
    status = record.timesheet_status

    if status in (TimesheetStatus.APPROVED, TimesheetStatus.PARTIALLY_APPROVED):
        if not record.has_hours:
            return [warning(row, FIELD, "Approved timesheet should have hours recorded")]

    elif status == TimesheetStatus.NOT_SUBMITTED:
        if record.has_hours:
            return [warning(
                row, FIELD,
                "Not submitted timesheet has hours recorded - status may be incorrect",
            )]

    elif status == TimesheetStatus.ABSENCE_HOLIDAY:
        if record.regular_hours != 0 or record.overtime_hours != 0:
            return [warning(
                row, FIELD,
                "Absence/Holiday status should not have regular or overtime hours",
            )]

    elif status in (TimesheetStatus.NEEDS_APPROVAL, TimesheetStatus.PARTIALLY_SUBMITTED):
        if not record.has_hours:
            return [warning(row, FIELD, "Submitted timesheet should have hours recorded")]

    return []
