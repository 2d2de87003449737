"""Hour-bucket checks: ranges and arithmetic consistency."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

from sheetcheck.models.findings import Finding, error, warning
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.ingest.destring import format_hours
from sheetcheck.services.validator.context import RuleContext

# Buckets that may never be negative, besides scheduled hours.
NON_NEGATIVE_FIELDS: tuple[tuple[str, str], ...] = (
    ("reported_hours", "reportedHours"),
    ("regular_hours", "regularHours"),
    ("overtime_hours", "overtimeHours"),
    ("holiday_hours", "holidayHours"),
    ("leave_hours", "leaveHours"),
    ("total_hours", "totalHours"),
)


def check_schedule_hours(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    findings: list[Finding] = []
    if record.schedule_hours < 0:
        findings.append(error(row, "scheduleHours", "Schedule hours cannot be negative"))
    if record.schedule_hours > ctx.rules.max_schedule_hours:
        findings.append(warning(
            row, "scheduleHours",
            f"Schedule hours over {format_hours(ctx.rules.max_schedule_hours)} "
            "seems unusually high for a period",
        ))
    return findings


def check_negative_hours(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    return [
        error(row, field, f"{field} cannot be negative")
        for attr, field in NON_NEGATIVE_FIELDS
        if getattr(record, attr) < 0
    ]


def check_total_matches_breakdown(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    """Total must equal regular + overtime + holiday + leave, within tolerance.

    Only applies when a positive total was supplied.
    """
    if record.total_hours <= 0:
        return []
    calculated = record.breakdown_hours
    if abs(record.total_hours - calculated) <= ctx.rules.total_tolerance:
        return []
    with localcontext() as dctx:
        dctx.rounding = ROUND_HALF_UP
        shown = format(calculated, ".2f")
    return [error(
        row, "totalHours",
        f"Total hours ({format_hours(record.total_hours)}) "
        f"doesn't match calculated total ({shown})",
    )]


def check_reported_within_schedule(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    """Reported above scheduled is an error, downgraded to a warning for submitted statuses."""
    if record.reported_hours <= record.schedule_hours:
        return []
    reported = format_hours(record.reported_hours)
    scheduled = format_hours(record.schedule_hours)
    if record.timesheet_status in ctx.rules.submitted_tolerant_statuses:
        return [warning(
            row, "reportedHours",
            f"Reported hours ({reported}) exceed schedule hours ({scheduled})",
        )]
    return [error(
        row, "reportedHours",
        f"Reported hours ({reported}) cannot exceed schedule hours ({scheduled})",
    )]


def check_breakdown_consistency(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    breakdown = record.breakdown_hours
    if record.reported_hours > 0 and breakdown == 0:
        return [warning(
            row, "reportedHours",
            "Reported hours exist but no breakdown provided "
            "(regular, overtime, holiday, leave)",
        )]
    if record.reported_hours == 0 and breakdown > 0:
        return [warning(row, "reportedHours", "Hour breakdown provided but reported hours is zero")]
    return []
