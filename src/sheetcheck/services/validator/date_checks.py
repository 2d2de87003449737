"""Period date checks: format, ordering, length and staleness."""

from __future__ import annotations

from datetime import date
from typing import Optional

from sheetcheck.models.findings import Finding, error, warning
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.validator.context import RuleContext
from sheetcheck.services.validator.dates import parse_date, years_before


def _period(record: TimesheetRecord) -> tuple[Optional[date], Optional[date]]:
    return parse_date(record.start_date), parse_date(record.end_date)


def check_date_range(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    """Format, ordering and period length. Skipped unless both dates are present."""
    if not (record.start_date and record.end_date):
        return []

    findings: list[Finding] = []
    start, end = _period(record)
    if start is None:
        findings.append(error(row, "startDate", "Invalid start date format"))
    if end is None:
        findings.append(error(row, "endDate", "Invalid end date format"))
    if start is None or end is None:
        return findings

    if end <= start:
        findings.append(error(row, "endDate", "End date must be after start date"))

    days = (end - start).days
    if days > ctx.rules.max_period_days:
        findings.append(warning(
            row, "endDate",
            f"Long period ({days} days). Typical periods are 7-14 days",
        ))
    return findings


def check_date_staleness(
    record: TimesheetRecord, row: int, ctx: RuleContext
) -> list[Finding]:
    """Future start dates and periods that ended too long ago."""
    if not (record.start_date and record.end_date):
        return []
    start, end = _period(record)
    if start is None or end is None:
        return []

    findings: list[Finding] = []
    if start > ctx.today:
        findings.append(warning(row, "startDate", "Start date is in the future"))

    years = ctx.rules.stale_after_years
    if end < years_before(ctx.today, years):
        plural = "year" if years == 1 else "years"
        findings.append(warning(row, "endDate", f"End date is more than {years} {plural} ago"))
    return findings
