"""Batch and selection statistics."""

from __future__ import annotations

from collections import Counter
from decimal import Decimal
from typing import Sequence

from sheetcheck.models.summary import BatchSummary, EmployeeTotals, HoursBreakdown
from sheetcheck.models.timesheet_record import TimesheetRecord


def summarize(records: Sequence[TimesheetRecord]) -> BatchSummary:
    """Totals, averages and distributions for ``records``.

    Average hours is total hours over the record count (0 for an empty batch).
    """
    total = sum((r.total_hours for r in records), Decimal("0"))
    scheduled = sum((r.schedule_hours for r in records), Decimal("0"))

    employees: dict[str, EmployeeTotals] = {}
    breakdown = HoursBreakdown()
    for r in records:
        emp = employees.setdefault(r.employee_id, EmployeeTotals(employee_id=r.employee_id))
        emp.total_hours += r.total_hours
        emp.scheduled_hours += r.schedule_hours
        emp.reported_hours += r.reported_hours
        emp.overtime_hours += r.overtime_hours
        emp.periods += 1
        breakdown.regular += r.regular_hours
        breakdown.overtime += r.overtime_hours
        breakdown.holiday += r.holiday_hours
        breakdown.leave += r.leave_hours

    return BatchSummary(
        record_count=len(records),
        employee_count=len(employees),
        total_hours=total,
        total_scheduled_hours=scheduled,
        average_hours=total / max(len(records), 1),
        status_counts=dict(Counter(r.timesheet_status for r in records)),
        hours_breakdown=breakdown,
        employees=list(employees.values()),
    )
