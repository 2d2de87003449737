"""Shared test doubles and record builders."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Any

from sheetcheck.core.clock import FixedClock
from sheetcheck.models.timesheet_record import TimesheetRecord

TODAY = date(2024, 6, 15)


def fixed_clock() -> FixedClock:
    return FixedClock(TODAY)


def make_record(**overrides: Any) -> TimesheetRecord:
    """A clean Approved 40-hour week ending shortly before TODAY."""
    fields: dict[str, Any] = {
        "employee_id": "E100",
        "start_date": "2024-06-03",
        "end_date": "2024-06-10",
        "timesheet_status": "Approved",
        "schedule_hours": Decimal("40"),
        "reported_hours": Decimal("40"),
        "regular_hours": Decimal("40"),
        "overtime_hours": Decimal("0"),
        "holiday_hours": Decimal("0"),
        "leave_hours": Decimal("0"),
        "total_hours": Decimal("40"),
    }
    fields.update(overrides)
    return TimesheetRecord(**fields)


__all__ = ["TODAY", "FixedClock", "fixed_clock", "make_record"]
