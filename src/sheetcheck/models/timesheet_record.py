"""Canonical Timesheet Record — the normalized structure every check operates on.

Every uploaded CSV, regardless of header spelling, is parsed into this schema.
Attributes are snake_case; the camelCase aliases are the canonical field names
used in findings, exports and header normalization.
"""

from __future__ import annotations

from decimal import Decimal
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel


class TimesheetStatus(StrEnum):
    APPROVED = "Approved"
    PARTIALLY_SUBMITTED = "Partially Submitted"
    NEEDS_APPROVAL = "Needs Approval"
    NOT_SUBMITTED = "Not Submitted"
    ABSENCE_HOLIDAY = "Absence/Holiday"
    PARTIALLY_APPROVED = "Partially Approved"


KNOWN_STATUSES: tuple[str, ...] = tuple(s.value for s in TimesheetStatus)

HOUR_FIELDS: tuple[str, ...] = (
    "scheduleHours",
    "reportedHours",
    "regularHours",
    "overtimeHours",
    "holidayHours",
    "leaveHours",
    "totalHours",
)

# Hour values must fit the default decimal context precision so that sums
# and comparisons never overflow.
MAX_HOURS_EXPONENT = 28


def hours_in_range(value: Decimal) -> bool:
    return value.is_finite() and (not value or abs(value.adjusted()) <= MAX_HOURS_EXPONENT)


class TimesheetRecord(BaseModel):
    """One timesheet period for one employee."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",  # unmapped CSV columns ride along untouched
        str_strip_whitespace=True,
    )

    # --- Identity & period ---
    employee_id: str = ""
    start_date: str = ""  # free-form until validated
    end_date: str = ""
    timesheet_status: str = ""

    # --- Hour buckets ---
    schedule_hours: Decimal = Decimal("0")
    reported_hours: Decimal = Decimal("0")
    regular_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    holiday_hours: Decimal = Decimal("0")
    leave_hours: Decimal = Decimal("0")
    total_hours: Decimal = Decimal("0")

    @field_validator(
        "schedule_hours", "reported_hours", "regular_hours", "overtime_hours",
        "holiday_hours", "leave_hours", "total_hours",
    )
    @classmethod
    def _bounded(cls, value: Decimal) -> Decimal:
        if not hours_in_range(value):
            raise ValueError(f"hour value {value} is out of range")
        return value if value else Decimal("0")

    @property
    def breakdown_hours(self) -> Decimal:
        """Regular + overtime + holiday + leave."""
        return (
            self.regular_hours + self.overtime_hours
            + self.holiday_hours + self.leave_hours
        )

    @property
    def has_hours(self) -> bool:
        """True if any of reported, regular, overtime, holiday or leave is positive."""
        return any(
            h > 0 for h in (
                self.reported_hours, self.regular_hours, self.overtime_hours,
                self.holiday_hours, self.leave_hours,
            )
        )

    def canonical(self) -> dict[str, object]:
        """Canonical fields only, keyed by camelCase name."""
        return self.model_dump(by_alias=True, include=set(type(self).model_fields))
