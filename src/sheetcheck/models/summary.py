"""Batch summary models for review screens and selections."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class HoursBreakdown(BaseModel):
    regular: Decimal = Decimal("0")
    overtime: Decimal = Decimal("0")
    holiday: Decimal = Decimal("0")
    leave: Decimal = Decimal("0")


class EmployeeTotals(BaseModel):
    """Per-employee hour totals across all periods in a batch."""

    employee_id: str
    total_hours: Decimal = Decimal("0")
    scheduled_hours: Decimal = Decimal("0")
    reported_hours: Decimal = Decimal("0")
    overtime_hours: Decimal = Decimal("0")
    periods: int = 0


class BatchSummary(BaseModel):
    """Aggregated statistics for a set of records."""

    record_count: int = 0
    employee_count: int = 0
    total_hours: Decimal = Decimal("0")
    total_scheduled_hours: Decimal = Decimal("0")
    average_hours: Decimal = Decimal("0")
    status_counts: dict[str, int] = Field(default_factory=dict)
    hours_breakdown: HoursBreakdown = HoursBreakdown()
    employees: list[EmployeeTotals] = Field(default_factory=list)
