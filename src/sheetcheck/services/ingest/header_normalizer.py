"""Header normalization — maps vendor header spellings to canonical field names."""

from __future__ import annotations

HEADER_SYNONYMS: dict[str, str] = {
    "empl id": "employeeId",
    "employee id": "employeeId",
    "employee_id": "employeeId",
    "id": "employeeId",
    "start date": "startDate",
    "start_date": "startDate",
    "startdate": "startDate",
    "end date": "endDate",
    "end_date": "endDate",
    "enddate": "endDate",
    "timesheet status": "timesheetStatus",
    "timesheet_status": "timesheetStatus",
    "status": "timesheetStatus",
    "schedule hours": "scheduleHours",
    "schedule_hours": "scheduleHours",
    "scheduled hours": "scheduleHours",
    "scheduled_hours": "scheduleHours",
    "reported hours": "reportedHours",
    "reported_hours": "reportedHours",
    "regular hours": "regularHours",
    "regular_hours": "regularHours",
    "overtime hours": "overtimeHours",
    "overtime_hours": "overtimeHours",
    "holiday hours": "holidayHours",
    "holiday_hours": "holidayHours",
    "leave hours": "leaveHours",
    "leave_hours": "leaveHours",
    "total hours": "totalHours",
    "total_hours": "totalHours",
}


def normalize_header(header: str) -> str:
    """Canonical name for a header, or the header unchanged if unknown."""
    return HEADER_SYNONYMS.get(header.strip().lower(), header)


def normalize_headers(headers: list[str]) -> list[str]:
    return [normalize_header(h) for h in headers]
