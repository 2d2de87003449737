"""Tests for header synonym normalization."""

from __future__ import annotations

import pytest

from sheetcheck.services.ingest.header_normalizer import normalize_header, normalize_headers


class TestNormalizeHeader:
    @pytest.mark.parametrize("header", ["Empl ID", "employee id", "EMPLOYEE_ID", " id "])
    def test_employee_id_synonyms(self, header):
        assert normalize_header(header) == "employeeId"

    @pytest.mark.parametrize(
        ("header", "expected"),
        [
            ("Start Date", "startDate"),
            ("startdate", "startDate"),
            ("End_Date", "endDate"),
            ("Status", "timesheetStatus"),
            ("Timesheet Status", "timesheetStatus"),
            ("Scheduled Hours", "scheduleHours"),
            ("schedule_hours", "scheduleHours"),
            ("Reported Hours", "reportedHours"),
            ("regular_hours", "regularHours"),
            ("Overtime Hours", "overtimeHours"),
            ("Holiday Hours", "holidayHours"),
            ("leave hours", "leaveHours"),
            ("Total Hours", "totalHours"),
        ],
    )
    def test_known_synonyms(self, header, expected):
        assert normalize_header(header) == expected

    def test_unknown_header_passes_through_unchanged(self):
        assert normalize_header(" Department ") == " Department "

    def test_normalize_headers_keeps_order(self):
        assert normalize_headers(["Status", "Cost Center", "ID"]) == [
            "timesheetStatus", "Cost Center", "employeeId",
        ]
