"""Tests for required-field and status checks."""

from __future__ import annotations

import pytest

from sheetcheck.core.config import RuleSettings
from sheetcheck.models.findings import Severity
from sheetcheck.services.validator.context import RuleContext
from sheetcheck.services.validator.required_fields import check_required_fields
from sheetcheck.services.validator.status_checks import (
    check_status_consistency,
    check_status_known,
)
from tests.fakes import TODAY, make_record

CTX = RuleContext(today=TODAY, rules=RuleSettings())

NO_HOURS = {
    "reported_hours": "0", "regular_hours": "0", "overtime_hours": "0",
    "holiday_hours": "0", "leave_hours": "0", "total_hours": "0",
}


class TestRequiredFields:
    def test_all_present(self):
        assert check_required_fields(make_record(), 1, CTX) == []

    def test_each_missing_field_is_an_error(self):
        record = make_record(employee_id="", start_date="", end_date="", timesheet_status="")
        findings = check_required_fields(record, 5, CTX)
        assert [f.field for f in findings] == [
            "employeeId", "startDate", "endDate", "timesheetStatus",
        ]
        assert all(f.severity == Severity.ERROR and f.row == 5 for f in findings)

    def test_whitespace_only_counts_as_missing(self):
        [f] = check_required_fields(make_record(employee_id="   "), 1, CTX)
        assert f.message == "Employee ID is required"


class TestStatusKnown:
    def test_unknown_status_warns_with_expected_list(self):
        [f] = check_status_known(make_record(timesheet_status="approved"), 1, CTX)
        assert f.severity == Severity.WARNING
        assert f.message == (
            'Unknown status "approved". Expected: Approved, Partially Submitted, '
            "Needs Approval, Not Submitted, Absence/Holiday, Partially Approved"
        )

    def test_missing_status_is_left_to_required_check(self):
        assert check_status_known(make_record(timesheet_status=""), 1, CTX) == []


class TestStatusConsistency:
    @pytest.mark.parametrize(
        ("status", "message"),
        [
            ("Approved", "Approved timesheet should have hours recorded"),
            ("Partially Approved", "Approved timesheet should have hours recorded"),
            ("Needs Approval", "Submitted timesheet should have hours recorded"),
            ("Partially Submitted", "Submitted timesheet should have hours recorded"),
        ],
    )
    def test_statuses_expecting_hours(self, status, message):
        record = make_record(timesheet_status=status, **NO_HOURS)
        [f] = check_status_consistency(record, 1, CTX)
        assert (f.field, f.message, f.severity) == ("timesheetStatus", message, Severity.WARNING)

    def test_holiday_hours_alone_count_as_hours(self):
        record = make_record(**{**NO_HOURS, "holiday_hours": "8"})
        assert check_status_consistency(record, 1, CTX) == []

    def test_not_submitted_without_hours_is_fine(self):
        record = make_record(timesheet_status="Not Submitted", **NO_HOURS)
        assert check_status_consistency(record, 1, CTX) == []

    def test_absence_with_regular_hours_warns(self):
        record = make_record(timesheet_status="Absence/Holiday")
        [f] = check_status_consistency(record, 1, CTX)
        assert f.message == "Absence/Holiday status should not have regular or overtime hours"

    def test_absence_with_leave_only_is_fine(self):
        record = make_record(
            timesheet_status="Absence/Holiday", regular_hours="0", leave_hours="40",
        )
        assert check_status_consistency(record, 1, CTX) == []

    def test_unknown_status_has_no_expectation(self):
        record = make_record(timesheet_status="Pending", **NO_HOURS)
        assert check_status_consistency(record, 1, CTX) == []
