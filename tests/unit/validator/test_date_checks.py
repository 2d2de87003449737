"""Tests for period date checks."""

from __future__ import annotations

from sheetcheck.core.config import RuleSettings
from sheetcheck.models.findings import Severity
from sheetcheck.services.validator.context import RuleContext
from sheetcheck.services.validator.date_checks import check_date_range, check_date_staleness
from tests.fakes import TODAY, make_record

CTX = RuleContext(today=TODAY, rules=RuleSettings())


class TestDateRange:
    def test_skipped_when_a_date_is_missing(self):
        assert check_date_range(make_record(start_date="", end_date="garbage"), 1, CTX) == []

    def test_invalid_formats_are_errors(self):
        record = make_record(start_date="soon", end_date="later")
        findings = check_date_range(record, 3, CTX)
        assert [(f.field, f.message, f.severity) for f in findings] == [
            ("startDate", "Invalid start date format", Severity.ERROR),
            ("endDate", "Invalid end date format", Severity.ERROR),
        ]

    def test_same_day_end_is_error(self):
        [f] = check_date_range(make_record(start_date="2024-06-03", end_date="2024-06-03"), 1, CTX)
        assert f.message == "End date must be after start date"

    def test_fourteen_day_period_is_fine(self):
        record = make_record(start_date="2024-05-27", end_date="2024-06-10")
        assert check_date_range(record, 1, CTX) == []

    def test_fifteen_day_period_warns(self):
        record = make_record(start_date="2024-05-26", end_date="2024-06-10")
        [f] = check_date_range(record, 1, CTX)
        assert f.severity == Severity.WARNING
        assert f.message == "Long period (15 days). Typical periods are 7-14 days"

    def test_mixed_date_spellings(self):
        record = make_record(start_date="06/03/2024", end_date="2024-06-10")
        assert check_date_range(record, 1, CTX) == []


class TestDateStaleness:
    def test_future_start_warns(self):
        record = make_record(start_date="2024-06-16", end_date="2024-06-23")
        [f] = check_date_staleness(record, 1, CTX)
        assert (f.field, f.message) == ("startDate", "Start date is in the future")

    def test_start_today_is_not_future(self):
        record = make_record(start_date="2024-06-15", end_date="2024-06-22")
        assert check_date_staleness(record, 1, CTX) == []

    def test_end_over_a_year_ago_warns(self):
        record = make_record(start_date="2023-06-07", end_date="2023-06-14")
        [f] = check_date_staleness(record, 1, CTX)
        assert (f.field, f.message) == ("endDate", "End date is more than 1 year ago")

    def test_end_exactly_a_year_ago_is_fine(self):
        record = make_record(start_date="2023-06-08", end_date="2023-06-15")
        assert check_date_staleness(record, 1, CTX) == []

    def test_skipped_for_unparseable_dates(self):
        record = make_record(start_date="2099-01-01", end_date="nope")
        assert check_date_staleness(record, 1, CTX) == []
