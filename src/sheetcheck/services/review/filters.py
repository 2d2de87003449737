"""Record filtering for review screens."""

from __future__ import annotations

from typing import Sequence

from sheetcheck.models.filters import TimesheetFilter
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.validator.dates import parse_date


def _matches_search(record: TimesheetRecord, term: str) -> bool:
    needle = term.lower()
    return any(
        needle in value.lower()
        for value in (
            record.employee_id, record.timesheet_status,
            record.start_date, record.end_date,
        )
    )


def filter_records(
    records: Sequence[TimesheetRecord], flt: TimesheetFilter
) -> list[TimesheetRecord]:
    """Records satisfying every set criterion, in original order.

    Once a start-date bound is set, records whose start date does not parse
    are excluded, as are bounds that do not parse.
    """
    date_from = parse_date(flt.start_date_from) if flt.start_date_from else None
    date_to = parse_date(flt.start_date_to) if flt.start_date_to else None

    out: list[TimesheetRecord] = []
    for record in records:
        if flt.search_term and not _matches_search(record, flt.search_term):
            continue
        if flt.employee_id and record.employee_id != flt.employee_id:
            continue
        if flt.status and record.timesheet_status != flt.status:
            continue
        if flt.start_date_from or flt.start_date_to:
            start = parse_date(record.start_date)
            if start is None:
                continue
            if flt.start_date_from and (date_from is None or start < date_from):
                continue
            if flt.start_date_to and (date_to is None or start > date_to):
                continue
        if flt.min_hours is not None and record.total_hours < flt.min_hours:
            continue
        if flt.max_hours is not None and record.total_hours > flt.max_hours:
            continue
        out.append(record)
    return out
