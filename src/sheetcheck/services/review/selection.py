"""Row selection helpers."""

from __future__ import annotations

from typing import Iterable, Sequence

from sheetcheck.core.exceptions import RowSelectionError
from sheetcheck.core.types import RowNumber
from sheetcheck.models.findings import ValidationResult
from sheetcheck.models.timesheet_record import TimesheetRecord


def check_rows(rows: Iterable[RowNumber], record_count: int) -> set[RowNumber]:
    """Return the rows as a set, raising if any is outside 1..record_count."""
    selected = set(rows)
    bad = {r for r in selected if not 1 <= r <= record_count}
    if bad:
        raise RowSelectionError(bad, record_count)
    return selected


def select_rows(records: Sequence[TimesheetRecord], rows: Iterable[RowNumber]) -> list[TimesheetRecord]:
    """Records at the given 1-based rows, in batch order."""
    selected = check_rows(rows, len(records))
    return [r for row, r in enumerate(records, start=1) if row in selected]


def rows_with_issues(result: ValidationResult) -> list[RowNumber]:
    return sorted(result.rows_with_issues)


def rows_with_status(records: Sequence[TimesheetRecord], status: str) -> list[RowNumber]:
    return [row for row, r in enumerate(records, start=1) if r.timesheet_status == status]
