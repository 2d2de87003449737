"""sheetcheck exception hierarchy."""

from __future__ import annotations

from typing import Iterable


class SheetCheckError(Exception):
    """Base exception for all sheetcheck errors."""


class FatalParseError(SheetCheckError):
    """Input text could not be read as a timesheet CSV. Aborts the whole batch."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.line = line
        if line is not None:
            message = f"{message} (line {line})"
        super().__init__(f"CSV parsing error: {message}")


class InvalidStatusError(SheetCheckError):
    """Requested status is not one of the known timesheet statuses."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"Unknown timesheet status {status!r}")


class RowSelectionError(SheetCheckError):
    """Selected row numbers fall outside the batch."""

    def __init__(self, rows: Iterable[int], record_count: int) -> None:
        self.rows = sorted(rows)
        self.record_count = record_count
        super().__init__(
            f"Rows {self.rows} out of range; batch has {record_count} record(s)"
        )
