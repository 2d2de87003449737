"""Protocol interfaces for sheetcheck seams.

Structural typing, no inheritance required, easy to swap in tests.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetcheck.models.findings import Finding
    from sheetcheck.models.timesheet_record import TimesheetRecord
    from sheetcheck.services.validator.context import RuleContext


# ---------------------------------------------------------------------------
# Clock
# ---------------------------------------------------------------------------

@runtime_checkable
class IClock(Protocol):
    """Source of the reference date used by time-relative checks."""

    def today(self) -> date: ...


# ---------------------------------------------------------------------------
# Record check
# ---------------------------------------------------------------------------

class IRecordCheck(Protocol):
    """A single rule: inspects one record and returns its findings."""

    def __call__(
        self, record: TimesheetRecord, row: int, ctx: RuleContext
    ) -> list[Finding]: ...
