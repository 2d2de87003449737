"""Bulk status update — builds a new record set and revalidates it from scratch."""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from sheetcheck.core.config import AppSettings
from sheetcheck.core.exceptions import InvalidStatusError
from sheetcheck.core.protocols import IClock
from sheetcheck.core.types import RowNumber
from sheetcheck.models.findings import ValidationResult
from sheetcheck.models.timesheet_record import KNOWN_STATUSES, TimesheetRecord
from sheetcheck.services.review.selection import check_rows
from sheetcheck.services.validator.engine import RuleEngine

logger = logging.getLogger(__name__)


def apply_status_update(
    records: Sequence[TimesheetRecord],
    rows: Iterable[RowNumber],
    new_status: str,
    *,
    settings: AppSettings | None = None,
    clock: IClock | None = None,
) -> tuple[list[TimesheetRecord], ValidationResult]:
    """Set ``new_status`` on the given 1-based rows.

    The input records are left untouched; the returned list holds copies for
    the selected rows and the original objects elsewhere, together with a
    fresh validation of the whole batch.
    """
    if new_status not in KNOWN_STATUSES:
        raise InvalidStatusError(new_status)
    selected = check_rows(rows, len(records))

    updated = [
        record.model_copy(update={"timesheet_status": new_status})
        if row in selected else record
        for row, record in enumerate(records, start=1)
    ]
    logger.info("Set status %r on %d row(s)", new_status, len(selected))
    return updated, RuleEngine(settings=settings, clock=clock).validate(updated)
