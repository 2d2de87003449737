"""RuleEngine — runs every record check over a batch and collects findings.

Checks are independent pure functions evaluated in a fixed order with no
short-circuiting, so one record may yield many findings. Records carry no
state between each other. Findings are rebuilt from scratch on every call.
"""

from __future__ import annotations

import logging
from typing import Sequence

from sheetcheck.core.config import AppSettings
from sheetcheck.core.protocols import IClock, IRecordCheck
from sheetcheck.models.findings import Finding, Severity, ValidationResult
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.base import BaseService
from sheetcheck.services.validator.context import RuleContext
from sheetcheck.services.validator.date_checks import check_date_range, check_date_staleness
from sheetcheck.services.validator.hour_checks import (
    check_breakdown_consistency,
    check_negative_hours,
    check_reported_within_schedule,
    check_schedule_hours,
    check_total_matches_breakdown,
)
from sheetcheck.services.validator.required_fields import check_required_fields
from sheetcheck.services.validator.status_checks import (
    check_status_consistency,
    check_status_known,
)

logger = logging.getLogger(__name__)

DEFAULT_CHECKS: tuple[IRecordCheck, ...] = (
    check_required_fields,
    check_status_known,
    check_date_range,
    check_schedule_hours,
    check_negative_hours,
    check_total_matches_breakdown,
    check_reported_within_schedule,
    check_status_consistency,
    check_date_staleness,
    check_breakdown_consistency,
)


class RuleEngine(BaseService):
    """Validates a record batch. Never raises on record content."""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        clock: IClock | None = None,
        checks: Sequence[IRecordCheck] = DEFAULT_CHECKS,
    ) -> None:
        super().__init__(settings=settings, clock=clock)
        self._checks = tuple(checks)

    def check_record(
        self, record: TimesheetRecord, row: int, ctx: RuleContext
    ) -> list[Finding]:
        findings: list[Finding] = []
        for check in self._checks:
            findings.extend(check(record, row, ctx))
        return findings

    def validate(self, records: Sequence[TimesheetRecord]) -> ValidationResult:
        ctx = RuleContext(today=self._clock.today(), rules=self._settings.rules)
        errors: list[Finding] = []
        warnings: list[Finding] = []
        for row, record in enumerate(records, start=1):
            for finding in self.check_record(record, row, ctx):
                if finding.severity == Severity.ERROR:
                    errors.append(finding)
                else:
                    warnings.append(finding)

        result = ValidationResult(errors=errors, warnings=warnings)
        logger.info(
            "Validated %d record(s): %d error(s), %d warning(s)",
            len(records), result.error_count, result.warning_count,
        )
        return result


def validate(
    records: Sequence[TimesheetRecord],
    *,
    settings: AppSettings | None = None,
    clock: IClock | None = None,
) -> ValidationResult:
    """Validate records against the timesheet business rules."""
    return RuleEngine(settings=settings, clock=clock).validate(records)
