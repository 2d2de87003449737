"""Upload pipeline — decode, parse and validate one file."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from sheetcheck.core.config import AppSettings
from sheetcheck.core.exceptions import FatalParseError
from sheetcheck.core.protocols import IClock
from sheetcheck.models.findings import ValidationResult
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.base import BaseService
from sheetcheck.services.ingest.file_parser import FileParserService
from sheetcheck.services.validator.engine import RuleEngine

logger = logging.getLogger(__name__)


class ProcessedBatch(BaseModel):
    """Parsed records of one upload and their validation."""

    model_config = ConfigDict(frozen=True)

    records: list[TimesheetRecord]
    validation: ValidationResult


class UploadPipeline(BaseService):
    """Parser output feeds the rule engine; a parse failure aborts everything."""

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        clock: IClock | None = None,
    ) -> None:
        super().__init__(settings=settings, clock=clock)
        self._parser = FileParserService(settings=self._settings)
        self._engine = RuleEngine(settings=self._settings, clock=self._clock)

    def decode(self, data: bytes | str) -> str:
        if isinstance(data, str):
            return data
        try:
            return data.decode(self._settings.ingest.encoding)
        except UnicodeDecodeError as exc:
            logger.warning("Rejected upload: %s", exc)
            raise FatalParseError(f"File is not valid {self._settings.ingest.encoding} text") from exc

    def process(self, data: bytes | str) -> ProcessedBatch:
        records = self._parser.parse(self.decode(data))
        logger.debug("Upload parsed into %d record(s); validating", len(records))
        return ProcessedBatch(records=records, validation=self._engine.validate(records))

    def revalidate(self, records: list[TimesheetRecord]) -> ValidationResult:
        """Validate an edited record set from scratch."""
        return self._engine.validate(records)


def process_upload(
    data: bytes | str,
    *,
    settings: AppSettings | None = None,
    clock: IClock | None = None,
) -> ProcessedBatch:
    """Decode, parse and validate an uploaded file. Raises FatalParseError."""
    return UploadPipeline(settings=settings, clock=clock).process(data)
