"""FileParserService — parses raw timesheet CSV text into canonical records."""

from __future__ import annotations

import csv
import io
import logging

from pydantic import ValidationError

from sheetcheck.core.config import AppSettings
from sheetcheck.core.exceptions import FatalParseError
from sheetcheck.models.timesheet_record import TimesheetRecord
from sheetcheck.services.base import BaseService
from sheetcheck.services.ingest.destring import destring_row
from sheetcheck.services.ingest.header_normalizer import normalize_headers

logger = logging.getLogger(__name__)


def _is_empty_line(row: list[str]) -> bool:
    # Only truly empty lines; a row of bare delimiters is still a record.
    return row in ([], [""])


class FileParserService(BaseService):
    """Reads a header-first delimited file into an ordered list of records.

    A leading byte-order mark is ignored. Any reader fault (bad quoting, a
    row with the wrong number of columns, no header) aborts the whole file
    with a single FatalParseError; no partial results are returned.
    """

    def parse(self, raw_text: str) -> list[TimesheetRecord]:
        reader = csv.reader(
            io.StringIO(raw_text.removeprefix("\ufeff"), newline=""),
            delimiter=self._settings.ingest.delimiter,
            strict=True,
        )
        headers: list[str] | None = None
        records: list[TimesheetRecord] = []
        try:
            for raw_row in reader:
                if _is_empty_line(raw_row):
                    continue
                if headers is None:
                    headers = normalize_headers(raw_row)
                    continue
                if len(raw_row) != len(headers):
                    raise FatalParseError(
                        f"Expected {len(headers)} fields but found {len(raw_row)}",
                        line=reader.line_num,
                    )
                records.append(self._to_record(headers, raw_row, reader.line_num))
        except csv.Error as exc:
            logger.warning("Rejected CSV at line %d: %s", reader.line_num, exc)
            raise FatalParseError(str(exc), line=reader.line_num) from exc
        except FatalParseError as exc:
            logger.warning("Rejected CSV: %s", exc)
            raise

        if headers is None:
            logger.warning("Rejected CSV: no header row")
            raise FatalParseError("No header row found")

        logger.info("Parsed %d timesheet record(s)", len(records))
        return records

    @staticmethod
    def _to_record(headers: list[str], values: list[str], line: int) -> TimesheetRecord:
        # Later duplicate columns win
        row = {h: v for h, v in zip(headers, values) if h.strip()}
        try:
            return TimesheetRecord.model_validate(destring_row(row))
        except ValidationError as exc:
            raise FatalParseError(f"Unreadable row: {exc}", line=line) from exc


def parse(raw_text: str, settings: AppSettings | None = None) -> list[TimesheetRecord]:
    """Parse CSV text into records. Raises FatalParseError on malformed input."""
    return FileParserService(settings=settings).parse(raw_text)
