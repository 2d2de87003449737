"""sheetcheck — timesheet CSV ingestion and business-rule validation."""

from __future__ import annotations

from sheetcheck.services.export.csv_export import export_csv
from sheetcheck.services.ingest.file_parser import parse
from sheetcheck.services.pipeline import process_upload
from sheetcheck.services.validator.engine import validate

__all__ = ["export_csv", "parse", "process_upload", "validate"]
