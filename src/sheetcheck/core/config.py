"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic_settings import BaseSettings


class RuleSettings(BaseSettings):
    """Thresholds used by the validation rule engine."""

    model_config = {"env_prefix": "SHEETCHECK_RULES_"}

    max_period_days: int = 14
    max_schedule_hours: Decimal = Decimal("80")
    total_tolerance: Decimal = Decimal("0.01")  # rounding slack for total vs breakdown
    stale_after_years: int = 1
    submitted_tolerant_statuses: frozenset[str] = frozenset(
        {"Approved", "Partially Approved", "Partially Submitted"}
    )


class IngestSettings(BaseSettings):
    """CSV reader configuration."""

    model_config = {"env_prefix": "SHEETCHECK_INGEST_"}

    delimiter: str = ","
    encoding: str = "utf-8-sig"


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SHEETCHECK_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    rules: RuleSettings = RuleSettings()
    ingest: IngestSettings = IngestSettings()
