"""Per-run inputs shared by every record check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from sheetcheck.core.config import RuleSettings


@dataclass(frozen=True)
class RuleContext:
    """Reference date and thresholds for one validation pass."""

    today: date
    rules: RuleSettings
