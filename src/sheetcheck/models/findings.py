"""Validation outcome models: findings and the batch result."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"


class Finding(BaseModel):
    """One validation outcome tied to a row and field."""

    model_config = ConfigDict(frozen=True)

    row: int  # 1-based
    field: str  # canonical camelCase field name
    message: str
    severity: Severity


class ValidationResult(BaseModel):
    """All findings for a batch, split by severity, in row order."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    errors: list[Finding] = Field(default_factory=list)
    warnings: list[Finding] = Field(default_factory=list)

    @computed_field(alias="isValid")
    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def error_count(self) -> int:
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        return len(self.warnings)

    @property
    def findings(self) -> list[Finding]:
        return [*self.errors, *self.warnings]

    @property
    def rows_with_issues(self) -> set[int]:
        return {f.row for f in self.findings}

    def for_row(self, row: int) -> list[Finding]:
        return [f for f in self.findings if f.row == row]


def error(row: int, field: str, message: str) -> Finding:
    return Finding(row=row, field=field, message=message, severity=Severity.ERROR)


def warning(row: int, field: str, message: str) -> Finding:
    return Finding(row=row, field=field, message=message, severity=Severity.WARNING)
