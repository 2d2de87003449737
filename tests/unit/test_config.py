"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from decimal import Decimal

from sheetcheck.core.config import AppSettings, IngestSettings, RuleSettings


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.log_level == "INFO"
    assert settings.ingest.delimiter == ","


def test_rule_settings_defaults():
    rules = RuleSettings()
    assert rules.max_period_days == 14
    assert rules.max_schedule_hours == Decimal("80")
    assert rules.total_tolerance == Decimal("0.01")
    assert rules.stale_after_years == 1
    assert rules.submitted_tolerant_statuses == {
        "Approved", "Partially Approved", "Partially Submitted",
    }


def test_rule_settings_env_override(monkeypatch):
    monkeypatch.setenv("SHEETCHECK_RULES_MAX_PERIOD_DAYS", "21")
    monkeypatch.setenv("SHEETCHECK_RULES_TOTAL_TOLERANCE", "0.05")
    rules = RuleSettings()
    assert rules.max_period_days == 21
    assert rules.total_tolerance == Decimal("0.05")


def test_ingest_settings_env_override(monkeypatch):
    monkeypatch.setenv("SHEETCHECK_INGEST_DELIMITER", ";")
    assert IngestSettings().delimiter == ";"
