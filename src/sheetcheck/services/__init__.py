"""Ingest, validation, review and export services."""
