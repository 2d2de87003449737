"""Pydantic models for records, findings, filters and summaries."""
