"""Timesheet business-rule checks and the engine that runs them."""
