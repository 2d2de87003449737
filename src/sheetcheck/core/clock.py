"""Clock implementations for IClock."""

from __future__ import annotations

from datetime import date


class SystemClock:
    """Production IClock reading the local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """IClock pinned to a single date, for reproducible validation runs."""

    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
