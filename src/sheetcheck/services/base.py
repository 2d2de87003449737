"""Base service with common dependency wiring."""

from __future__ import annotations

from typing import Any

from sheetcheck.core.clock import SystemClock
from sheetcheck.core.config import AppSettings
from sheetcheck.core.protocols import IClock


class BaseService:
    """Common base for sheetcheck services.

    Settings and clock are injected at construction time; both default to
    the production implementations.
    """

    def __init__(
        self,
        *,
        settings: AppSettings | None = None,
        clock: IClock | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._clock = clock or SystemClock()

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def describe(self) -> dict[str, Any]:
        """Return service identity and environment."""
        return {
            "service": self.__class__.__name__,
            "environment": self._settings.environment,
        }
