"""Record filter criteria."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class TimesheetFilter(BaseModel):
    """Criteria for narrowing a record list. Unset fields do not filter."""

    search_term: str = ""
    employee_id: str = ""
    status: str = ""
    start_date_from: Optional[str] = None
    start_date_to: Optional[str] = None
    min_hours: Optional[Decimal] = None
    max_hours: Optional[Decimal] = None

    model_config = {"str_strip_whitespace": True}

    @property
    def active_count(self) -> int:
        return sum(
            1 for v in (
                self.search_term, self.employee_id, self.status,
                self.start_date_from, self.start_date_to,
                self.min_hours, self.max_hours,
            )
            if v not in (None, "")
        )
