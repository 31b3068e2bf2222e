from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import PayrollRecord


class PayrollRepository(Protocol):
    """Append-only store of payroll results; rows are never updated or deleted."""

    def insert(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        total_days_worked: Decimal,
        total_hours_worked: Decimal,
        salary: Decimal,
        bonus: Decimal,
        compensation: Decimal,
        total_pay: Decimal,
    ) -> int:
        raise NotImplementedError

    def list_records(self, *, employee_id: Optional[int] = None, limit: int = 500) -> Sequence[PayrollRecord]:
        """Newest first."""

        raise NotImplementedError
