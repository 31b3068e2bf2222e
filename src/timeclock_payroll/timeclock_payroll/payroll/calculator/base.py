from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import PayBreakdown, PayRates


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        *,
        rates: PayRates,
        days_worked: Decimal,
        absence_days: Decimal,
        end_of_month: bool,
    ) -> PayBreakdown:
        raise NotImplementedError
