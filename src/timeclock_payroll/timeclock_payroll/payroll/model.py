from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..common.datetime_utils import days_between_inclusive, days_in_month, is_end_of_month
from ..common.validators import to_decimal
from ..core.exceptions import ValidationError
from ..employees.model import Employee


@dataclass(frozen=True)
class PayPeriod:
    """Inclusive calendar range of a payroll run."""

    start: date
    end: date

    def __post_init__(self):
        if self.start > self.end:
            raise ValidationError("Start date must not be after end date.")

    @property
    def is_end_of_month(self) -> bool:
        return is_end_of_month(self.end)

    @property
    def days_in_period(self) -> int:
        return days_between_inclusive(self.start, self.end)

    @property
    def days_in_month(self) -> int:
        return days_in_month(self.end)


@dataclass(frozen=True)
class PayRates:
    daily_rate: Decimal
    bonus: Decimal
    compensation: Decimal

    @classmethod
    def for_employee(cls, employee: Employee) -> "PayRates":
        # Unset rates count as zero.
        return cls(
            daily_rate=to_decimal(employee.daily_rate),
            bonus=to_decimal(employee.bonus),
            compensation=to_decimal(employee.compensation),
        )


@dataclass(frozen=True)
class AttendanceSummary:
    total_hours: Decimal
    days_worked: Decimal


@dataclass(frozen=True)
class PayBreakdown:
    salary: Decimal
    bonus: Decimal
    compensation: Decimal
    total_pay: Decimal


@dataclass(frozen=True)
class PayrollRecord:
    """Persisted result of one payroll run for one employee (append-only)."""

    record_id: int
    employee_id: int
    start_date: date
    end_date: date
    total_days_worked: Decimal
    total_hours_worked: Decimal
    salary: Decimal
    bonus: Decimal
    compensation: Decimal
    total_pay: Decimal
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PayrollLine:
    """One employee's row in a payroll report."""

    employee_id: int
    user_id: str
    full_name: str
    branch: str
    total_hours: Decimal
    total_days_worked: Decimal
    salary: Decimal
    bonus: Decimal
    compensation: Decimal
    total_pay: Decimal
    absence_days: Decimal
    total_days_in_period: int
    total_days_in_month: int
    record_id: Optional[int] = None
