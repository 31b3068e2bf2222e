from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """A registered worker.

    `user_id` is the caller-supplied external identifier used by clock events;
    `employee_id` is the internal row id used by admin updates and payroll rows.
    `branch` is a store *name*, resolved only when the employee clocks in.
    """

    employee_id: int
    user_id: str
    full_name: str
    phone: str
    branch: str
    status: EmployeeStatus
    daily_rate: Optional[Decimal] = None
    bonus: Optional[Decimal] = None
    compensation: Optional[Decimal] = None
    employee_type: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        return self.status == EmployeeStatus.APPROVED


@dataclass(frozen=True)
class EmployeeUpdate:
    full_name: str
    phone: str
    branch: str
    status: EmployeeStatus
    daily_rate: Decimal
    bonus: Decimal
    compensation: Decimal
    employee_type: str
