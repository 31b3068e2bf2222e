from __future__ import annotations

from decimal import Decimal

from ...core.constants import DEFAULT_BONUS_MAX_ABSENCE_DAYS
from ..model import PayBreakdown, PayRates
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule.

    salary = days worked x daily rate. The flat bonus is paid in full only on
    an end-of-month run with at most `max_absence_days` absences, never
    pro-rated. Compensation is always reported, but it is only added to
    total_pay on end-of-month runs; a mid-month run pays the salary alone.
    """

    def __init__(self, *, max_absence_days: Decimal = DEFAULT_BONUS_MAX_ABSENCE_DAYS):
        self._max_absence_days = Decimal(str(max_absence_days))

    def compute(
        self,
        *,
        rates: PayRates,
        days_worked: Decimal,
        absence_days: Decimal,
        end_of_month: bool,
    ) -> PayBreakdown:
        salary = days_worked * rates.daily_rate
        bonus = rates.bonus if end_of_month and absence_days <= self._max_absence_days else Decimal("0")
        compensation = rates.compensation

        if end_of_month:
            total_pay = salary + bonus + compensation
        else:
            total_pay = salary

        return PayBreakdown(salary=salary, bonus=bonus, compensation=compensation, total_pay=total_pay)
