from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Optional

from ..common.validators import to_decimal
from ..core.constants import FULL_DAY_MIN_HOURS, HALF_DAY_MIN_HOURS
from .model import AttendanceSummary, PayPeriod

NO_CREDIT = Decimal("0")
HALF_DAY = Decimal("0.5")
FULL_DAY = Decimal("1")


class DayCreditClassifier:
    """Turn session durations into worked-day credit and absences.

    hours <= 5 earns nothing, 5 < hours < 9 earns half a day, 9 or more earns a
    full day. Open sessions (no total_hours yet) count as zero hours.
    """

    def __init__(
        self,
        *,
        half_day_min_hours: Decimal = HALF_DAY_MIN_HOURS,
        full_day_min_hours: Decimal = FULL_DAY_MIN_HOURS,
    ):
        self._half = to_decimal(half_day_min_hours)
        self._full = to_decimal(full_day_min_hours)

    def classify(self, hours) -> Decimal:
        h = to_decimal(hours)
        if h >= self._full:
            return FULL_DAY
        if h > self._half:
            return HALF_DAY
        return NO_CREDIT

    def summarize(self, session_hours: Iterable[Optional[Decimal]]) -> AttendanceSummary:
        total_hours = Decimal("0")
        days_worked = Decimal("0")
        for hours in session_hours:
            h = to_decimal(hours)
            total_hours += h
            days_worked += self.classify(h)
        return AttendanceSummary(total_hours=total_hours, days_worked=days_worked)

    @staticmethod
    def absence_days(days_worked: Decimal, period: PayPeriod) -> Decimal:
        """Absences for the run.

        A run ending on the last day of a month is judged against the whole
        month, whatever its start date; any other run only against its own
        range.
        """
        if period.is_end_of_month:
            return Decimal(period.days_in_month) - days_worked
        return Decimal(period.days_in_period) - days_worked
