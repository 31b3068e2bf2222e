from __future__ import annotations

import calendar
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal

_HOURS_QUANTUM = Decimal("0.01")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def days_in_month(day: date) -> int:
    return calendar.monthrange(day.year, day.month)[1]


def is_end_of_month(day: date) -> bool:
    return day.day == days_in_month(day)


def days_between_inclusive(start: date, end: date) -> int:
    return (end - start).days + 1


def hours_between(start: datetime, end: datetime) -> Decimal:
    """Elapsed hours from start to end, rounded half-up to 2 decimals.

    A negative span (clock skew) counts as zero.
    """
    seconds = Decimal(str((end - start).total_seconds()))
    hours = (seconds / Decimal(3600)).quantize(_HOURS_QUANTUM, rounding=ROUND_HALF_UP)
    return max(hours, Decimal("0.00"))
