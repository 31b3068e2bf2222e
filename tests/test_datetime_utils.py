from datetime import date, datetime, timedelta
from decimal import Decimal

from src.timeclock_payroll.timeclock_payroll.common.datetime_utils import (
    days_between_inclusive,
    days_in_month,
    hours_between,
    is_end_of_month,
    parse_iso_date,
)


def test_parse_iso_date():
    assert parse_iso_date("2026-02-28") == date(2026, 2, 28)


def test_days_in_month_handles_leap_years():
    assert days_in_month(date(2024, 2, 10)) == 29
    assert days_in_month(date(2026, 2, 10)) == 28
    assert days_in_month(date(2026, 4, 1)) == 30


def test_is_end_of_month():
    assert is_end_of_month(date(2026, 1, 31))
    assert is_end_of_month(date(2026, 2, 28))
    assert not is_end_of_month(date(2026, 1, 30))


def test_days_between_inclusive_counts_both_ends():
    assert days_between_inclusive(date(2026, 1, 1), date(2026, 1, 1)) == 1
    assert days_between_inclusive(date(2026, 1, 1), date(2026, 1, 15)) == 15


def test_hours_between_rounds_to_two_decimals():
    start = datetime(2026, 1, 5, 8, 0, 0)
    assert hours_between(start, start + timedelta(hours=8, minutes=20)) == Decimal("8.33")
    assert hours_between(start, start + timedelta(minutes=90)) == Decimal("1.50")
    # 30 seconds past 9h is 9.00833.. hours
    assert hours_between(start, start + timedelta(hours=9, seconds=30)) == Decimal("9.01")


def test_hours_between_never_negative():
    start = datetime(2026, 1, 5, 8, 0, 0)
    assert hours_between(start, start - timedelta(minutes=5)) == Decimal("0.00")
