from datetime import date

import pytest

from engine.models import Period
from engine.periods import (
    days_in_month, month_name, period_label, shift_period, parse_period,
    format_period, current_period
)

def test_days_in_month_calendar():
    assert days_in_month(Period(2024, 1)) == 31
    assert days_in_month(Period(2024, 4)) == 30
    assert days_in_month(Period(2024, 2)) == 29   # leap year
    assert days_in_month(Period(2023, 2)) == 28
    assert days_in_month(Period(1900, 2)) == 28   # century, not leap
    assert days_in_month(Period(2000, 2)) == 29

def test_invalid_month_rejected():
    with pytest.raises(ValueError):
        Period(2024, 0)
    with pytest.raises(ValueError):
        Period(2024, 13)

def test_month_names():
    assert month_name(Period(2024, 1)) == "tháng 1"
    assert month_name(Period(2024, 12)) == "tháng 12"
    assert period_label(Period(2024, 3)) == "tháng 3/2024"

def test_shift_period_across_years():
    assert shift_period(Period(2024, 1), -1) == Period(2023, 12)
    assert shift_period(Period(2024, 12), 1) == Period(2025, 1)
    assert shift_period(Period(2024, 5), 0) == Period(2024, 5)
    assert shift_period(Period(2024, 5), -17) == Period(2022, 12)

def test_parse_and_format_period():
    assert parse_period("2024-03") == Period(2024, 3)
    assert parse_period("2024-03-15") == Period(2024, 3)
    assert format_period(Period(2024, 3)) == "2024-03"
    with pytest.raises(ValueError):
        parse_period("march")

def test_current_period():
    assert current_period(date(2026, 10, 19)) == Period(2026, 10)

def test_periods_are_ordered():
    assert Period(2023, 12) < Period(2024, 1) < Period(2024, 2)
