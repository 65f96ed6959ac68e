"""Calendar helpers for monthly revenue periods"""
import calendar
from datetime import date, datetime
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from .models import Period

# vi-VN long month names, as the browser renders them
VI_MONTH_NAMES = (
    "tháng 1", "tháng 2", "tháng 3", "tháng 4", "tháng 5", "tháng 6",
    "tháng 7", "tháng 8", "tháng 9", "tháng 10", "tháng 11", "tháng 12",
)

def days_in_month(period: Period) -> int:
    return calendar.monthrange(period.year, period.month)[1]

def month_name(period: Period) -> str:
    return VI_MONTH_NAMES[period.month - 1]

def period_label(period: Period) -> str:
    """Display label, e.g. 'tháng 3/2024'"""
    return f"{month_name(period)}/{period.year}"

def period_of(d: Union[date, datetime]) -> Period:
    return Period(d.year, d.month)

def current_period(today: Optional[date] = None) -> Period:
    return period_of(today or date.today())

def shift_period(period: Period, months: int) -> Period:
    """Move forward (or back, for negative months) by whole months"""
    d = date(period.year, period.month, 1) + relativedelta(months=months)
    return period_of(d)

def parse_period(text: str) -> Period:
    """
    Parse 'YYYY-MM' (the month picker format) or an ISO date/datetime.
    Raises ValueError for anything else.
    """
    text = (text or "").strip()
    try:
        return period_of(datetime.strptime(text, "%Y-%m"))
    except ValueError:
        pass
    return period_of(datetime.fromisoformat(text.replace("Z", "+00:00")))

def format_period(period: Period) -> str:
    return f"{period.year}-{period.month_str}"
