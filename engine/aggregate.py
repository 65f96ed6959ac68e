"""Month-level revenue aggregation built on the cell parser"""
from collections import Counter
from typing import Callable, Dict, Iterable, Mapping, Optional, Tuple, Union

from config.default_params import DAY_CELL_KEY
from .models import ParseConfig, DailyTotal, MonthSummary, RoomMonthSummary, Period
from .parser import parse_cell, entry_values, is_overnight, DEFAULT_PARSE
from . import periods

# A day holds either one raw cell or one raw cell per room
DayValue = Union[str, Mapping[str, str], None]
RawByDay = Mapping[Union[int, str], DayValue]

def day_value(raw_by_day: RawByDay, day: int) -> DayValue:
    """Look up a day by int key or by its string form (JSON round-trips keys as strings)"""
    if not raw_by_day:
        return None
    if day in raw_by_day:
        return raw_by_day[day]
    return raw_by_day.get(str(day))

def day_cells(value: DayValue) -> Iterable[Tuple[Optional[str], str]]:
    """Decompose a day into (room, raw) cells; room is None for flat data"""
    if value is None:
        return []
    if isinstance(value, str):
        return [(None, value)]
    if isinstance(value, Mapping):
        return [(None if str(room) == DAY_CELL_KEY else str(room), raw)
                for room, raw in value.items() if isinstance(raw, str)]
    # Anything else stored for a day is treated as empty
    return []

def day_text(value: DayValue) -> str:
    """The whole-day text of a day, whether stored flat or kept inside a room map"""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        raw = value.get(DAY_CELL_KEY, "")
        return raw if isinstance(raw, str) else ""
    return ""

def average_daily(monthly_total: int, days_with_revenue: int):
    """Mean over days with revenue, 0 when there are none"""
    if days_with_revenue <= 0:
        return 0
    try:
        return monthly_total / days_with_revenue
    except OverflowError:
        # too large for a float; stay in integers
        return monthly_total // days_with_revenue

def summarize(
    raw_by_day: RawByDay,
    days_in_month: int,
    month_label: str,
    cfg: Optional[ParseConfig] = None,
) -> MonthSummary:
    """
    Fold one month of raw cells into a MonthSummary.

    Days 1..days_in_month are visited in order; missing days count as empty.
    Per-room days are summed across rooms, so flat and per-room data share
    this one path.
    """
    cfg = cfg or DEFAULT_PARSE
    daily = []
    monthly_total = 0
    overnight_stays = 0
    days_with_revenue = 0

    for day in range(1, days_in_month + 1):
        day_total = 0
        for _room, raw in day_cells(day_value(raw_by_day, day)):
            res = parse_cell(raw, cfg)
            day_total += res.total
            overnight_stays += res.overnight_count
        daily.append(DailyTotal(day=day, total=day_total))
        monthly_total += day_total
        if day_total > 0:
            days_with_revenue += 1

    avg = average_daily(monthly_total, days_with_revenue)

    return MonthSummary(
        monthly_total=monthly_total,
        average_daily_revenue=avg,
        total_overnight_stays=overnight_stays,
        daily_totals=tuple(daily),
        month_name=month_label,
    )

def room_overnight_tally(
    raw_by_day: RawByDay,
    days_in_month: int,
    cfg: Optional[ParseConfig] = None,
) -> Dict[str, int]:
    """Overnight entries per room over the month. Rooms seen with none get 0."""
    cfg = cfg or DEFAULT_PARSE
    tally = Counter()
    for day in range(1, days_in_month + 1):
        for room, raw in day_cells(day_value(raw_by_day, day)):
            if room is None:
                continue
            tally[room] += sum(1 for v in entry_values(raw, cfg) if is_overnight(v, cfg))
    return dict(tally)

def summarize_rooms(
    raw_by_day: RawByDay,
    days_in_month: int,
    month_label: str,
    cfg: Optional[ParseConfig] = None,
) -> RoomMonthSummary:
    base = summarize(raw_by_day, days_in_month, month_label, cfg)
    return RoomMonthSummary(
        monthly_total=base.monthly_total,
        average_daily_revenue=base.average_daily_revenue,
        total_overnight_stays=base.total_overnight_stays,
        daily_totals=base.daily_totals,
        month_name=base.month_name,
        room_overnight=room_overnight_tally(raw_by_day, days_in_month, cfg),
    )

def summarize_period(
    raw_by_day: RawByDay,
    period: Period,
    cfg: Optional[ParseConfig] = None,
) -> MonthSummary:
    """summarize() with the day count and label taken from the calendar"""
    return summarize(raw_by_day, periods.days_in_month(period), periods.month_name(period), cfg)

def compare_months(
    load: Callable[[Period], RawByDay],
    period_a: Period,
    period_b: Period,
    cfg: Optional[ParseConfig] = None,
) -> Tuple[MonthSummary, MonthSummary]:
    """Build two independent summaries; each period loads its own raw data"""
    summary_a = summarize_period(load(period_a), period_a, cfg)
    summary_b = summarize_period(load(period_b), period_b, cfg)
    return summary_a, summary_b
