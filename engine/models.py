import os
from dataclasses import dataclass, field
from typing import Dict, Tuple

from config.default_params import (
    ENTRY_SCALE, OVERNIGHT_THRESHOLD, APP_DEFAULTS, DEFAULT_ROOMS, VIEW_MODES
)

@dataclass(frozen=True)
class ParseConfig:
    scale: int = ENTRY_SCALE                          # entries are typed in thousands
    overnight_threshold: int = OVERNIGHT_THRESHOLD    # strictly greater counts as overnight

@dataclass(frozen=True, order=True)
class Period:
    """A calendar month: one bucket of raw revenue data"""
    year: int
    month: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be in 1..12, got {self.month}")

    @property
    def month_str(self) -> str:
        return f"{self.month:02d}"

@dataclass(frozen=True)
class CellResult:
    total: int = 0
    has_overnight: bool = False
    overnight_count: int = 0

@dataclass(frozen=True)
class DailyTotal:
    day: int
    total: int

@dataclass(frozen=True)
class MonthSummary:
    monthly_total: int
    average_daily_revenue: float
    total_overnight_stays: int
    daily_totals: Tuple[DailyTotal, ...]
    month_name: str

    @property
    def days_with_revenue(self) -> int:
        return sum(1 for d in self.daily_totals if d.total > 0)

@dataclass(frozen=True)
class RoomMonthSummary(MonthSummary):
    # overnight tokens per room across the whole month
    room_overnight: Dict[str, int] = field(default_factory=dict)

@dataclass
class AppConfig:
    data_dir: str = APP_DEFAULTS['data_dir']
    log_level: str = APP_DEFAULTS['log_level']
    view_mode: str = APP_DEFAULTS['view_mode']
    per_room: bool = APP_DEFAULTS['per_room']
    rooms: Tuple[str, ...] = DEFAULT_ROOMS
    parse: ParseConfig = None

    def __post_init__(self):
        if self.parse is None:
            self.parse = ParseConfig()
        if self.view_mode not in VIEW_MODES:
            self.view_mode = APP_DEFAULTS['view_mode']

    @classmethod
    def from_env(cls, environ=None):
        """Build config from HOTEL_REVENUE_* environment variables, falling back to defaults"""
        env = os.environ if environ is None else environ

        threshold = OVERNIGHT_THRESHOLD
        raw_threshold = env.get('HOTEL_REVENUE_OVERNIGHT_THRESHOLD')
        if raw_threshold:
            try:
                threshold = int(raw_threshold)
            except ValueError:
                raise ValueError(
                    f"HOTEL_REVENUE_OVERNIGHT_THRESHOLD must be an integer, got {raw_threshold!r}"
                )

        rooms = DEFAULT_ROOMS
        raw_rooms = env.get('HOTEL_REVENUE_ROOMS')
        if raw_rooms:
            rooms = tuple(r.strip() for r in raw_rooms.split(',') if r.strip())

        return cls(
            data_dir=env.get('HOTEL_REVENUE_DATA_DIR', APP_DEFAULTS['data_dir']),
            log_level=env.get('HOTEL_REVENUE_LOG_LEVEL', APP_DEFAULTS['log_level']).upper(),
            per_room=env.get('HOTEL_REVENUE_PER_ROOM', '').lower() in ('1', 'true', 'yes'),
            rooms=rooms,
            parse=ParseConfig(overnight_threshold=threshold),
        )
