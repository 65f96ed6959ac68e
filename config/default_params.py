"""Default parameters for the hotel revenue tracker."""

# Revenue is typed in thousands of VND: "50" means 50,000
ENTRY_SCALE = 1000

# A single entry above this (already scaled) is counted as an overnight stay
OVERNIGHT_THRESHOLD = 150_000

LOCAL_STORAGE_PREFIX = 'hotelRevenueApp'

VIEW_MODES = ('daily', 'monthly', 'compare')

DEFAULT_ROOMS = ('101', '102', '103', '104', '105', '201', '202', '203')

APP_DEFAULTS = {
    'view_mode': 'daily',
    'data_dir': 'data',
    'currency_symbol': '₫',
    'log_level': 'INFO',
    # Room-by-room entry table instead of one cell per day
    'per_room': False,
}

# Column headers used by the daily table and its exports
TABLE_HEADERS = {
    'day': 'Ngày',
    'raw': 'Doanh thu trong ngày',
    'total': 'Tổng ngày',
}

# Room-map key holding a day's whole-day text once the day is split into rooms
DAY_CELL_KEY = '_day'
