"""vi-VN number and currency formatting for display."""

import math

from config.default_params import APP_DEFAULTS


def _to_int(value):
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        value = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(value) or math.isinf(value):
        return 0
    return int(round(value))


def format_number(value):
    """Group thousands with '.', the vi-VN way: 1234567 -> '1.234.567'."""
    return f"{_to_int(value):,}".replace(",", ".")


def format_currency(value):
    """Format a VND amount: 1234567 -> '1.234.567 ₫'. VND has no minor unit."""
    return f"{format_number(value)} {APP_DEFAULTS['currency_symbol']}"
