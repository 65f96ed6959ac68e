"""Per-month persistence of raw revenue cells and UI preferences"""
import json
import logging
import os
import re
from typing import Dict, Optional

from config.default_params import LOCAL_STORAGE_PREFIX, VIEW_MODES, APP_DEFAULTS, DAY_CELL_KEY
from .models import Period
from .periods import parse_period, format_period

logger = logging.getLogger("hotel_revenue.storage")

_DISALLOWED = re.compile(r"[^0-9\s.,]")
_WHITESPACE = re.compile(r"\s+")

# A stored file that cannot be read, or is not valid UTF-8
_READ_ERRORS = (OSError, UnicodeDecodeError)


class StorageError(RuntimeError):
    """Writing to the backing store failed"""


def sanitize_raw(value: str) -> str:
    """Keep digits, whitespace and separators; collapse whitespace runs to one space"""
    if not value:
        return ""
    return _WHITESPACE.sub(" ", _DISALLOWED.sub("", value))


def storage_key(period: Period) -> str:
    return f"{LOCAL_STORAGE_PREFIX}-data-{period.year}-{period.month_str}"

LAST_DATE_KEY = f"{LOCAL_STORAGE_PREFIX}-lastDate"
VIEW_MODE_KEY = f"{LOCAL_STORAGE_PREFIX}-viewMode"


class MemoryBackend:
    """Dict-backed key/value store (tests, and sessions with no data dir)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonDirBackend:
    """One file per key inside a directory. Writes go through a temp file + os.replace."""

    def __init__(self, directory: str):
        self.directory = directory

    def _path(self, key: str) -> str:
        return os.path.join(self.directory, f"{key}.json")

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def set(self, key: str, value: str) -> None:
        os.makedirs(self.directory, exist_ok=True)
        path = self._path(key)
        tmp = path + ".tmp"
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except OSError:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise


class RevenueStore:
    """
    load(period) / save(period, raw_by_day) over a key/value backend.

    Read failures never reach the caller: missing or corrupt data loads as an
    empty month. Write failures raise StorageError.
    """

    def __init__(self, backend=None):
        self.backend = backend if backend is not None else MemoryBackend()

    def load(self, period: Period) -> Dict[str, object]:
        key = storage_key(period)
        try:
            raw = self.backend.get(key)
        except _READ_ERRORS as ex:
            logger.warning("load %s: read failed: %s", key, ex)
            return {}
        if raw is None:
            logger.debug("load %s: no data", key)
            return {}
        try:
            data = json.loads(raw)
        except ValueError as ex:
            logger.warning("load %s: corrupt data ignored: %s", key, ex)
            return {}
        if not isinstance(data, dict):
            logger.warning("load %s: expected an object, got %s", key, type(data).__name__)
            return {}
        return data

    def save(self, period: Period, raw_by_day) -> None:
        key = storage_key(period)
        payload = json.dumps({str(k): v for k, v in raw_by_day.items()}, ensure_ascii=False)
        try:
            self.backend.set(key, payload)
        except OSError as ex:
            logger.warning("save %s failed: %s", key, ex)
            raise StorageError(f"Could not save revenue data for {format_period(period)}") from ex
        logger.debug("saved %s (%d days)", key, len(raw_by_day))

    def update_cell(self, period: Period, day: int, value: str, room: Optional[str] = None) -> Dict[str, object]:
        """
        Sanitize and store one edited cell; returns the month's updated raw data.

        Switching a day between whole-day and per-room entry never drops text:
        whole-day text lives under DAY_CELL_KEY inside the room map.
        """
        data = self.load(period)
        clean = sanitize_raw(value)
        existing = data.get(str(day))
        if room is None:
            if isinstance(existing, dict):
                existing[DAY_CELL_KEY] = clean
                data[str(day)] = existing
            else:
                data[str(day)] = clean
        else:
            if isinstance(existing, dict):
                rooms = existing
            elif isinstance(existing, str) and existing.strip():
                logger.info("day %s of %s split into rooms, keeping whole-day text", day, format_period(period))
                rooms = {DAY_CELL_KEY: existing}
            else:
                rooms = {}
            rooms[str(room)] = clean
            data[str(day)] = rooms
        self.save(period, data)
        return data

    # ---- UI preferences ----

    def load_last_period(self, default: Period) -> Period:
        try:
            saved = self.backend.get(LAST_DATE_KEY)
        except _READ_ERRORS as ex:
            logger.warning("load last period failed: %s", ex)
            return default
        if not saved:
            return default
        try:
            return parse_period(saved)
        except ValueError:
            logger.warning("Failed to parse saved date %r, defaulting to current month", saved)
            return default

    def save_last_period(self, period: Period) -> None:
        try:
            self.backend.set(LAST_DATE_KEY, format_period(period))
        except OSError as ex:
            logger.warning("save last period failed: %s", ex)

    def load_view_mode(self, default: str = APP_DEFAULTS['view_mode']) -> str:
        try:
            mode = self.backend.get(VIEW_MODE_KEY)
        except _READ_ERRORS as ex:
            logger.warning("load view mode failed: %s", ex)
            return default
        return mode if mode in VIEW_MODES else default

    def save_view_mode(self, mode: str) -> None:
        if mode not in VIEW_MODES:
            return
        try:
            self.backend.set(VIEW_MODE_KEY, mode)
        except OSError as ex:
            logger.warning("save view mode failed: %s", ex)
