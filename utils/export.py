"""CSV and Excel export of a month's daily table."""

import csv
import io

import pandas as pd

from config.default_params import TABLE_HEADERS
from engine.aggregate import day_value, day_cells


def raw_text_for_day(raw_by_day, day):
    """The text the user typed for a day; per-room cells are joined as 'room: text'."""
    cells = day_cells(day_value(raw_by_day, day))
    if len(cells) == 1 and cells[0][0] is None:
        return cells[0][1]
    return "; ".join(raw if room is None else f"{room}: {raw}" for room, raw in cells if raw)


def summary_to_frame(summary, raw_by_day):
    """One row per day: day number, raw text, unscaled day total."""
    rows = [
        {
            TABLE_HEADERS['day']: d.day,
            TABLE_HEADERS['raw']: raw_text_for_day(raw_by_day, d.day),
            TABLE_HEADERS['total']: int(d.total),
        }
        for d in summary.daily_totals
    ]
    return pd.DataFrame(rows, columns=[TABLE_HEADERS['day'], TABLE_HEADERS['raw'], TABLE_HEADERS['total']])


def summary_to_csv(summary, raw_by_day):
    """
    CSV text with columns day, raw text, day total.

    Text fields are quoted with internal quotes doubled; numbers are written
    as plain integers without thousands formatting.
    """
    df = summary_to_frame(summary, raw_by_day)
    return df.to_csv(index=False, quoting=csv.QUOTE_NONNUMERIC, lineterminator="\n")


def summary_to_excel(summary, raw_by_day, sheet_name="Doanh thu"):
    df = summary_to_frame(summary, raw_by_day)
    buffer = io.BytesIO()
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    buffer.seek(0)
    return buffer.getvalue()
