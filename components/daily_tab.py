"""Daily revenue entry table."""

import streamlit as st

from config.default_params import TABLE_HEADERS
from engine.aggregate import day_value, day_text
from engine.parser import parse_cell
from engine.periods import format_period
from engine.storage import StorageError, sanitize_raw
from utils.formatting import format_currency, format_number


def _cell_key(period, day, room=None):
    key = f"cell-{format_period(period)}-{day}"
    return key if room is None else f"{key}-{room}"


def _on_cell_change(store, period, day, room, key):
    clean = sanitize_raw(st.session_state.get(key, ""))
    st.session_state[key] = clean
    try:
        store.update_cell(period, day, clean, room=room)
    except StorageError as ex:
        st.session_state['storage_error'] = str(ex)


def _cell_input(store, period, day, raw, cfg, room=None, label=None):
    """One editable cell with its subtotal and overnight marker underneath."""
    key = _cell_key(period, day, room)
    if key not in st.session_state:
        st.session_state[key] = raw or ""
    st.text_input(
        label or f"Doanh thu ngày {day}",
        key=key,
        placeholder="VD: 50 120 (tự động x1000)",
        label_visibility="collapsed" if label is None else "visible",
        on_change=_on_cell_change,
        args=(store, period, day, room, key),
    )
    value = st.session_state.get(key, "")
    if value:
        res = parse_cell(value, cfg)
        moon = "🌙 " if res.has_overnight else ""
        st.caption(f"{moon}= {format_number(res.total)}")


def render_daily_tab(store, period, raw_by_day, summary, cfg, rooms=None):
    """Render the entry table. With rooms, each day gets one input per room."""
    st.subheader("Bảng nhập liệu doanh thu")

    if st.session_state.get('storage_error'):
        st.error(st.session_state.pop('storage_error'))

    header = st.columns([1, 4, 2])
    header[0].markdown(f"**{TABLE_HEADERS['day']}**")
    header[1].markdown(f"**{TABLE_HEADERS['raw']}**")
    header[2].markdown(f"**{TABLE_HEADERS['total']}**")

    for d in summary.daily_totals:
        row = st.columns([1, 4, 2])
        row[0].markdown(f"**{d.day}**")
        value = day_value(raw_by_day, d.day)
        with row[1]:
            if rooms:
                room_values = value if isinstance(value, dict) else {}
                room_cols = st.columns(len(rooms))
                for col, room in zip(room_cols, rooms):
                    with col:
                        _cell_input(store, period, d.day, room_values.get(room, ""), cfg,
                                    room=room, label=f"Phòng {room}" if d.day == 1 else None)
                whole_day = day_text(value)
                if whole_day.strip():
                    st.caption(f"Cả ngày: {whole_day} (= {format_number(parse_cell(whole_day, cfg).total)})")
            else:
                _cell_input(store, period, d.day, day_text(value), cfg)
        row[2].markdown(format_currency(d.total))

    st.divider()
    footer = st.columns([5, 2])
    footer[0].markdown("**Tổng doanh thu tháng**")
    footer[1].markdown(f"**{format_currency(summary.monthly_total)}**")
