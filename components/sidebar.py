"""Sidebar widgets: month navigation and parsing settings."""

import streamlit as st

from engine.models import ParseConfig, Period
from engine.periods import shift_period

# Upper bound offered by the threshold input unless the configured value is higher
THRESHOLD_INPUT_MAX = 100_000_000


def threshold_input_range(threshold):
    """(min, max, step) for the threshold input, always containing the configured value."""
    threshold = max(0, int(threshold))
    return 0, max(THRESHOLD_INPUT_MAX, threshold), 1_000


def _shift_month(store, months):
    period = shift_period(st.session_state['period'], months)
    st.session_state['period'] = period
    store.save_last_period(period)


def get_period_from_ui(store):
    """Month picker with previous/next buttons"""
    st.sidebar.header("📅 Tháng")
    nav = st.sidebar.columns(2)
    nav[0].button("◀ Tháng trước", on_click=_shift_month, args=(store, -1), use_container_width=True)
    nav[1].button("Tháng sau ▶", on_click=_shift_month, args=(store, 1), use_container_width=True)

    period = st.session_state['period']
    month = st.sidebar.selectbox("Tháng", list(range(1, 13)), index=period.month - 1)
    year = st.sidebar.number_input("Năm", 2000, 2100, period.year)
    picked = Period(int(year), int(month))
    if picked != period:
        st.session_state['period'] = picked
        store.save_last_period(picked)
    return picked


def get_parse_cfg_from_ui(app_cfg):
    """Threshold (in VND, not thousands) and per-room toggle"""
    st.sidebar.header("⚙️ Cấu hình")
    default = max(0, int(app_cfg.parse.overnight_threshold))
    lo, hi, step = threshold_input_range(default)
    threshold = st.sidebar.number_input(
        "Ngưỡng qua đêm (VNĐ)",
        lo, hi, default,
        step=step,
        help="Một mục nhập lớn hơn ngưỡng này được tính là một lượt qua đêm"
    )
    per_room = st.sidebar.toggle("Nhập theo phòng", value=app_cfg.per_room)
    cfg = ParseConfig(scale=app_cfg.parse.scale, overnight_threshold=int(threshold))
    return cfg, per_room
