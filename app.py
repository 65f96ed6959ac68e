"""
Hotel Revenue Tracker - Streamlit UI
A thin interface around the engine: parsing and aggregation live in engine/
"""

import streamlit as st

from config.default_params import VIEW_MODES
from engine.models import AppConfig
from engine.aggregate import summarize_period, summarize_rooms
from engine.periods import current_period, days_in_month, month_name
from engine.storage import RevenueStore, JsonDirBackend
from components.daily_tab import render_daily_tab
from components.monthly_tab import render_monthly_tab
from components.compare_tab import render_compare_tab
from components.sidebar import get_period_from_ui, get_parse_cfg_from_ui
from utils.formatting import format_currency, format_number
from utils.log import configure_logging


st.set_page_config(
    page_title="Trình tính doanh thu khách sạn",
    page_icon="🏨",
    layout="wide"
)

VIEW_LABELS = {
    'daily': "📋 Xem theo ngày",
    'monthly': "📊 Xem theo tháng",
    'compare': "⚖️ So sánh tháng",
}


def get_app_state():
    """Config, logger and store are built once per session"""
    if 'app' not in st.session_state:
        app_cfg = AppConfig.from_env()
        logger = configure_logging(app_cfg.log_level)
        store = RevenueStore(JsonDirBackend(app_cfg.data_dir))
        period = store.load_last_period(current_period())
        logger.info("session started: data_dir=%s period=%s-%02d", app_cfg.data_dir, period.year, period.month)
        st.session_state['app'] = {'config': app_cfg, 'store': store}
        st.session_state['period'] = period
        st.session_state['view_mode'] = store.load_view_mode(app_cfg.view_mode)
    return st.session_state['app']['config'], st.session_state['app']['store']


def _on_view_change(store):
    store.save_view_mode(st.session_state['view_mode'])


def main():
    app_cfg, store = get_app_state()

    st.title("🏨 Trình tính doanh thu khách sạn")

    period = get_period_from_ui(store)
    cfg, per_room = get_parse_cfg_from_ui(app_cfg)

    raw_by_day = store.load(period)
    if per_room:
        summary = summarize_rooms(raw_by_day, days_in_month(period), month_name(period), cfg)
    else:
        summary = summarize_period(raw_by_day, period, cfg)

    st.subheader(f"Tổng quan doanh thu {summary.month_name} năm {period.year}")
    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("💰 Tổng doanh thu tháng", format_currency(summary.monthly_total))
    with c2:
        st.metric("📊 Doanh thu trung bình ngày", format_currency(summary.average_daily_revenue))
        st.caption(f"{summary.days_with_revenue} ngày có doanh thu")
    with c3:
        threshold_label = format_number(cfg.overnight_threshold)
        st.metric(f"🌙 Tổng lượt qua đêm (>{threshold_label})", format_number(summary.total_overnight_stays))

    view_mode = st.radio(
        "Chế độ xem",
        VIEW_MODES,
        format_func=VIEW_LABELS.get,
        horizontal=True,
        key='view_mode',
        on_change=_on_view_change,
        args=(store,),
        label_visibility="collapsed"
    )

    if view_mode == 'daily':
        render_daily_tab(store, period, raw_by_day, summary, cfg,
                         rooms=app_cfg.rooms if per_room else None)
    elif view_mode == 'monthly':
        render_monthly_tab(period, raw_by_day, summary)
    else:
        render_compare_tab(store, period, cfg)


if __name__ == "__main__":
    main()
