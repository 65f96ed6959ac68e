"""Side-by-side comparison of two months."""

import streamlit as st

from engine.aggregate import compare_months
from engine.models import Period
from engine.periods import period_label, shift_period
from utils.formatting import format_currency, format_number
from utils.visualizations import create_comparison_chart


def _period_picker(label, default, key):
    col_m, col_y = st.columns(2)
    with col_m:
        month = st.selectbox(f"Tháng ({label})", list(range(1, 13)),
                             index=default.month - 1, key=f"{key}-month")
    with col_y:
        year = st.number_input(f"Năm ({label})", 2000, 2100, default.year, key=f"{key}-year")
    return Period(int(year), int(month))


def render_compare_tab(store, period, cfg):
    """Pick two months (default: current and previous) and compare them."""
    col_a, col_b = st.columns(2)
    with col_a:
        period_a = _period_picker("A", period, "compare-a")
    with col_b:
        period_b = _period_picker("B", shift_period(period, -1), "compare-b")

    summary_a, summary_b = compare_months(store.load, period_a, period_b, cfg)
    name_a, name_b = period_label(period_a), period_label(period_b)

    for col, name, s in ((col_a, name_a, summary_a), (col_b, name_b, summary_b)):
        with col:
            st.markdown(f"#### {name}")
            st.metric("Tổng doanh thu", format_currency(s.monthly_total))
            st.metric("Trung bình ngày", format_currency(s.average_daily_revenue))
            st.metric("Lượt qua đêm", format_number(s.total_overnight_stays))

    delta = summary_a.monthly_total - summary_b.monthly_total
    sign = "+" if delta >= 0 else "-"
    st.caption(f"Chênh lệch {name_a} so với {name_b}: {sign}{format_currency(abs(delta))}")

    st.plotly_chart(create_comparison_chart(summary_a, summary_b, name_a, name_b),
                    use_container_width=True)
