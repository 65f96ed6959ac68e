"""Monthly chart view with downloads."""

import streamlit as st

from engine.periods import format_period
from utils.export import summary_to_csv, summary_to_excel, summary_to_frame
from utils.visualizations import create_revenue_chart, create_room_overnight_chart


def render_monthly_tab(period, raw_by_day, summary):
    st.plotly_chart(create_revenue_chart(summary), use_container_width=True)

    room_overnight = getattr(summary, 'room_overnight', None)
    if room_overnight:
        st.plotly_chart(create_room_overnight_chart(room_overnight), use_container_width=True)

    with st.expander("📋 Bảng số liệu"):
        st.dataframe(summary_to_frame(summary, raw_by_day), hide_index=True)

    stamp = format_period(period)
    col_csv, col_xlsx = st.columns(2)
    with col_csv:
        st.download_button(
            "📥 Tải CSV",
            data=summary_to_csv(summary, raw_by_day).encode("utf-8-sig"),
            file_name=f"doanh_thu_{stamp}.csv",
            mime="text/csv"
        )
    with col_xlsx:
        st.download_button(
            "📥 Tải Excel",
            data=summary_to_excel(summary, raw_by_day),
            file_name=f"doanh_thu_{stamp}.xlsx",
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
        )
