"""Plotly charts for monthly revenue."""

import plotly.graph_objects as go

from utils.formatting import format_number

# Comparison charts always span at least a short month
MIN_COMPARE_DAYS = 28


def _day_label(day):
    return f"Ngày {day}"


def create_revenue_chart(summary):
    """Daily revenue bars for one month."""
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[_day_label(d.day) for d in summary.daily_totals],
        y=[d.total for d in summary.daily_totals],
        name='Doanh thu',
        marker_color='#10b981',
        hovertemplate='%{x}: %{customdata} VNĐ<extra></extra>',
        customdata=[format_number(d.total) for d in summary.daily_totals],
    ))
    fig.update_layout(
        title=f'Doanh thu theo ngày {summary.month_name}',
        xaxis_title='Ngày',
        yaxis_title='Doanh thu (VNĐ)',
        yaxis=dict(tickformat=',d'),
        separators=',.',
        height=400
    )
    return fig


def comparison_rows(summary_a, summary_b):
    """Align two months day by day; a day missing from one month counts as 0."""
    totals_a = {d.day: d.total for d in summary_a.daily_totals}
    totals_b = {d.day: d.total for d in summary_b.daily_totals}
    max_days = max(len(summary_a.daily_totals), len(summary_b.daily_totals), MIN_COMPARE_DAYS)
    return [(day, totals_a.get(day, 0), totals_b.get(day, 0)) for day in range(1, max_days + 1)]


def create_comparison_chart(summary_a, summary_b, name_a, name_b):
    """Grouped daily bars for two months side by side."""
    rows = comparison_rows(summary_a, summary_b)
    labels = [_day_label(day) for day, _, _ in rows]
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=labels,
        y=[a for _, a, _ in rows],
        name=name_a,
        marker_color='#10b981'
    ))
    fig.add_trace(go.Bar(
        x=labels,
        y=[b for _, _, b in rows],
        name=name_b,
        marker_color='#3b82f6'
    ))
    fig.update_layout(
        title=f'So sánh doanh thu: {name_a} và {name_b}',
        barmode='group',
        xaxis_title='Ngày',
        yaxis_title='Doanh thu (VNĐ)',
        yaxis=dict(tickformat=',d'),
        separators=',.',
        height=450
    )
    return fig


def create_room_overnight_chart(room_overnight):
    """Overnight stays per room for the month."""
    rooms = sorted(room_overnight)
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=[f'Phòng {r}' for r in rooms],
        y=[room_overnight[r] for r in rooms],
        name='Lượt qua đêm',
        marker_color='#6366f1'
    ))
    fig.update_layout(
        title='Lượt qua đêm theo phòng',
        xaxis_title='Phòng',
        yaxis_title='Lượt',
        height=350
    )
    return fig
