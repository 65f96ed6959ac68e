"""Test chart data built from month summaries"""
from engine.aggregate import summarize
from utils.visualizations import (
    create_revenue_chart, create_comparison_chart, create_room_overnight_chart,
    comparison_rows, MIN_COMPARE_DAYS
)

def test_revenue_chart_has_one_bar_per_day():
    s = summarize({1: "50", 3: "200"}, 30, "tháng 4")
    fig = create_revenue_chart(s)
    bar = fig.data[0]
    assert len(bar.x) == 30
    assert bar.x[0] == "Ngày 1"
    assert list(bar.y[:3]) == [50_000, 0, 200_000]
    assert "tháng 4" in fig.layout.title.text

def test_comparison_rows_pad_to_longest_month():
    a = summarize({31: "10"}, 31, "a")
    b = summarize({1: "20"}, 28, "b")
    rows = comparison_rows(a, b)
    assert len(rows) == 31
    assert rows[0] == (1, 0, 20_000)
    assert rows[30] == (31, 10_000, 0)

def test_comparison_rows_minimum_length():
    a = summarize({}, 0, "a")
    b = summarize({}, 0, "b")
    assert len(comparison_rows(a, b)) == MIN_COMPARE_DAYS

def test_comparison_chart_traces():
    a = summarize({1: "100"}, 31, "a")
    b = summarize({}, 29, "b")
    fig = create_comparison_chart(a, b, "tháng 3/2024", "tháng 2/2024")
    assert [t.name for t in fig.data] == ["tháng 3/2024", "tháng 2/2024"]
    assert fig.layout.barmode == "group"
    assert fig.data[0].y[0] == 100_000
    assert fig.data[1].y[30] == 0

def test_room_overnight_chart_sorted_by_room():
    fig = create_room_overnight_chart({"201": 1, "101": 3})
    assert list(fig.data[0].x) == ["Phòng 101", "Phòng 201"]
    assert list(fig.data[0].y) == [3, 1]
