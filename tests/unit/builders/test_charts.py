"""
test_charts.py
--------------
Unit tests for the text chart renderers.
"""
from datetime import date

from reflog.stats.aggregation import Slice
from reflog.stats.calendar import year_heatmap
from reflog.builders.charts import (
    ascii_bar_chart,
    column_chart,
    donut_legend,
    heatmap_lines,
    line_chart,
    month_calendar_lines,
)


class TestAsciiBarChart:
    def test_bars_scale_to_largest(self):
        lines = ascii_bar_chart([Slice("work", 10, "red"), Slice("study", 5, "yellow")])

        assert lines[0].startswith("🔴 work")
        assert "█" * 20 in lines[0]
        assert "(10)" in lines[0]
        assert "█" * 10 in lines[1]
        assert "█" * 11 not in lines[1]

    def test_zero_count_uses_empty_char(self):
        lines = ascii_bar_chart([Slice("a", 4, "red"), Slice("b", 0, "gray")])
        assert "░" in lines[1]

    def test_percentages(self):
        lines = ascii_bar_chart(
            [Slice("a", 3, "red"), Slice("b", 1, "yellow")], show_percentage=True
        )
        assert lines[0].endswith("(75%)")
        assert lines[1].endswith("(25%)")

    def test_empty(self):
        assert ascii_bar_chart([]) == []


class TestDonutLegend:
    def test_shares_and_sweeps(self):
        lines = donut_legend([Slice("a", 3, "red"), Slice("b", 1, "yellow")])

        assert len(lines) == 2
        assert "75%" in lines[0]
        assert "(270°)" in lines[0]
        assert lines[1].startswith("🟡 b")

    def test_empty(self):
        assert donut_legend([]) == []


class TestColumnChart:
    def test_full_and_empty_columns(self):
        lines = column_chart([20, 0], ["a", "b"], rows=10)

        assert len(lines) == 12
        assert lines[0].startswith(" ██ ")
        assert lines[0].endswith("┤20")
        assert all("██" not in line[4:8] for line in lines[:10])
        assert lines[-1].split() == ["a", "b"]

    def test_values_clamped(self):
        assert column_chart([99], ["x"], rows=4)[0].startswith(" ██ ")

    def test_empty(self):
        assert column_chart([], []) == []


class TestLineChart:
    def test_one_marker_per_value(self):
        lines = line_chart([0, 10, 20], ["Jan", "Feb", "Mar"], rows=10)
        plot = "\n".join(lines[:10])

        assert plot.count("●") == 3
        assert lines[-2].split() == ["0", "10", "20"]

    def test_vertical_runs_join_points(self):
        lines = line_chart([0, 20], ["a", "b"], rows=10)
        assert any("│" in line[:8] for line in lines[:10])


class TestHeatmapLines:
    def test_seven_weekday_rows(self):
        lines = heatmap_lines(year_heatmap(2025, {date(2025, 1, 1): 1}))

        assert len(lines) == 7
        assert lines[0].startswith("Sun ")
        # first week opens with a month separator, Jan 1 is a Wednesday
        assert lines[3].startswith("Wed |█")
        assert lines[0].startswith("Sun | ")


class TestMonthCalendarLines:
    def test_markers_and_selection(self):
        lines = month_calendar_lines(
            2025, 3, marked={date(2025, 3, 10)}, selected=date(2025, 3, 12)
        )

        assert lines[0] == "March 2025"
        assert lines[1].split()[0] == "Su"
        body = "\n".join(lines[2:])
        assert "10*" in body
        assert "[12 " in body
        assert len(lines) == 8
