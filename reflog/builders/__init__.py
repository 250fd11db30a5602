"""
Builders
--------

Text renderers for the statistics screens and the Markdown dashboard.
"""
from .charts import (
    ascii_bar_chart,
    column_chart,
    donut_legend,
    heatmap_lines,
    line_chart,
    month_calendar_lines,
)
from .dashboard import (
    NO_ENTRIES,
    StatisticsScreen,
    day_detail_lines,
    export_stats,
    history_lines,
    keyword_stats_lines,
    memo_stats_lines,
)

__all__ = [
    "ascii_bar_chart",
    "column_chart",
    "donut_legend",
    "heatmap_lines",
    "line_chart",
    "month_calendar_lines",
    "NO_ENTRIES",
    "StatisticsScreen",
    "day_detail_lines",
    "export_stats",
    "history_lines",
    "keyword_stats_lines",
    "memo_stats_lines",
]
