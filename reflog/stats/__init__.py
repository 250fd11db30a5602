"""
Statistics
----------

Pure aggregation, calendar layout and chart geometry over memo lists.

Modules:
    - aggregation: Counts per day, tag and month; keyword chart slices
    - calendar: Month grid and yearly heatmap layout
    - geometry: Bar, line and donut geometry on a fixed 0-20 y-domain
"""
from .aggregation import (
    DailyCount,
    MonthCount,
    Period,
    Slice,
    bar_slices,
    day_counts,
    donut_slices,
    last_7_days,
    marked_dates,
    month_count,
    monthly_series,
    percent_string,
    period_start,
    rank_tags,
    tag_counts,
    tag_counts_in_period,
    top_n_with_others,
    total_count,
)
from .calendar import (
    HeatmapCell,
    HeatmapColumn,
    grid_rows,
    month_grid,
    picker_years,
    recent_years,
    shift_month,
    year_heatmap,
)
from .geometry import (
    Y_TICKS,
    Arc,
    Bar,
    Point,
    bar_geometry,
    donut_geometry,
    line_geometry,
)

__all__ = [
    "DailyCount",
    "MonthCount",
    "Period",
    "Slice",
    "bar_slices",
    "day_counts",
    "donut_slices",
    "last_7_days",
    "marked_dates",
    "month_count",
    "monthly_series",
    "percent_string",
    "period_start",
    "rank_tags",
    "tag_counts",
    "tag_counts_in_period",
    "top_n_with_others",
    "total_count",
    "HeatmapCell",
    "HeatmapColumn",
    "grid_rows",
    "month_grid",
    "picker_years",
    "recent_years",
    "shift_month",
    "year_heatmap",
    "Y_TICKS",
    "Arc",
    "Bar",
    "Point",
    "bar_geometry",
    "donut_geometry",
    "line_geometry",
]
