"""
Calendar Layout
---------------

Grid layouts for the history screen: the month calendar and the yearly
activity heatmap. Weeks start on Sunday throughout.

Functions:
    - month_grid: 42 cells (6 weeks x 7 days) for one month
    - grid_rows: Split a month grid into rows of seven
    - year_heatmap: One column per week of a year
    - shift_month: Month navigation with year rollover
    - recent_years: Years offered by the heatmap year picker
    - picker_years: Years offered by the year/month picker
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

GRID_CELLS = 42
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class HeatmapCell:
    """
    One day slot of the yearly heatmap.

    Fields:
    - day:      Calendar day
    - has_memo: True when at least one memo was written that day
    """
    day:      date
    has_memo: bool


@dataclass(frozen=True)
class HeatmapColumn:
    """
    One week of the yearly heatmap.

    Fields:
    - week_start:     Sunday that opens the week
    - cells:          Seven slots, Sunday first; None outside the year
    - month_boundary: Week contains the 1st of some month
    """
    week_start:     date
    cells:          Tuple[Optional[HeatmapCell], ...]
    month_boundary: bool


# ----- Month calendar -----
def month_grid(year: int, month: int) -> List[Optional[date]]:
    """
    Cells of a month calendar, Sunday first.

    Leading None cells pad the weekday offset of the 1st, then one date
    per day of the month, then trailing None cells up to 42.
    """
    cells: List[Optional[date]] = []

    first = date(year, month, 1)
    offset = (first.weekday() + 1) % DAYS_PER_WEEK
    cells.extend([None] * offset)

    days_in_month = calendar.monthrange(year, month)[1]
    cells.extend(date(year, month, d) for d in range(1, days_in_month + 1))

    cells.extend([None] * (GRID_CELLS - len(cells)))
    return cells


def grid_rows(cells: Sequence[Optional[date]]) -> List[List[Optional[date]]]:
    """Split grid cells into rows of seven."""
    return [
        list(cells[i : i + DAYS_PER_WEEK]) for i in range(0, len(cells), DAYS_PER_WEEK)
    ]


def shift_month(year: int, month: int, delta: int) -> Tuple[int, int]:
    """Move ``delta`` months forward (or back) from year/month."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


# ----- Yearly heatmap -----
def _week_start(day: date) -> date:
    return day - timedelta(days=(day.weekday() + 1) % DAYS_PER_WEEK)


def year_heatmap(year: int, counts: Dict[date, int]) -> List[HeatmapColumn]:
    """
    Week columns from the week containing Jan 1 to the week containing Dec 31.

    Args:
        year: Year to lay out
        counts: Memo count per day (output of day_counts)

    Returns:
        HeatmapColumns in chronological order
    """
    first = date(year, 1, 1)
    last = date(year, 12, 31)

    columns: List[HeatmapColumn] = []
    week_start = _week_start(first)
    while week_start <= last:
        days = [week_start + timedelta(days=i) for i in range(DAYS_PER_WEEK)]
        cells = tuple(
            HeatmapCell(d, counts.get(d, 0) > 0) if d.year == year else None
            for d in days
        )
        columns.append(
            HeatmapColumn(
                week_start=week_start,
                cells=cells,
                month_boundary=any(d.day == 1 for d in days),
            )
        )
        week_start += timedelta(days=DAYS_PER_WEEK)

    return columns


# ----- Pickers -----
def recent_years(today: Optional[date] = None, count: int = 10) -> List[int]:
    """The current year and the ones before it, newest first."""
    current = (today or date.today()).year
    return [current - i for i in range(count)]


def picker_years(today: Optional[date] = None) -> List[int]:
    """Fifty years back through ten years ahead, ascending."""
    current = (today or date.today()).year
    return list(range(current - 50, current + 11))
