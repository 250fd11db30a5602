"""
Text Chart Renderers
--------------------

Text equivalents of the statistics charts, used by the CLI and the
Markdown dashboard export.

Functions:
    - ascii_bar_chart: Horizontal bars for keyword slices
    - donut_legend: Legend lines for the keyword donut with percentages
    - column_chart: Vertical columns on the fixed 0-20 y-domain
    - line_chart: Point plot of a monthly series on the same domain
    - heatmap_lines: Binary yearly heatmap with month separators
    - month_calendar_lines: Month grid with memo markers
"""
from __future__ import annotations

import calendar
from datetime import date
from typing import List, Optional, Sequence, Set

from reflog.stats.aggregation import Slice, percent_string
from reflog.stats.calendar import HeatmapColumn, grid_rows, month_grid
from reflog.stats.geometry import Y_MAX, Y_TICKS, bar_geometry, donut_geometry, line_geometry

COLOR_MARKERS = {
    "red": "🔴",
    "yellow": "🟡",
    "green": "🟢",
    "blue": "🔵",
    "gray": "⚪",
}

WEEKDAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


def ascii_bar_chart(
    slices: Sequence[Slice],
    max_width: int = 20,
    empty_char: str = "░",
    fill_char: str = "█",
    show_percentage: bool = False,
) -> List[str]:
    """
    Generate horizontal bar chart lines from chart slices.

    Args:
        slices: Slices to draw, in display order
        max_width: Maximum bar width in characters
        empty_char: Character for zero values
        fill_char: Character for filled space
        show_percentage: Include percentage of the slice total

    Returns:
        List of formatted chart lines

    Example:
        >>> lines = ascii_bar_chart([Slice("work", 10, "red"), Slice("study", 5, "yellow")])
        >>> for line in lines:
        ...     print(line)
        🔴 work         ████████████████████ (10)
        🟡 study        ██████████           (5)
    """
    if not slices:
        return []

    max_count = max(s.count for s in slices)
    total = sum(s.count for s in slices)
    lines = []

    for s in slices:
        if max_count > 0:
            bar_length = int((s.count / max_count) * max_width)
            bar = fill_char * bar_length if bar_length > 0 else empty_char
        else:
            bar = empty_char

        marker = COLOR_MARKERS.get(s.color, "•")
        if show_percentage:
            pct = percent_string(s.count, total)
            lines.append(f"{marker} {s.label:12s} {bar:{max_width}s} {s.count:3d} ({pct})")
        else:
            lines.append(f"{marker} {s.label:12s} {bar:{max_width}s} ({s.count})")

    return lines


def donut_legend(slices: Sequence[Slice]) -> List[str]:
    """
    Legend for the keyword donut.

    Each line shows the slice colour, label, count, share of the total
    and the arc extent in degrees.
    """
    total = sum(s.count for s in slices)
    arcs = donut_geometry(slices)
    return [
        f"{COLOR_MARKERS.get(a.color, '•')} {a.label:12s} "
        f"{a.count} · {percent_string(a.count, total)} ({a.sweep:.0f}°)"
        for a in arcs
    ]


def _row_threshold(row: int, rows: int) -> float:
    """Plot height (in rows) a value must reach to fill ``row`` (0 = top)."""
    return rows - row - 0.5


def column_chart(
    values: Sequence[int],
    labels: Sequence[str],
    rows: int = 10,
    fill_char: str = "█",
) -> List[str]:
    """
    Vertical columns, one per value, with the y-axis ticks on the right.

    Values above 20 are drawn at full height.

    Example:
        >>> column_chart([2, 10], ["1/1", "1/2"], rows=4)
    """
    if not values:
        return []

    width = 4 * len(values)
    bars = bar_geometry(values, width=width, height=rows, gap=0)
    lines = []

    for row in range(rows):
        threshold = _row_threshold(row, rows)
        cells = "".join(
            f" {fill_char * 2} " if bar.height >= threshold else "    " for bar in bars
        )
        lines.append(f"{cells}{_tick_label(row, rows)}".rstrip())

    lines.append("".join(f"{str(v):^4s}" for v in values).rstrip())
    lines.append("".join(f"{label[:4]:^4s}" for label in labels).rstrip())
    return lines


def line_chart(
    values: Sequence[int],
    labels: Sequence[str],
    rows: int = 10,
    marker: str = "●",
) -> List[str]:
    """
    Point plot of a series, one column per value, with right-hand ticks.

    Consecutive points are joined by vertical runs of ``│`` where the
    series moves more than one row.
    """
    if not values:
        return []

    points = line_geometry(values, width=4 * len(values), height=rows)
    point_rows = [min(int(p.y), rows - 1) for p in points]
    lines = []

    for row in range(rows):
        cells = []
        for i, point_row in enumerate(point_rows):
            prev_row = point_rows[i - 1] if i > 0 else point_row
            if point_row == row:
                cells.append(f" {marker}  ")
            elif min(prev_row, point_row) < row < max(prev_row, point_row):
                cells.append(" │  ")
            else:
                cells.append("    ")
        lines.append(f"{''.join(cells)}{_tick_label(row, rows)}".rstrip())

    lines.append("".join(f"{str(v):^4s}" for v in values).rstrip())
    lines.append("".join(f"{label[:4]:^4s}" for label in labels).rstrip())
    return lines


def _tick_label(row: int, rows: int) -> str:
    """Tick value printed beside ``row`` when a tick falls within it."""
    for tick in Y_TICKS:
        tick_row = int((1 - tick / Y_MAX) * rows)
        if tick_row == row:
            return f" ┤{tick}"
    return " │"


def heatmap_lines(
    columns: Sequence[HeatmapColumn],
    filled: str = "█",
    empty: str = "·",
    separator: str = "|",
) -> List[str]:
    """
    Render the yearly heatmap as seven weekday rows.

    Slots outside the year are blank; a separator precedes every week
    that contains the 1st of a month.
    """
    lines = []
    for weekday in range(7):
        cells = []
        for column in columns:
            if column.month_boundary:
                cells.append(separator)
            cell = column.cells[weekday]
            if cell is None:
                cells.append(" ")
            else:
                cells.append(filled if cell.has_memo else empty)
        lines.append(f"{WEEKDAY_LABELS[weekday]} {''.join(cells)}")
    return lines


def month_calendar_lines(
    year: int,
    month: int,
    marked: Optional[Set[date]] = None,
    selected: Optional[date] = None,
) -> List[str]:
    """
    Month grid, Sunday first.

    Days with a memo carry a ``*`` marker; the selected day is bracketed.
    """
    marked = marked or set()
    lines = [
        f"{calendar.month_name[month]} {year}",
        " ".join(f"{label[:2]:>4s}" for label in WEEKDAY_LABELS),
    ]

    for row in grid_rows(month_grid(year, month)):
        cells = []
        for day in row:
            if day is None:
                cells.append("    ")
                continue
            mark = "*" if day in marked else " "
            text = f"{day.day:2d}{mark}"
            cells.append(f"[{text}" if day == selected else f" {text}")
        lines.append(" ".join(cells).rstrip())

    return lines
