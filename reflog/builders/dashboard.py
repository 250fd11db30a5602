"""
Statistics Dashboard Builder
-----------------------------

Renders the three statistics screens (history, memo counts, keywords)
and the day detail list as text lines, and exports them together as a
Markdown dashboard.

Functions:
    - history_lines: Month calendar and yearly heatmap
    - memo_stats_lines: Totals, last 7 days and monthly series
    - keyword_stats_lines: Donut legend for a period and all-time bars
    - day_detail_lines: Memos written on one day
    - export_stats: Write the dashboard to Markdown (stats.md)

Classes:
    - StatisticsScreen: Working copy of the memos kept in sync by broadcast
"""
from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Sequence

from reflog.core.events import EventBus, MEMOS_DID_CHANGE
from reflog.core.exceptions import ExportError
from reflog.core.logging_manager import ReflogLogger
from reflog.dataclasses.memo import Memo, memos_on, sort_memos
from reflog.stats.aggregation import (
    Period,
    bar_slices,
    day_counts,
    donut_slices,
    last_7_days,
    marked_dates,
    month_count,
    monthly_series,
    tag_counts,
    tag_counts_in_period,
    total_count,
)
from reflog.stats.calendar import year_heatmap
from reflog.utils.fs import write_if_changed
from .charts import (
    ascii_bar_chart,
    column_chart,
    donut_legend,
    heatmap_lines,
    line_chart,
    month_calendar_lines,
)

NO_ENTRIES = "No entries for this date."

PERIOD_TITLES = {
    Period.YEAR: "This year",
    Period.MONTH: "This month",
    Period.WEEK: "Last 7 days",
}


# ----- Screens -----
def history_lines(
    memos: Sequence[Memo],
    year: int,
    month: int,
    heatmap_year: Optional[int] = None,
    selected: Optional[date] = None,
) -> List[str]:
    """
    History screen: month calendar with memo markers, then the heatmap.

    Args:
        memos: Memo list
        year: Calendar year shown
        month: Calendar month shown
        heatmap_year: Year of the heatmap (default: ``year``)
        selected: Day highlighted in the calendar
    """
    heatmap_year = heatmap_year or year
    lines = ["## History", ""]
    lines.extend(month_calendar_lines(year, month, marked_dates(memos), selected))
    lines.extend(["", f"### {heatmap_year} activity", ""])
    lines.extend(heatmap_lines(year_heatmap(heatmap_year, day_counts(memos))))
    return lines


def memo_stats_lines(memos: Sequence[Memo], today: Optional[date] = None) -> List[str]:
    """Memo statistics screen: headline counters and two activity charts."""
    today = today or date.today()
    counts = day_counts(memos)

    week = last_7_days(counts, today)
    series = monthly_series(counts, today.year, today.month)

    lines = [
        "## Memo Statistics",
        "",
        f"- **Total memos:** {total_count(counts)}",
        f"- **This month:** {month_count(counts, today)}",
        "",
        "### Last 7 days",
        "",
    ]
    lines.extend(column_chart([d.count for d in week], [d.label for d in week]))
    lines.extend(["", f"### Monthly memos ({today.year})", ""])
    lines.extend(line_chart([m.count for m in series], [m.label for m in series]))
    return lines


def keyword_stats_lines(
    memos: Sequence[Memo],
    period: Period = Period.YEAR,
    show_all: bool = False,
    now: Optional[datetime] = None,
) -> List[str]:
    """
    Keyword statistics screen.

    Args:
        memos: Memo list
        period: Window of the donut breakdown
        show_all: List every tag in the all-time bars instead of the top 5
        now: Reference time for the period window
    """
    lines = ["## Keyword Statistics", "", f"### {PERIOD_TITLES[period]}", ""]

    legend = donut_legend(donut_slices(tag_counts_in_period(memos, period, now)))
    lines.extend(legend or ["No keywords in this period."])

    bars = bar_slices(tag_counts(memos), show_all=show_all)
    lines.extend(["", "### All keywords" if show_all else "### Top keywords", ""])
    lines.extend(ascii_bar_chart(bars) or ["No keywords yet."])
    return lines


def day_detail_lines(memos: Iterable[Memo], day: date) -> List[str]:
    """Memos written on ``day``, newest first, or a placeholder line."""
    selected = memos_on(memos, day)
    if not selected:
        return [NO_ENTRIES]

    lines = []
    for memo in selected:
        tags = " ".join(f"#{t}" for t in memo.visible_tags)
        lines.append(f"{memo.detail_date}  {memo.title}  {tags}".rstrip())
    return lines


# ----- Broadcast-synced screen -----
class StatisticsScreen:
    """
    Statistics view holding its own copy of the memo list.

    Once attached to an event bus, every MEMOS_DID_CHANGE payload
    replaces the working copy.
    """

    def __init__(self, memos: Optional[Iterable[Memo]] = None) -> None:
        self.memos: List[Memo] = sort_memos(memos or [])
        self._unsubscribe: Optional[Callable[[], None]] = None

    def attach(self, bus: EventBus) -> None:
        self.detach()
        self._unsubscribe = bus.subscribe(MEMOS_DID_CHANGE, self.receive)

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def receive(self, payload: Iterable[Memo]) -> None:
        self.memos = list(payload)

    def history(self, year: int, month: int, heatmap_year: Optional[int] = None) -> List[str]:
        return history_lines(self.memos, year, month, heatmap_year)

    def memo_stats(self, today: Optional[date] = None) -> List[str]:
        return memo_stats_lines(self.memos, today)

    def keyword_stats(
        self,
        period: Period = Period.YEAR,
        show_all: bool = False,
        now: Optional[datetime] = None,
    ) -> List[str]:
        return keyword_stats_lines(self.memos, period, show_all, now)

    def day_detail(self, day: date) -> List[str]:
        return day_detail_lines(self.memos, day)


# ----- Export -----
def export_stats(
    memos: Sequence[Memo],
    output_path: Path,
    force: bool = False,
    today: Optional[date] = None,
    logger: Optional[ReflogLogger] = None,
) -> str:
    """
    Export the statistics dashboard (stats.md).

    Creates a Markdown file with:
    - History calendar and heatmap for the current month and year
    - Memo counters and activity charts
    - Keyword breakdown for this year and the all-time top keywords

    Args:
        memos: Memo list
        output_path: Target Markdown file
        force: Force write even if unchanged
        today: Reference day (default: today)
        logger: Optional logger

    Returns:
        Status: "created", "updated", or "skipped"

    Raises:
        ExportError: If the file cannot be written
    """
    today = today or date.today()
    now = datetime.combine(today, datetime.max.time())

    if logger:
        logger.log_operation("export_stats_start", {"output": str(output_path)})

    lines = [
        "# Reflog Statistics Dashboard",
        "",
        f"Generated for {today.isoformat()}.",
        "",
    ]
    for section in (
        history_lines(memos, today.year, today.month, selected=today),
        memo_stats_lines(memos, today),
        keyword_stats_lines(memos, Period.YEAR, show_all=False, now=now),
    ):
        # Section heading stays Markdown; the chart body is fenced
        heading, body = section[0], section[1:]
        lines.extend([heading, "", "```text"])
        lines.extend(line for line in body if line)
        lines.extend(["```", ""])

    content = "\n".join(lines)

    try:
        status = write_if_changed(output_path, content, force=force)
    except OSError as e:
        if logger:
            logger.log_error(e, {"operation": "export_stats"})
        raise ExportError(f"Cannot write statistics to {output_path}: {e}")

    if logger:
        logger.log_operation(
            "export_stats_complete", {"status": status, "memos": len(memos)}
        )
    return status
