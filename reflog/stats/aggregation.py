"""
Memo Aggregation
----------------

Pure functions that derive statistics from a memo list.

Nothing here is persisted: every screen recomputes its aggregates from
the current memo list on each render. Empty input always yields empty or
zero results.

Functions:
    - marked_dates: Days with at least one memo
    - day_counts: Memo count per calendar day
    - tag_counts: Occurrence count per tag (empty tags discarded)
    - rank_tags: Tags ordered by count desc, then label asc
    - top_n_with_others: Top tags plus an 'others' remainder bucket
    - monthly_series: Per-month counts for one year, zeros included
    - last_7_days: Daily counts for the week ending today
    - total_count / month_count: Headline counters
    - period_start / tag_counts_in_period: Tag counts for a time window
    - donut_slices / bar_slices: Coloured slices for keyword charts
    - percent_string: Rounded whole percentage
"""
from __future__ import annotations

import calendar
from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set, Tuple

from reflog.dataclasses.memo import Memo

RANK_COLORS: Tuple[str, ...] = ("red", "yellow", "green", "blue")
OTHERS_COLOR = "gray"
OTHERS_LABEL = "others"
TOP_N = 4


@dataclass(frozen=True)
class MonthCount:
    """
    Memo count for one month.

    Fields:
    - year:  Calendar year
    - month: Month number (1-12)
    - count: Number of memos
    """
    year:  int
    month: int
    count: int

    @property
    def label(self) -> str:
        return calendar.month_abbr[self.month]


@dataclass(frozen=True)
class DailyCount:
    """Memo count for one calendar day."""
    day:   date
    count: int

    @property
    def label(self) -> str:
        return f"{self.day.month}/{self.day.day}"


@dataclass(frozen=True)
class Slice:
    """
    One segment of a keyword chart.

    Fields:
    - label: Tag name, or 'others' for the remainder bucket
    - count: Occurrences
    - color: Colour name ('red', 'yellow', 'green', 'blue' or 'gray')
    """
    label: str
    count: int
    color: str


class Period(str, Enum):
    """Time windows offered by the keyword donut."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"


# ----- Per-day aggregates -----
def marked_dates(memos: Iterable[Memo]) -> Set[date]:
    """Set of days with at least one memo."""
    return {m.day_key for m in memos}


def day_counts(memos: Iterable[Memo]) -> Dict[date, int]:
    """Map each calendar day to its number of memos."""
    return dict(Counter(m.day_key for m in memos))


def total_count(counts: Dict[date, int]) -> int:
    return sum(counts.values())


def month_count(counts: Dict[date, int], today: Optional[date] = None) -> int:
    """Number of memos in today's month."""
    today = today or date.today()
    return sum(
        n for d, n in counts.items() if d.year == today.year and d.month == today.month
    )


def monthly_series(
    counts: Dict[date, int],
    year: Optional[int] = None,
    through_month: Optional[int] = None,
) -> List[MonthCount]:
    """
    Per-month totals from January through ``through_month`` inclusive.

    Args:
        counts: Output of day_counts
        year: Year to summarize (default: current year)
        through_month: Last month included (default: current month)

    Returns:
        One MonthCount per month, zero months included
    """
    today = date.today()
    year = year or today.year
    through_month = through_month or today.month

    totals: Counter = Counter()
    for d, n in counts.items():
        if d.year == year:
            totals[d.month] += n

    return [MonthCount(year, m, totals[m]) for m in range(1, through_month + 1)]


def last_7_days(counts: Dict[date, int], today: Optional[date] = None) -> List[DailyCount]:
    """Seven daily counts ending today, oldest first."""
    today = today or date.today()
    days = [today - timedelta(days=offset) for offset in range(6, -1, -1)]
    return [DailyCount(d, counts.get(d, 0)) for d in days]


# ----- Tag aggregates -----
def tag_counts(memos: Iterable[Memo]) -> Dict[str, int]:
    """Occurrences of each tag across all memos; empty tags are discarded."""
    return dict(Counter(t for m in memos for t in m.tags if t))


def rank_tags(counts: Dict[str, int]) -> List[Tuple[str, int]]:
    """Tags sorted by count descending, ties broken by label ascending."""
    return sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))


def top_n_with_others(counts: Dict[str, int], n: int = TOP_N) -> List[Tuple[str, int]]:
    """
    The first ``n`` ranked tags plus an 'others' bucket for the rest.

    The bucket is only included when its count is nonzero.
    """
    ranked = rank_tags(counts)
    head = ranked[:n]
    others = sum(c for _, c in ranked[n:])
    if others > 0:
        head.append((OTHERS_LABEL, others))
    return head


def period_start(period: Period, now: Optional[datetime] = None) -> datetime:
    """
    Start of a donut time window.

    YEAR starts on Jan 1 of this year, MONTH on the 1st of this month,
    WEEK at midnight six days before today.
    """
    now = now or datetime.now()
    if period == Period.YEAR:
        return datetime(now.year, 1, 1)
    if period == Period.MONTH:
        return datetime(now.year, now.month, 1)
    return datetime.combine(now.date() - timedelta(days=6), time.min)


def tag_counts_in_period(
    memos: Iterable[Memo], period: Period, now: Optional[datetime] = None
) -> Dict[str, int]:
    """Tag counts over memos dated between the period start and ``now``."""
    now = now or datetime.now()
    start = period_start(period, now)
    return tag_counts(m for m in memos if start <= m.day <= now)


# ----- Chart slices -----
def _ranked_slices(ranked: List[Tuple[str, int]]) -> List[Slice]:
    return [
        Slice(label, count, RANK_COLORS[min(idx, len(RANK_COLORS) - 1)])
        for idx, (label, count) in enumerate(ranked)
    ]


def donut_slices(counts: Dict[str, int]) -> List[Slice]:
    """Top four tags in rank colours, then a gray 'others' slice if nonzero."""
    ranked = rank_tags(counts)
    slices = _ranked_slices(ranked[:TOP_N])

    others = sum(c for _, c in ranked[TOP_N:])
    if others > 0:
        slices.append(Slice(OTHERS_LABEL, others, OTHERS_COLOR))
    return slices


def bar_slices(counts: Dict[str, int], show_all: bool = False) -> List[Slice]:
    """
    Bars for the all-time keyword chart.

    Args:
        counts: Tag counts
        show_all: Return every tag individually (rank colours for the
            top four, gray for the rest)

    Returns:
        With fewer than five tags, every tag. Otherwise the top four plus
        a gray 'others' bar when the remainder is nonzero.
    """
    ranked = rank_tags(counts)

    if show_all:
        return [
            Slice(label, count, RANK_COLORS[idx] if idx < TOP_N else OTHERS_COLOR)
            for idx, (label, count) in enumerate(ranked)
        ]

    if len(ranked) <= TOP_N:
        return _ranked_slices(ranked)

    return donut_slices(counts)


def percent_string(count: int, total: int) -> str:
    """Whole percentage with halves rounded up, e.g. ``'42%'``; ``'0%'`` if total is 0."""
    if total <= 0:
        return "0%"
    return f"{int(count / total * 100 + 0.5)}%"
