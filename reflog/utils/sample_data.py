#!/usr/bin/env python3
"""
sample_data.py
-------------------
Random demo memos for trying out the statistics screens.

Every generator takes an optional ``random.Random`` so that tests and
the ``seed`` command can reproduce the same data set.

Functions:
    generate_last_year: Memos spread evenly over every month of last year
    generate_last_month: Memos on random days of last month
    generate_this_month: Memos on random days of this month
    compose_demo: The three generators above, combined and sorted
    generate_random_in_years: Memos at random instants between two years

Usage:
    from reflog.utils.sample_data import compose_demo

    memos = compose_demo(rng=random.Random(42))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import calendar
import random
import uuid
from datetime import date, datetime, timedelta
from typing import List, Optional

# --- Local imports ---
from reflog.dataclasses.memo import Memo, sort_memos

TAG_POOL = [
    "work",
    "personal tasks",
    "reading",
    "exercise",
    "UI/UX",
    "SwiftUI",
    "algorithms",
    "study",
    "project",
    "fruit",
]
TITLE_POOL = [
    "Research notes",
    "Idea sketch",
    "Weekly review",
    "Today's goals",
    "Book notes",
    "Training log",
    "Bug report",
    "UI improvements",
    "Code refactor",
    "Shopping list",
]
CONTENT_POOL = [
    "Quick note",
    "Detailed plan",
    "Key takeaways",
    "Retrospective points",
    "Next action items",
    "Memo details",
]
MINUTES = (0, 15, 30, 45)


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_memo(day: datetime, rng: Optional[random.Random] = None) -> Memo:
    """One memo on ``day`` with 1-2 tags, a title and a content from the pools."""
    rng = _rng(rng)
    tags = rng.sample(TAG_POOL, rng.randint(1, 2))
    return Memo(
        id=uuid.UUID(int=rng.getrandbits(128), version=4),
        day=day,
        title=rng.choice(TITLE_POOL),
        tags=tags,
        content=rng.choice(CONTENT_POOL),
    )


def random_day_in_month(year: int, month: int, rng: Optional[random.Random] = None) -> datetime:
    """Random day of the month between 09:00 and 21:45, on a quarter hour."""
    rng = _rng(rng)
    days_in_month = calendar.monthrange(year, month)[1]
    return datetime(
        year,
        month,
        rng.randint(1, days_in_month),
        rng.randint(9, 21),
        rng.choice(MINUTES),
    )


def generate_last_year(
    per_month: int = 3,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[Memo]:
    rng = _rng(rng)
    year = (today or date.today()).year - 1
    return [
        random_memo(random_day_in_month(year, month, rng), rng)
        for month in range(1, 13)
        for _ in range(per_month)
    ]


def generate_last_month(
    count: int = 6,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[Memo]:
    rng = _rng(rng)
    first = (today or date.today()).replace(day=1)
    previous = first - timedelta(days=1)
    return [
        random_memo(random_day_in_month(previous.year, previous.month, rng), rng)
        for _ in range(count)
    ]


def generate_this_month(
    count: int = 4,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[Memo]:
    rng = _rng(rng)
    today = today or date.today()
    return [
        random_memo(random_day_in_month(today.year, today.month, rng), rng)
        for _ in range(count)
    ]


def compose_demo(
    last_year_per_month: int = 3,
    last_month_count: int = 6,
    this_month_count: int = 4,
    today: Optional[date] = None,
    rng: Optional[random.Random] = None,
) -> List[Memo]:
    """
    Demo data set: last year, last month and this month combined.

    Returns:
        Memos sorted newest first
    """
    rng = _rng(rng)
    memos = generate_last_year(last_year_per_month, today, rng)
    memos += generate_last_month(last_month_count, today, rng)
    memos += generate_this_month(this_month_count, today, rng)
    return sort_memos(memos)


def generate_random_in_years(
    start_year: int,
    end_year: int,
    total: int = 500,
    now: Optional[datetime] = None,
    rng: Optional[random.Random] = None,
) -> List[Memo]:
    """
    Memos at uniformly random instants from Jan 1 of ``start_year``
    through the end of ``end_year``, capped at ``now``.

    Returns:
        Memos sorted newest first; empty when the range is empty
    """
    rng = _rng(rng)
    start = datetime(start_year, 1, 1)
    end = min(now or datetime.now(), datetime(end_year + 1, 1, 1))

    span = (end - start).total_seconds()
    if span <= 0:
        return []

    memos = [
        random_memo(start + timedelta(seconds=rng.uniform(0, span)), rng)
        for _ in range(total)
    ]
    return sort_memos(memos)
