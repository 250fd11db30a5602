#!/usr/bin/env python3
"""
memo_collection.py
-------------------

The canonical in-memory memo collection.

Exactly one owner holds a MemoCollection at a time. Every local
mutation broadcasts the full, sorted list under ``MEMOS_DID_CHANGE`` so
other views (statistics, persistence) can replace their copy. Lookups
that miss are silent no-ops.

Usage:
    bus = EventBus()
    collection = MemoCollection(memos, bus)
    collection.insert(Memo(day=datetime.now(), title="Weekly review"))
    collection.delete_at([0])
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Iterable, Iterator, List, Optional, Union

from reflog.core.events import EventBus, MEMOS_DID_CHANGE
from .memo import Memo, sort_memos


class MemoCollection:
    """
    Ordered memo list owned by a single screen.

    Attributes:
        memos: Memos in insertion order (newest inserts at the front)
        bus: Event bus used for change broadcast (optional)
    """

    def __init__(
        self, memos: Optional[Iterable[Memo]] = None, bus: Optional[EventBus] = None
    ) -> None:
        self.memos: List[Memo] = list(memos or [])
        self.bus = bus

    def __len__(self) -> int:
        return len(self.memos)

    def __iter__(self) -> Iterator[Memo]:
        return iter(self.memos)

    @property
    def sorted(self) -> List[Memo]:
        """Memos in display order (newest first)."""
        return sort_memos(self.memos)

    def get(self, memo_id: Union[uuid.UUID, str]) -> Optional[Memo]:
        key = str(memo_id)
        return next((m for m in self.memos if str(m.id) == key), None)

    def find_by_prefix(self, prefix: str) -> List[Memo]:
        """Memos whose id starts with ``prefix`` (short ids in the CLI)."""
        return [m for m in self.memos if str(m.id).startswith(prefix)]

    # ---- Mutations ----
    def insert(self, memo: Memo) -> None:
        self.memos.insert(0, memo)
        self._broadcast()

    def update(
        self,
        memo_id: Union[uuid.UUID, str],
        title: Optional[str] = None,
        content: Optional[str] = None,
        tags: Optional[List[str]] = None,
        day: Optional[datetime] = None,
    ) -> Optional[Memo]:
        """
        Edit a memo in place.

        Only the fields passed as non-None change.

        Returns:
            The edited memo, or None if no memo has that id
        """
        memo = self.get(memo_id)
        if memo is None:
            return None

        if title is not None:
            memo.title = title
        if content is not None:
            memo.content = content
        if tags is not None:
            memo.tags = list(tags)
        if day is not None:
            memo.day = day

        self._broadcast()
        return memo

    def delete_at(self, offsets: Iterable[int]) -> List[Memo]:
        """
        Delete memos by position in display order.

        Positions outside the list are ignored.

        Returns:
            The removed memos
        """
        displayed = self.sorted
        doomed = {
            displayed[i].id for i in set(offsets) if 0 <= i < len(displayed)
        }
        if not doomed:
            return []

        removed = [m for m in self.memos if m.id in doomed]
        self.memos = [m for m in self.memos if m.id not in doomed]
        self._broadcast()
        return removed

    def delete(self, memo_id: Union[uuid.UUID, str]) -> bool:
        memo = self.get(memo_id)
        if memo is None:
            return False

        self.memos.remove(memo)
        self._broadcast()
        return True

    def replace(self, memos: Iterable[Memo]) -> None:
        """
        Adopt a list received from a broadcast.

        Does not re-broadcast, so two collections subscribed to each
        other cannot loop.
        """
        self.memos = sort_memos(memos)

    def announce(self) -> None:
        """Broadcast the current list (initial sync of other views)."""
        self._broadcast()

    def _broadcast(self) -> None:
        if self.bus is not None:
            self.bus.post(MEMOS_DID_CHANGE, self.sorted)
