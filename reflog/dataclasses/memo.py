#!/usr/bin/env python3
"""
memo.py
-------------------

Defines the Memo class: a single dated journal entry with a title,
free text and a list of tags.

Tag lists may carry empty placeholders (left behind by the editor);
they are kept on the record but hidden from display and statistics.

This module also holds the list-level helpers shared by every screen:
newest-first sorting, keyword search and per-day selection.
"""
from __future__ import annotations

# --- Standard Library ---
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional

# --- Local ---
from reflog.core.exceptions import MemoValidationError
from reflog.core.validators import DataValidator

LIST_DATE_FORMAT = "%Y. %m. %d"
DETAIL_DATE_FORMAT = "%Y/%m/%d %p %I:%M"


@dataclass
class Memo:
    """
    Represents a single memo.

    Fields:
    - id:      Opaque unique identifier
    - day:     Timestamp of the memo (naive local time)
    - title:   Short title shown in list rows
    - tags:    Ordered tag labels, may contain empty placeholders
    - content: Free text body
    """
    day:     datetime
    title:   str              = ""
    tags:    List[str]        = field(default_factory=list)
    content: str              = ""
    id:      uuid.UUID        = field(default_factory=uuid.uuid4)

    # ---- Derived properties ----
    @property
    def visible_tags(self) -> List[str]:
        """Tags with empty placeholders filtered out."""
        return [t for t in self.tags if t]

    @property
    def day_key(self) -> date:
        """Calendar day of the memo (local midnight normalization)."""
        return self.day.date()

    @property
    def list_date(self) -> str:
        """Date as shown in list rows, e.g. ``2025. 01. 31``."""
        return self.day.strftime(LIST_DATE_FORMAT)

    @property
    def detail_date(self) -> str:
        """Date and time as shown in the detail view, e.g. ``2025/01/31 PM 03:15``."""
        return self.day.strftime(DETAIL_DATE_FORMAT)

    # ---- Search ----
    def matches(self, keyword: Optional[str]) -> bool:
        """
        Case-insensitive substring search over title, content and tags.

        An empty keyword matches every memo.
        """
        if not keyword:
            return True

        needle = keyword.lower()
        return (
            needle in self.title.lower()
            or needle in self.content.lower()
            or any(needle in t.lower() for t in self.tags)
        )

    # ---- Serialization ----
    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form used by persistence and YAML export."""
        return {
            "id": str(self.id),
            "day": self.day.isoformat(timespec="seconds"),
            "title": self.title,
            "tags": list(self.tags),
            "content": self.content,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Memo":
        """
        Build a Memo from its plain-data form.

        Args:
            data: Mapping with ``day`` (required), ``id``, ``title``,
                ``tags`` and ``content``

        Returns:
            Memo instance

        Raises:
            MemoValidationError: If ``day`` is missing or a field is malformed
        """
        if not isinstance(data, dict):
            raise MemoValidationError(f"Memo record must be a mapping, got {type(data).__name__}")

        try:
            day = DataValidator.normalize_datetime(data.get("day"))
        except Exception as e:
            raise MemoValidationError(str(e))
        if day is None:
            raise MemoValidationError("Memo is missing field 'day'")

        raw_id = data.get("id")
        try:
            memo_id = uuid.UUID(str(raw_id)) if raw_id else uuid.uuid4()
        except ValueError:
            raise MemoValidationError(f"Invalid memo id: '{raw_id}'")

        tags = data.get("tags") or []
        if not isinstance(tags, list):
            raise MemoValidationError("Memo field 'tags' must be a list")

        return cls(
            id=memo_id,
            day=day,
            title=str(data.get("title") or ""),
            tags=[str(t) if t is not None else "" for t in tags],
            content=str(data.get("content") or ""),
        )


# ----- List helpers -----
def sort_memos(memos: Iterable[Memo]) -> List[Memo]:
    """
    Sort newest first.

    Memos sharing the same timestamp are ordered by the string form of
    their id so the order is stable across renders.
    """
    by_id = sorted(memos, key=lambda m: str(m.id))
    return sorted(by_id, key=lambda m: m.day, reverse=True)


def filter_memos(memos: Iterable[Memo], keyword: Optional[str] = None) -> List[Memo]:
    """Sorted memos matching a search keyword (all memos if blank)."""
    return [m for m in sort_memos(memos) if m.matches(keyword)]


def memos_on(memos: Iterable[Memo], day: date) -> List[Memo]:
    """Memos written on a given calendar day, newest first."""
    return [m for m in sort_memos(memos) if m.day_key == day]
