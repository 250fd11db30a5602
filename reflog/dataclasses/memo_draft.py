#!/usr/bin/env python3
"""
memo_draft.py
-------------------

Editor state for creating or editing a memo.

A MemoDraft tracks the title, content and tags being edited, plus a
snapshot of the last saved values so the editor knows whether saving
would change anything. Saving writes through a MemoCollection (which
broadcasts the change) and registers every tag with the tag registry.

Save rules:
    - The save control is enabled only when the trimmed content is
      non-empty or at least one tag was added, AND something changed
      since the last save.
    - Edit mode updates the memo in place and stamps it with ``now``.
    - New mode inserts at the front of the collection, but only when the
      trimmed title is non-empty; the draft then switches to edit mode.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Protocol

from .memo import Memo
from .memo_collection import MemoCollection


class TagRegistry(Protocol):
    """Registry operations the editor relies on."""

    def add(self, tag: str) -> bool: ...

    def add_many(self, tags: Iterable[str]) -> int: ...

    def suggestions(
        self, query: str = "", exclude: Optional[Iterable[str]] = None
    ) -> List[str]: ...


@dataclass
class MemoDraft:
    """
    Mutable editor state.

    Fields:
    - title:         Title being edited
    - content:       Body being edited
    - tags:          Tags added so far (no blanks, no duplicates)
    - memo:          Memo being edited (None while creating)
    - saved_title:   Title at last save / load
    - saved_content: Content at last save / load
    - saved_tags:    Tags at last save / load
    """
    title:         str            = ""
    content:       str            = ""
    tags:          List[str]      = field(default_factory=list)
    memo:          Optional[Memo] = None
    saved_title:   str            = ""
    saved_content: str            = ""
    saved_tags:    List[str]      = field(default_factory=list)

    # ---- Constructors ----
    @classmethod
    def new(cls) -> "MemoDraft":
        return cls()

    @classmethod
    def from_memo(cls, memo: Memo) -> "MemoDraft":
        """Start editing an existing memo; empty tag placeholders are dropped."""
        tags = memo.visible_tags
        return cls(
            title=memo.title,
            content=memo.content,
            tags=list(tags),
            memo=memo,
            saved_title=memo.title,
            saved_content=memo.content,
            saved_tags=list(tags),
        )

    @property
    def is_edit_mode(self) -> bool:
        return self.memo is not None

    # ---- Tags ----
    def add_tag(self, raw: str, registry: Optional[TagRegistry] = None) -> Optional[str]:
        """
        Add a tag typed by the user.

        Commas act as the submit key and are stripped; surrounding
        whitespace is trimmed. Blank and already-added tags are ignored.

        Returns:
            The added tag, or None if nothing was added
        """
        tag = raw.replace(",", "").strip()
        if not tag or tag in self.tags:
            return None

        self.tags.append(tag)
        if registry is not None:
            registry.add(tag)
        return tag

    def remove_tag(self, tag: str) -> bool:
        if tag not in self.tags:
            return False
        self.tags.remove(tag)
        return True

    def suggestions(self, registry: TagRegistry, query: str = "") -> List[str]:
        """Autocomplete candidates that are not already on this draft."""
        return registry.suggestions(query, exclude=self.tags)

    # ---- Save state ----
    @property
    def is_changed(self) -> bool:
        return (
            self.title != self.saved_title
            or self.content != self.saved_content
            or self.tags != self.saved_tags
        )

    @property
    def can_save(self) -> bool:
        has_body = bool(self.content.strip()) or bool(self.tags)
        return has_body and self.is_changed

    def save(
        self,
        collection: MemoCollection,
        registry: Optional[TagRegistry] = None,
        now: Optional[datetime] = None,
    ) -> Optional[Memo]:
        """
        Write the draft into the collection.

        Args:
            collection: Canonical memo collection
            registry: Tag registry receiving every tag on the draft
            now: Timestamp for the saved memo (defaults to datetime.now())

        Returns:
            The created or updated memo, or None if nothing was written
        """
        now = now or datetime.now()
        title = self.title.strip()
        content = self.content.strip()

        if registry is not None:
            registry.add_many(self.tags)

        saved: Optional[Memo] = None
        if self.memo is not None:
            saved = collection.update(
                self.memo.id,
                title=title,
                content=content,
                tags=list(self.tags),
                day=now,
            )
        elif title:
            saved = Memo(day=now, title=title, tags=list(self.tags), content=content)
            collection.insert(saved)
            self.memo = saved

        self.title = title
        self.content = content
        self.saved_title = title
        self.saved_content = content
        self.saved_tags = list(self.tags)
        return saved
