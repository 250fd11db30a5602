#!/usr/bin/env python3
"""
tag_manager.py
--------------------
Manages the tag registry: the list of every tag the user has ever
registered, offered for autocomplete and reuse in the editor.

The registry is stored as a single list under the ``allSavedTags`` key
of the settings table, independently of memos. Deleting or renaming a
registered tag does not touch memos that already carry it.

Invariants:
    - No duplicate labels (comparison is case-sensitive)
    - Always sorted ascending
    - Every mutation persists the full list before returning

Usage:
    tags = TagManager(session, logger)

    tags.add("work")                  # no-op if blank or present
    tags.add_many(["life", "work"])
    tags.rename("life", "personal")   # no-op on blank/duplicate/missing
    tags.delete_at([0])
    tags.suggestions("wo", exclude=["work"])
"""
from typing import Iterable, List, Optional

from reflog.core.validators import DataValidator
from reflog.database.decorators import handle_db_errors, log_database_operation
from .base_manager import BaseManager

TAGS_KEY = "allSavedTags"


class TagManager(BaseManager):
    """
    Registry of known tag strings persisted to key-value storage.
    """

    # -------------------------------------------------------------------------
    # Storage
    # -------------------------------------------------------------------------

    def _load(self) -> List[str]:
        stored = self._read_value(TAGS_KEY, [])
        return [str(t) for t in stored] if isinstance(stored, list) else []

    def _save(self, tags: List[str]) -> None:
        self._write_value(TAGS_KEY, list(tags))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_all(self) -> List[str]:
        """
        Retrieve all registered tags.

        Returns:
            Sorted list of tag strings
        """
        return self._load()

    @handle_db_errors
    def exists(self, tag: Optional[str]) -> bool:
        if DataValidator.is_blank(tag):
            return False
        return tag in self._load()

    @handle_db_errors
    def suggestions(
        self, query: str = "", exclude: Optional[Iterable[str]] = None
    ) -> List[str]:
        """
        Autocomplete candidates.

        Args:
            query: Text typed so far; empty returns every tag
            exclude: Tags already attached to the memo being edited

        Returns:
            Registered tags containing ``query`` (case-insensitive),
            minus ``exclude``, in registry order
        """
        excluded = set(exclude or [])
        needle = (query or "").lower()
        return [
            t for t in self._load()
            if t not in excluded and (not needle or needle in t.lower())
        ]

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("add_tag")
    def add(self, tag: Optional[str]) -> bool:
        """
        Register a tag.

        Args:
            tag: Tag label

        Returns:
            True if the registry changed, False for blank or existing tags
        """
        if DataValidator.is_blank(tag):
            return False

        tags = self._load()
        if tag in tags:
            return False

        tags.append(tag)
        tags.sort()
        self._save(tags)

        if self.logger:
            self.logger.log_debug(f"Registered tag: {tag}", {"total": len(tags)})
        return True

    @handle_db_errors
    @log_database_operation("add_tags")
    def add_many(self, tags: Iterable[str]) -> int:
        """
        Register several tags.

        Returns:
            Number of tags actually added
        """
        return sum(1 for tag in tags if self.add(tag))

    @handle_db_errors
    @log_database_operation("delete_tags_at")
    def delete_at(self, offsets: Iterable[int]) -> List[str]:
        """
        Remove tags by position in the sorted registry.

        Positions outside the registry are ignored.

        Returns:
            The removed tags
        """
        tags = self._load()
        positions = {i for i in offsets if 0 <= i < len(tags)}
        if not positions:
            return []

        removed = [t for i, t in enumerate(tags) if i in positions]
        self._save([t for i, t in enumerate(tags) if i not in positions])

        if self.logger:
            self.logger.log_debug("Deleted tags", {"removed": removed})
        return removed

    @handle_db_errors
    @log_database_operation("delete_tag")
    def delete(self, tag: str) -> bool:
        """Remove a tag by name. Returns False if it is not registered."""
        tags = self._load()
        if tag not in tags:
            return False
        return bool(self.delete_at([tags.index(tag)]))

    @handle_db_errors
    @log_database_operation("rename_tag")
    def rename(self, old_name: str, new_name: Optional[str]) -> bool:
        """
        Rename a registered tag in place.

        No-op when the new name is blank, already registered, or when the
        old name is not registered.

        Returns:
            True if the registry changed
        """
        if DataValidator.is_blank(new_name):
            return False

        tags = self._load()
        if new_name in tags or old_name not in tags:
            return False

        tags[tags.index(old_name)] = new_name
        tags.sort()
        self._save(tags)

        if self.logger:
            self.logger.log_debug(
                "Renamed tag", {"old_name": old_name, "new_name": new_name}
            )
        return True
