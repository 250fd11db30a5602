#!/usr/bin/env python3
"""
memo_manager.py
--------------------
Manager for persisted memos.

The in-memory MemoCollection is the canonical copy while the CLI runs;
this manager loads it at startup and writes it back through ``sync``,
which is subscribed to the memo change broadcast.

Key Features:
    - CRUD operations over the memos table
    - Metadata normalization through DataValidator
    - Full-collection sync (upsert present rows, delete absent ones)

Usage:
    memo_mgr = MemoManager(session, logger)
    memo = memo_mgr.create({"title": "Run", "tags": ["exercise"]})
    memo_mgr.sync(collection.sorted)
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence, Union

from reflog.core.exceptions import MemoValidationError, ValidationError
from reflog.core.validators import DataValidator
from reflog.dataclasses.memo import Memo, sort_memos
from reflog.database.decorators import handle_db_errors, log_database_operation
from reflog.database.models import MemoRecord
from .base_manager import BaseManager

MemoId = Union[str, uuid.UUID]


class MemoManager(BaseManager):
    """
    Manager for Memo persistence.

    Records are converted to Memo dataclasses on the way out so callers
    never hold ORM objects beyond the session scope.
    """

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _key(memo_id: MemoId) -> str:
        try:
            return str(uuid.UUID(str(memo_id)))
        except ValueError:
            raise MemoValidationError(f"Invalid memo id: '{memo_id}'")

    @staticmethod
    def _normalize_day(value: Any) -> datetime:
        try:
            day = DataValidator.normalize_datetime(value)
        except ValidationError as e:
            raise MemoValidationError(str(e))
        return day or datetime.now()

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("get_all_memos")
    def get_all(self) -> List[Memo]:
        """
        Retrieve every memo.

        Returns:
            Memos sorted newest first
        """
        records = self.session.query(MemoRecord).all()
        return sort_memos(r.to_memo() for r in records)

    @handle_db_errors
    def get(self, memo_id: MemoId) -> Optional[Memo]:
        record = self.session.get(MemoRecord, self._key(memo_id))
        return record.to_memo() if record else None

    @handle_db_errors
    def count(self) -> int:
        return self.session.query(MemoRecord).count()

    # -------------------------------------------------------------------------
    # Core CRUD Operations
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("create_memo")
    def create(self, metadata: Dict[str, Any]) -> Memo:
        """
        Create and persist a new memo.

        Args:
            metadata: Memo fields.
                Required keys:
                    - title (str)
                Optional keys:
                    - day (datetime | date | ISO str), defaults to now
                    - content (str)
                    - tags (list of str, or comma-separated str)
                    - id (UUID | str)

        Returns:
            The created Memo

        Raises:
            MemoValidationError: If the title is blank or a field is malformed
        """
        title = DataValidator.normalize_string(metadata.get("title"))
        if not title:
            raise MemoValidationError("Memo title cannot be empty")

        memo = Memo(
            day=self._normalize_day(metadata.get("day")),
            title=title,
            tags=DataValidator.normalize_tags(metadata.get("tags")),
            content=DataValidator.normalize_string(metadata.get("content")) or "",
        )
        if metadata.get("id") is not None:
            memo.id = uuid.UUID(self._key(metadata["id"]))

        def _do_create() -> None:
            self.session.add(MemoRecord.from_memo(memo))
            self.session.flush()

        self._execute_with_retry(_do_create)

        if self.logger:
            self.logger.log_debug(
                f"Created memo {memo.id}", {"title": memo.title, "tags": memo.tags}
            )
        return memo

    @handle_db_errors
    @log_database_operation("update_memo")
    def update(self, memo_id: MemoId, metadata: Dict[str, Any]) -> Optional[Memo]:
        """
        Update fields of an existing memo.

        Only keys present in ``metadata`` are changed.

        Returns:
            The updated Memo, or None if no memo has this id
        """
        record = self.session.get(MemoRecord, self._key(memo_id))
        if record is None:
            return None

        memo = record.to_memo()
        if "title" in metadata:
            title = DataValidator.normalize_string(metadata["title"])
            if not title:
                raise MemoValidationError("Memo title cannot be empty")
            memo.title = title
        if "content" in metadata:
            memo.content = DataValidator.normalize_string(metadata["content"]) or ""
        if "tags" in metadata:
            memo.tags = DataValidator.normalize_tags(metadata["tags"])
        if "day" in metadata:
            memo.day = self._normalize_day(metadata["day"])

        def _do_update() -> None:
            record.apply(memo)
            self.session.flush()

        self._execute_with_retry(_do_update)
        return memo

    @handle_db_errors
    @log_database_operation("delete_memo")
    def delete(self, memo_id: MemoId) -> bool:
        """Delete a memo. Returns False if no memo has this id."""
        record = self.session.get(MemoRecord, self._key(memo_id))
        if record is None:
            return False

        self.session.delete(record)
        self.session.flush()
        return True

    # -------------------------------------------------------------------------
    # Collection Sync
    # -------------------------------------------------------------------------

    @handle_db_errors
    @log_database_operation("sync_memos")
    def sync(self, memos: Sequence[Memo]) -> Dict[str, int]:
        """
        Make the memos table mirror ``memos`` exactly.

        Rows for memos in the list are inserted or updated; rows whose id
        is absent from the list are deleted.

        Args:
            memos: Full memo list (typically a change broadcast payload)

        Returns:
            Counts keyed by 'created', 'updated' and 'deleted'
        """
        stats = {"created": 0, "updated": 0, "deleted": 0}
        existing = {r.id: r for r in self.session.query(MemoRecord).all()}
        wanted = {str(m.id): m for m in memos}

        def _do_sync() -> None:
            stats.update(created=0, updated=0, deleted=0)
            for key, memo in wanted.items():
                record = existing.get(key)
                if record is None:
                    self.session.add(MemoRecord.from_memo(memo))
                    stats["created"] += 1
                elif record.to_memo() != memo:
                    record.apply(memo)
                    stats["updated"] += 1

            for key, record in existing.items():
                if key not in wanted:
                    self.session.delete(record)
                    stats["deleted"] += 1

            self.session.flush()

        self._execute_with_retry(_do_sync)

        if self.logger:
            self.logger.log_debug("Synced memos", stats)
        return stats
