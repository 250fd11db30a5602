"""
ORM Models
----------

SQLAlchemy ORM models for the Reflog database.

Classes:
    - Base: Declarative base for all models
    - MemoRecord: Persisted memo
    - Setting: Key-value settings storage (also holds the tag registry)

The settings table is a plain key-value store: values are JSON, absent
keys fall back to defaults in the managers, and there is no schema
versioning.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import uuid
from datetime import datetime
from typing import Any, List

# --- Third party ---
from sqlalchemy import JSON, CheckConstraint, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# --- Local imports ---
from reflog.dataclasses.memo import Memo


class Base(DeclarativeBase):
    """
    Base class for all ORM models.

    Provides access to the metadata object for table creation.
    """

    pass


class MemoRecord(Base):
    """
    A persisted memo.

    Attributes:
        id: UUID string primary key
        day: Memo timestamp (naive local time)
        title: Title text
        content: Body text
        tags: Ordered list of tag strings (JSON)
    """

    __tablename__ = "memos"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    day: Mapped[datetime] = mapped_column(DateTime, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    tags: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)

    def to_memo(self) -> Memo:
        """Convert to the in-memory Memo dataclass."""
        return Memo(
            id=uuid.UUID(self.id),
            day=self.day,
            title=self.title,
            tags=list(self.tags or []),
            content=self.content,
        )

    def apply(self, memo: Memo) -> None:
        """Copy fields from a Memo onto this record."""
        self.day = memo.day
        self.title = memo.title
        self.content = memo.content
        self.tags = list(memo.tags)

    @classmethod
    def from_memo(cls, memo: Memo) -> "MemoRecord":
        record = cls(id=str(memo.id))
        record.apply(memo)
        return record

    def __repr__(self) -> str:
        return f"<MemoRecord(id={self.id[:8]}, day={self.day:%Y-%m-%d}, title={self.title!r})>"


class Setting(Base):
    """
    One key-value pair of local settings storage.

    Attributes:
        key: Setting name (e.g. 'fontSize', 'allSavedTags')
        value: JSON value
    """

    __tablename__ = "settings"
    __table_args__ = (CheckConstraint("key != ''", name="ck_setting_non_empty_key"),)

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[Any] = mapped_column(JSON, nullable=True)

    def __repr__(self) -> str:
        return f"<Setting(key={self.key!r})>"
