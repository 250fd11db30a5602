#!/usr/bin/env python3
"""
manager.py
--------------------
Database manager for Reflog.

Provides the ReflogDB class for interacting with the SQLite database.
Handles:
    - Initialization of the database engine and sessionmaker
    - Schema creation from the ORM models
    - Transactional session scopes with logging
    - Access to the entity managers (memos, tags, settings)

Notes
==============
- The schema is created with Base.metadata.create_all; there are no
  migrations and no schema versioning
- Datetimes are stored naive, in local time
- Retry logic in the managers handles SQLite lock contention
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

# --- Third party ---
from sqlalchemy import Engine, create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker

# --- Local imports ---
from reflog.core.exceptions import DatabaseError
from reflog.core.logging_manager import ReflogLogger
from .models import Base
from .managers import MemoManager, SettingsManager, TagManager


class ReflogDB:
    """
    Main database manager for the Reflog store.

    Attributes:
        - db_path (Path): Filesystem path to the SQLite database file.
        - engine (Engine): SQLAlchemy engine instance.
        - SessionLocal (sessionmaker): SQLAlchemy session factory.
        - logger (ReflogLogger | None): Operation logger.

    Usage:
        db = ReflogDB("~/reflog/reflog.db", log_dir="~/reflog/logs")
        with db.session_scope():
            memos = db.memos.get_all()
            db.tags.add("reading")
    """

    # ---- Initialization ----
    def __init__(
        self,
        db_path: Union[str, Path],
        log_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize database engine and session factory.

        Args:
            db_path (str | Path): Path to the SQLite file.
            log_dir (str | Path): Directory for log files (optional)
        """
        self.db_path = Path(db_path).expanduser().resolve()

        # --- Logging ---
        if log_dir:
            self.log_dir = Path(log_dir).expanduser().resolve() / "system"
            self.logger: Optional[ReflogLogger] = ReflogLogger(
                self.log_dir,
                component_name="database",
                context={"db": self.db_path.name},
            )
        else:
            self.logger = None

        # Managers are bound per session in session_scope
        self._memo_manager: Optional[MemoManager] = None
        self._tag_manager: Optional[TagManager] = None
        self._settings_manager: Optional[SettingsManager] = None

        self._setup_engine()

    def _setup_engine(self) -> None:
        """Initialize database engine, session factory and schema."""
        try:
            if self.logger:
                self.logger.log_operation(
                    "database_init_start", {"db_path": str(self.db_path)}
                )

            self.db_path.parent.mkdir(parents=True, exist_ok=True)

            self.engine: Engine = create_engine(
                f"sqlite:///{self.db_path}",
                echo=False,
                pool_pre_ping=True,
            )

            self.SessionLocal: sessionmaker = sessionmaker(
                bind=self.engine,
                autoflush=True,
                expire_on_commit=False,
            )

            self.initialize_schema()

            if self.logger:
                self.logger.log_operation("database_init_complete", {"success": True})

        except Exception as e:
            if self.logger:
                self.logger.log_error(e, {"operation": "database_init"})
            raise DatabaseError(f"Database initialization failed: {e}")

    def initialize_schema(self) -> None:
        """Create any missing tables from the ORM models."""
        existing = set(inspect(self.engine).get_table_names())
        Base.metadata.create_all(bind=self.engine)

        created = sorted(set(Base.metadata.tables) - existing)
        if created and self.logger:
            self.logger.log_operation("schema_created", {"tables": created})

    # ---- Session Management ----
    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """
        Provide a transactional scope around operations with logging.

        Binds the entity managers to the session for the duration of the
        scope; they are available as db.memos, db.tags and db.settings.

        Usage:
            with db.session_scope() as session:
                db.tags.add("reading")
        """
        session = self.SessionLocal()
        session_id = datetime.now().strftime("%Y%m%d_%H%M%S_%f")

        self._memo_manager = MemoManager(session, self.logger)
        self._tag_manager = TagManager(session, self.logger)
        self._settings_manager = SettingsManager(session, self.logger)

        if self.logger:
            self.logger.log_debug("session_start", {"session_id": session_id})

        try:
            yield session
            session.commit()
            if self.logger:
                self.logger.log_debug("session_commit", {"session_id": session_id})

        except Exception as e:
            session.rollback()
            if self.logger:
                self.logger.log_error(
                    e, {"operation": "session_rollback", "session_id": session_id}
                )
            raise
        finally:
            self._memo_manager = None
            self._tag_manager = None
            self._settings_manager = None

            session.close()
            if self.logger:
                self.logger.log_debug("session_close", {"session_id": session_id})

    # -------------------------------------------------------------------------
    # Entity Manager Properties
    # -------------------------------------------------------------------------

    @property
    def memos(self) -> MemoManager:
        """
        Access MemoManager for memo persistence.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._memo_manager is None:
            raise DatabaseError(
                "MemoManager requires active session. "
                "Use within session_scope: "
                "with db.session_scope(): db.memos.get_all()"
            )
        return self._memo_manager

    @property
    def tags(self) -> TagManager:
        """
        Access TagManager for tag registry operations.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._tag_manager is None:
            raise DatabaseError(
                "TagManager requires active session. "
                "Use within session_scope: "
                "with db.session_scope(): db.tags.add(...)"
            )
        return self._tag_manager

    @property
    def settings(self) -> SettingsManager:
        """
        Access SettingsManager for user preferences.

        Raises:
            DatabaseError: If accessed outside of session_scope context
        """
        if self._settings_manager is None:
            raise DatabaseError(
                "SettingsManager requires active session. "
                "Use within session_scope: "
                "with db.session_scope(): db.settings.get_font_size()"
            )
        return self._settings_manager

    # ---- Cleanup ----
    def close(self) -> None:
        """Dispose of the engine and its pooled connections."""
        self.engine.dispose()
        if self.logger:
            self.logger.log_debug("database_closed", {"db_path": str(self.db_path)})

    def __enter__(self) -> "ReflogDB":
        """Support for context manager usage."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Dispose of the engine on context manager exit."""
        del exc_type, exc_val, exc_tb
        self.close()
