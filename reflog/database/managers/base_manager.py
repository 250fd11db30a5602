#!/usr/bin/env python3
"""
base_manager.py
--------------------
Base manager providing common utilities for all entity managers.

Key Features:
    - Retry logic for database lock handling
    - Key-value helpers over the settings table (shared by the settings
      store and the tag registry)

Usage:
    class SettingsManager(BaseManager):
        def get_font_size(self) -> float:
            return self._read_value("fontSize", 20.0)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import time
from abc import ABC
from typing import Any, Callable, Optional

# --- Third party imports ---
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError

# --- Local imports ---
from reflog.core.exceptions import DatabaseError
from reflog.core.logging_manager import ReflogLogger, safe_logger
from reflog.database.models import Setting


class BaseManager(ABC):
    """
    Abstract base manager.

    Attributes:
        session: SQLAlchemy session for database operations
        logger: Optional logger for operation tracking
    """

    def __init__(self, session: Session, logger: Optional[ReflogLogger] = None):
        """
        Initialize the base manager.

        Args:
            session: SQLAlchemy session
            logger: Optional logger for operation tracking
        """
        self.session = session
        self.logger = logger

    # -------------------------------------------------------------------------
    # Core Helper Methods
    # -------------------------------------------------------------------------

    def _execute_with_retry(
        self,
        operation: Callable,
        max_retries: int = 3,
        retry_delay: float = 0.1,
    ) -> Any:
        """
        Execute database operation with retry on lock.

        Args:
            operation: Callable that performs the operation
            max_retries: Maximum number of retry attempts
            retry_delay: Base delay between retries (exponential backoff)

        Returns:
            Result of the operation

        Raises:
            OperationalError: If all retries exhausted
        """
        for attempt in range(max_retries):
            try:
                return operation()
            except OperationalError as e:
                error_msg = str(e).lower()

                if (
                    "locked" in error_msg or "busy" in error_msg
                ) and attempt < max_retries - 1:
                    wait_time = retry_delay * (2**attempt)

                    safe_logger(self.logger).log_debug(
                        f"Database locked, retrying in {wait_time}s",
                        {"attempt": attempt + 1, "max_retries": max_retries},
                    )

                    time.sleep(wait_time)
                    continue

                raise

        raise DatabaseError("Retry loop completed without success")

    # -------------------------------------------------------------------------
    # Key-Value Helpers
    # -------------------------------------------------------------------------

    def _read_value(self, key: str, default: Any = None) -> Any:
        """
        Read a settings value, falling back to ``default`` when absent.

        Args:
            key: Setting key
            default: Value returned when the key is not stored

        Returns:
            Stored JSON value or default
        """
        setting = self.session.get(Setting, key)
        if setting is None or setting.value is None:
            return default
        return setting.value

    def _write_value(self, key: str, value: Any) -> None:
        """
        Store a settings value and flush immediately.

        Args:
            key: Setting key
            value: JSON-serializable value
        """

        def _do_write() -> None:
            setting = self.session.get(Setting, key)
            if setting is None:
                self.session.add(Setting(key=key, value=value))
            else:
                setting.value = value
            self.session.flush()

        self._execute_with_retry(_do_write)

    def _delete_value(self, key: str) -> bool:
        """Remove a settings key. Returns True if it existed."""
        setting = self.session.get(Setting, key)
        if setting is None:
            return False
        self.session.delete(setting)
        self.session.flush()
        return True
