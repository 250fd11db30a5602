#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Logging for Reflog.

Each component ('database', 'cli', ...) writes a rotating
``<component>.log``; errors from every component also go to a shared
``errors.log``. Records carry a JSON payload, so memo ids, tag names and
counts can be grepped straight out of the files:

    2025-03-10 09:00:01 INFO    reflog.database.operations: [op] sync_memos {"db": "reflog.db", "created": 1}

Usage:
    logger = ReflogLogger(LOG_DIR / "system", "database", context={"db": "reflog.db"})
    logger.log_operation("sync_memos", {"created": 1})

    safe_logger(maybe_logger).log_debug("Registered tag", {"tag": "work"})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import sys
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import click

LOG_MAX_BYTES = 2 * 1024 * 1024
LOG_BACKUPS = 3

FILE_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
CONSOLE_FORMAT = "reflog %(levelname)s: %(message)s"


def format_cli_error(error: Exception, show_traceback: bool = False) -> str:
    """
    One-line CLI message for an error, optionally followed by the traceback.

    Examples:
        >>> format_cli_error(DatabaseError("Connection failed"))
        '❌ DatabaseError: Connection failed'
    """
    message = f"❌ {type(error).__name__}: {error}"
    if show_traceback and sys.exc_info()[0] is not None:
        message += f"\n\n{traceback.format_exc()}"
    return message


class ReflogLogger:
    """
    Component logger backed by two rotating files.

    Attributes:
        log_dir: Directory holding the log files
        component_name: Component name, also the log file stem
        context: Fields merged into every structured record
        main_logger: Operations, debug and warnings (echoed to the console)
        error_logger: Errors only, shared ``errors.log``
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "reflog",
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.context = dict(context or {})
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._file_logger(
            "operations", self.log_dir / f"{component_name}.log", logging.DEBUG
        )
        self.error_logger = self._file_logger(
            "errors", self.log_dir / "errors.log", logging.ERROR
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        self.main_logger.addHandler(console)

    def _file_logger(self, channel: str, path: Path, level: int) -> logging.Logger:
        logger = logging.getLogger(f"reflog.{self.component_name}.{channel}")
        logger.setLevel(level)
        # A second logger for the same component replaces the first one's files
        for handler in logger.handlers:
            handler.close()
        logger.handlers = []

        handler = RotatingFileHandler(
            path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        return logger

    def _record(self, label: str, details: Optional[Dict[str, Any]]) -> str:
        payload = {**self.context, **(details or {})}
        if not payload:
            return label
        return f"{label} {json.dumps(payload, default=str, ensure_ascii=False)}"

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Record a completed operation and what it touched."""
        self.main_logger.info(self._record(f"[op] {operation}", details))

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.debug(self._record(message, details))

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.info(self._record(message, details))

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        self.main_logger.warning(self._record(message, details))

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        """
        Write an error with its context to ``errors.log``.

        The traceback is appended when called while the error is being
        handled.
        """
        self.error_logger.error(self._record(f"{type(error).__name__}: {error}", context))
        if sys.exc_info()[0] is not None:
            self.error_logger.error(traceback.format_exc().rstrip())

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        """Log a command failure and return the message to print."""
        self.log_error(error, context or {"source": "cli"})
        return format_cli_error(error, show_traceback)


class NullLogger:
    """No-op stand-in for ReflogLogger, returned by ``safe_logger(None)``."""

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_cli_error(
        self,
        error: Exception,
        context: Optional[Dict[str, Any]] = None,
        show_traceback: bool = False,
    ) -> str:
        return format_cli_error(error, show_traceback)


_null_logger = NullLogger()


def safe_logger(logger: Optional[ReflogLogger]) -> ReflogLogger:
    """Return ``logger``, or the shared NullLogger when it is None."""
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def handle_cli_error(
    ctx: "click.Context",
    error: Exception,
    operation: str,
    additional_context: Optional[Dict[str, Any]] = None,
    exit_code: int = 1,
) -> None:
    """
    Report a failed command and exit.

    The error and its context (command name plus e.g. memo id or file
    path) go to the CLI logger; the user sees one line on stderr, or the
    traceback too with ``--verbose``. Never returns.
    """
    obj = ctx.obj or {}
    context = {"operation": operation, **(additional_context or {})}

    message = safe_logger(obj.get("logger")).log_cli_error(
        error, context, show_traceback=obj.get("verbose", False)
    )
    click.echo(message, err=True)
    sys.exit(exit_code)
