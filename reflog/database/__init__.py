#!/usr/bin/env python3
"""
Reflog Database Package
-----------------------
SQLite persistence for memos, the tag registry and user settings.

Modules:
- manager: ReflogDB engine, schema and session scopes
- models: ORM models (MemoRecord, Setting)
- managers: Entity managers bound per session
- decorators: Operation logging and SQLAlchemy error translation
"""

from .manager import ReflogDB
from reflog.core.exceptions import (
    DatabaseError,
    ValidationError,
    ExportError,
)
from .decorators import (
    log_database_operation,
    handle_db_errors,
)

__all__ = [
    # Main manager
    "ReflogDB",
    # Exceptions
    "DatabaseError",
    "ValidationError",
    "ExportError",
    # Decorators
    "log_database_operation",
    "handle_db_errors",
]
