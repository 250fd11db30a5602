"""
Reflog
======

A personal journaling toolkit for short dated memos.

Memos are small journal entries with a title, free text and a list of
free-form tags. Reflog keeps them in a local SQLite database together
with a registry of known tags and a handful of user preferences, and
renders statistics about them: a month calendar, a yearly heatmap,
activity charts and keyword (tag) frequency breakdowns.

Main Components:
    - core: Logging, exceptions, validation, paths, change broadcast
    - dataclasses: Memo record, in-memory collection, editor state
    - database: SQLAlchemy ORM with memo, tag and settings managers
    - stats: Aggregations, calendar/heatmap layout, chart geometry
    - builders: Text charts and the statistics dashboard
    - pipeline: YAML export/import
    - cli: The ``reflog`` command-line interface

Example Usage:
    >>> from reflog import ReflogDB
    >>> from reflog.core.paths import DB_PATH, LOG_DIR
    >>> db = ReflogDB(db_path=DB_PATH, log_dir=LOG_DIR)
    >>> with db.session_scope():
    ...     memos = db.memos.get_all()
"""

__version__ = "1.0.0"
__author__ = "Reflog Project"

from reflog.database.manager import ReflogDB
from reflog.core.paths import DATA_DIR, DB_PATH, EXPORT_DIR, LOG_DIR

__all__ = [
    "ReflogDB",
    "DATA_DIR",
    "DB_PATH",
    "EXPORT_DIR",
    "LOG_DIR",
]
