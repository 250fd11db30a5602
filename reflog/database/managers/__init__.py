#!/usr/bin/env python3
"""
managers package
--------------------
Entity managers for the Reflog database.

Each manager handles one concern over the shared session and inherits
from BaseManager.

Available Managers:
    BaseManager: Abstract base class with retry and key-value helpers
    MemoManager: Persisted memos (CRUD plus collection sync)
    TagManager: Tag registry stored under 'allSavedTags'
    SettingsManager: User preferences (font size, name, dark mode, image)

Usage:
    from reflog.database.managers import TagManager

    tag_mgr = TagManager(session, logger)
"""
from .base_manager import BaseManager
from .memo_manager import MemoManager
from .tag_manager import TagManager, TAGS_KEY
from .settings_manager import SettingsManager

__all__ = [
    "BaseManager",
    "MemoManager",
    "TagManager",
    "TAGS_KEY",
    "SettingsManager",
]
