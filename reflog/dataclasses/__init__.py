"""
Memo data structures.

Modules:
    - memo: The Memo record plus sorting, search and display helpers
    - memo_collection: Canonical in-memory collection with change broadcast
    - memo_draft: Create/edit form state and save rules
"""
from .memo import Memo, sort_memos, filter_memos, memos_on
from .memo_collection import MemoCollection
from .memo_draft import MemoDraft

__all__ = [
    "Memo",
    "MemoCollection",
    "MemoDraft",
    "filter_memos",
    "memos_on",
    "sort_memos",
]
