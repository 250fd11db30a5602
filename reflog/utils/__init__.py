"""
Utilities package for Reflog.

- fs: Filesystem helpers for exports
- sample_data: Random demo memos

Import specific modules:
    from reflog.utils import fs, sample_data
"""
from .fs import get_file_hash, write_if_changed
from .sample_data import compose_demo, generate_random_in_years

__all__ = [
    "get_file_hash",
    "write_if_changed",
    "compose_demo",
    "generate_random_in_years",
]
