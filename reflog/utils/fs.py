#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for exports.

Functions:
    write_if_changed: Write text only when it differs from the file on disk
    get_file_hash: Compute MD5 hash for change detection

Usage:
    from reflog.utils.fs import write_if_changed

    status = write_if_changed(Path("exports/stats.md"), content)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import hashlib
from pathlib import Path


def write_if_changed(path: Path, content: str, force: bool = False) -> str:
    """
    Write content to file only if it differs from existing content.

    Args:
        path: Target file path
        content: Content to write
        force: Rewrite even when the content is identical

    Returns:
        Status string: "created", "updated", or "skipped"
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.exists():
        existing = path.read_text(encoding="utf-8")
        if existing == content and not force:
            return "skipped"
        path.write_text(content, encoding="utf-8")
        return "updated"
    else:
        path.write_text(content, encoding="utf-8")
        return "created"


def get_file_hash(file_path: str | Path) -> str:
    """
    Compute MD5 hash of a file for change detection.

    Note: MD5 is used for change detection only, not cryptographic security.

    Raises:
        FileNotFoundError: If file does not exist or is not a regular file.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found or not a regular file: {path}")

    return hashlib.md5(path.read_bytes()).hexdigest()
