#!/usr/bin/env python3
"""
memo_yaml.py
-------------------
YAML export and import of the memo collection and the tag registry.

File layout:
    exported_at: '2025-01-31T15:00:00'
    tags:
      - reading
      - work
    memos:
      - id: 6f1c...
        day: '2025-01-31T09:30:00'
        title: Weekly review
        tags: [work]
        content: ...

Imported memos are validated record by record; any malformed record
aborts the whole import with MemoImportError.

Usage:
    path = export_memos(memos, tags, EXPORT_DIR / "memos.yaml")
    memos, tags = import_memos(path)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from reflog.core.exceptions import ExportError, MemoImportError, ValidationError
from reflog.core.logging_manager import ReflogLogger, safe_logger
from reflog.core.validators import DataValidator
from reflog.dataclasses.memo import Memo, sort_memos
from reflog.utils.fs import get_file_hash


def dump_memos(
    memos: Sequence[Memo],
    tags: Sequence[str],
    exported_at: Optional[datetime] = None,
) -> str:
    """Serialize memos (newest first) and registry tags to YAML text."""
    data: Dict[str, Any] = {
        "exported_at": (exported_at or datetime.now()).isoformat(timespec="seconds"),
        "tags": sorted(set(tags)),
        "memos": [m.to_dict() for m in sort_memos(memos)],
    }
    return yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)


def export_memos(
    memos: Sequence[Memo],
    tags: Sequence[str],
    path: Path,
    logger: Optional[ReflogLogger] = None,
) -> Path:
    """
    Write the YAML export file.

    Returns:
        Path of the written file

    Raises:
        ExportError: If the file cannot be written
    """
    content = dump_memos(memos, tags)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        safe_logger(logger).log_error(e, {"operation": "export_memos", "path": str(path)})
        raise ExportError(f"Cannot write export file {path}: {e}")

    safe_logger(logger).log_operation(
        "memos_exported",
        {
            "path": str(path),
            "memos": len(memos),
            "tags": len(tags),
            "md5": get_file_hash(path),
        },
    )
    return path


def load_memos(text: str) -> Tuple[List[Memo], List[str]]:
    """
    Parse YAML export text.

    Returns:
        (memos sorted newest first, registry tags)

    Raises:
        MemoImportError: On YAML syntax errors, a bad layout or a
            malformed memo record
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MemoImportError(f"Cannot parse YAML: {e}")

    if data is None:
        return [], []
    if not isinstance(data, dict):
        raise MemoImportError("Export file must be a mapping with 'memos' and 'tags'")

    raw_memos = data.get("memos") or []
    raw_tags = data.get("tags") or []
    if not isinstance(raw_memos, list):
        raise MemoImportError("'memos' must be a list")
    if not isinstance(raw_tags, list):
        raise MemoImportError("'tags' must be a list")

    memos: List[Memo] = []
    seen = set()
    for index, record in enumerate(raw_memos, start=1):
        try:
            memo = Memo.from_dict(record)
        except ValidationError as e:
            raise MemoImportError(f"Memo #{index}: {e}")

        if DataValidator.is_blank(memo.title):
            raise MemoImportError(f"Memo #{index} is missing field 'title'")
        if memo.id in seen:
            raise MemoImportError(f"Memo #{index} repeats id {memo.id}")

        seen.add(memo.id)
        memos.append(memo)

    return sort_memos(memos), DataValidator.normalize_tags(raw_tags)


def import_memos(
    path: Path, logger: Optional[ReflogLogger] = None
) -> Tuple[List[Memo], List[str]]:
    """
    Read a YAML export file.

    Raises:
        MemoImportError: If the file is missing or malformed
    """
    if not path.is_file():
        raise MemoImportError(f"Import file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        raise MemoImportError(f"Cannot read {path}: {e}")

    memos, tags = load_memos(text)
    safe_logger(logger).log_operation(
        "memos_imported", {"path": str(path), "memos": len(memos), "tags": len(tags)}
    )
    return memos, tags
