#!/usr/bin/env python3
"""
paths.py
-------------------
Path constants and configuration for the Reflog project.

This module defines all project paths as Path objects for consistent path
handling across the codebase. Every path is relative to the project root
directory and can be overridden from the command line (--db-path, --log-dir).

The project structure:
    ROOT/
    ├── reflog/        # Package code
    ├── data/          # User data (database, exports)
    └── logs/          # Application logs

All paths are resolved at import time and validated to ensure the project
structure is intact.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import sys
from pathlib import Path


def _get_project_root() -> Path:
    """
    Determine project root directory.

    Assumes this file is at ROOT/reflog/core/paths.py and navigates up
    the directory tree to find ROOT.

    Returns:
        Path object for project root

    Raises:
        RuntimeError: If project root cannot be determined or validated
    """
    current_file = Path(__file__).resolve()

    # Navigate up: paths.py -> core/ -> reflog/ -> ROOT/
    root = current_file.parent.parent.parent

    if not (root / "reflog").is_dir():
        raise RuntimeError(
            f"Cannot determine valid project root. "
            f"Expected {root / 'reflog'} to exist. "
            f"Current file: {current_file}"
        )

    return root


# ----- Project directory -----
ROOT: Path = _get_project_root()
DATA_DIR = ROOT / "data"  # Personal data (private)

# ---- Package ----
PACKAGE_DIR = ROOT / "reflog"

# --- Database ---
DB_DIR = DATA_DIR / "metadata"
DB_PATH = DB_DIR / "reflog.db"

# ---- Exports ----
EXPORT_DIR = DATA_DIR / "exports"
STATS_PATH = EXPORT_DIR / "stats.md"

# ---- Logs ----
LOG_DIR = ROOT / "logs"


# ----- Path Validation -----
def _validate_critical_paths() -> None:
    """
    Validate that critical paths exist.

    Prints warnings for missing paths but doesn't fail - allows
    the module to be imported even if data directories aren't set up yet.
    """
    critical_paths = [
        (ROOT, "project root"),
        (PACKAGE_DIR, "package directory"),
    ]

    missing_paths = []
    for path, description in critical_paths:
        if not path.exists():
            missing_paths.append(f"{description} ({path})")

    if missing_paths:
        print(
            "Warning: Critical paths missing:\n  " + "\n  ".join(missing_paths),
            file=sys.stderr,
        )


# Validate paths on module import
_validate_critical_paths()
