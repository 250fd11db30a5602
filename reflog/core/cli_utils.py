#!/usr/bin/env python3
"""
cli_utils.py
-------------------
Shared CLI utilities for Reflog commands.

Functions:
    setup_logger: Initialize ReflogLogger for CLI operations

Usage:
    from reflog.core.cli_utils import setup_logger

    logger = setup_logger(log_dir, "cli")
"""
from pathlib import Path
from reflog.core.logging_manager import ReflogLogger


def setup_logger(log_dir: Path, component_name: str) -> ReflogLogger:
    """
    Setup logging for CLI operations.

    Creates the operations log directory if it doesn't exist and initializes
    a ReflogLogger instance for the specified component.

    Args:
        log_dir: Base log directory (typically from paths.LOG_DIR)
        component_name: Component identifier for logging (e.g., 'cli', 'stats')

    Returns:
        Configured ReflogLogger instance

    Examples:
        >>> from reflog.core.paths import LOG_DIR
        >>> logger = setup_logger(LOG_DIR, "cli")
        >>> logger.log_info("Starting export...")
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return ReflogLogger(operations_log_dir, component_name=component_name)
