"""
Core infrastructure shared by every Reflog component.

Modules:
    - paths: Project path constants
    - exceptions: Exception hierarchy
    - logging_manager: ReflogLogger, NullLogger, CLI error handling
    - validators: DataValidator normalization helpers
    - events: Synchronous publish/subscribe for change propagation
    - cli_utils: Logger setup for CLI commands
"""
