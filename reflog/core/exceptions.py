#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the Reflog project.

Operations on the in-memory memo collection never fail: lookups that
miss are silent no-ops. The exceptions below cover the outer surfaces
where bad input or storage problems can actually occur.

Exception Hierarchy:
    Exception (built-in)
    ├── DatabaseError - Base for all database-related errors
    │   └── ExportError - Data export operation failures
    ├── ValidationError - Data validation failures
    │   ├── MemoValidationError - Invalid memo fields
    │   └── SettingsError - Invalid settings key or value
    └── MemoImportError - Malformed YAML import files

Usage:
    from reflog.core.exceptions import DatabaseError, ValidationError

    try:
        db.memos.create(...)
    except ValidationError as e:
        logger.log_warning(f"Invalid data: {e}")
    except DatabaseError as e:
        logger.log_error(e)
"""


class DatabaseError(Exception):
    """
    Base exception for database-related errors.

    Raised when database operations fail due to connection issues,
    query errors, integrity violations, or other database problems.
    SQLAlchemy errors are wrapped into this type by ``handle_db_errors``.

    Examples:
        >>> raise DatabaseError("Database initialization failed")
        >>> raise DatabaseError("Data integrity violation: duplicate memo id")

    See Also:
        ExportError
    """

    pass


class ExportError(DatabaseError):
    """
    Exception for data export operation failures.

    Raised when writing the memo collection or the statistics dashboard
    to disk fails (permissions, missing directories, serialization).

    Examples:
        >>> raise ExportError("Cannot write export file: permission denied")
    """

    pass


class ValidationError(Exception):
    """
    Exception for data validation failures.

    Raised when input data fails validation checks:
    - Missing required fields
    - Type mismatches
    - Out-of-range values

    Examples:
        >>> raise ValidationError("Required field 'title' missing or empty")
        >>> raise ValidationError("Cannot convert 'maybe' to boolean")
    """

    pass


class MemoValidationError(ValidationError):
    """
    Exception for memo-specific validation failures.

    Examples:
        >>> raise MemoValidationError("Memo title cannot be empty")
        >>> raise MemoValidationError("Invalid memo id: 'abc'")
    """

    pass


class SettingsError(ValidationError):
    """
    Exception for invalid settings keys or values.

    Examples:
        >>> raise SettingsError("Font size must be between 15 and 30, got 40")
        >>> raise SettingsError("Unknown setting: 'theme'")
    """

    pass


class MemoImportError(Exception):
    """
    Exception for YAML import failures.

    Raised when an exported memo file cannot be read back:
    - YAML syntax errors
    - Missing top-level keys
    - Memo records with missing or malformed fields

    Examples:
        >>> raise MemoImportError("Cannot parse YAML: invalid syntax")
        >>> raise MemoImportError("Memo #3 is missing field 'day'")
    """

    pass
