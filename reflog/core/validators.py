#!/usr/bin/env python3
"""
validators.py
--------------------
Data validation and normalization utilities for Reflog operations.

Provides type-safe conversion, validation, and normalization functions
used by the database managers, the editor and the YAML importer.
Normalization trims whitespace but never changes case: tags are
case-sensitive.
"""
from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Dict, Iterable, List, Optional

from .exceptions import ValidationError


class DataValidator:
    """Centralized data validation for memo, tag and settings input."""

    @staticmethod
    def validate_required_fields(
        data: Dict[str, Any], required_fields: List[str]
    ) -> None:
        """
        Validate that required fields are present and non-empty.

        Args:
            data: Data dictionary to validate
            required_fields: List of required field names

        Raises:
            ValidationError: If validation fails
        """
        for field in required_fields:
            if field not in data or data[field] is None or data[field] == "":
                raise ValidationError(f"Required field '{field}' missing or empty")

    @staticmethod
    def normalize_string(value: Any) -> Optional[str]:
        """
        Strip surrounding whitespace.

        Args:
            value: Value to normalize

        Returns:
            Stripped string, or None for None and whitespace-only input
        """
        if value is None:
            return None
        text = str(value).strip()
        return text or None

    @staticmethod
    def is_blank(value: Optional[str]) -> bool:
        """True for None, empty and whitespace-only strings."""
        return value is None or not str(value).strip()

    @staticmethod
    def normalize_tags(tags: Optional[Iterable[Any]]) -> List[str]:
        """
        Clean a tag list for storage.

        Strips each tag, drops blanks and removes duplicates while keeping
        the first occurrence order.

        Args:
            tags: Iterable of raw tag values (or None)

        Returns:
            List of unique, non-empty tags
        """
        if not tags:
            return []
        if isinstance(tags, str):
            tags = tags.split(",")

        cleaned: List[str] = []
        for tag in tags:
            normalized = DataValidator.normalize_string(tag)
            if normalized and normalized not in cleaned:
                cleaned.append(normalized)
        return cleaned

    @staticmethod
    def normalize_datetime(value: Any) -> Optional[datetime]:
        """
        Normalize various date inputs to a naive local datetime.

        Accepts datetime objects, date objects (midnight) and ISO-8601
        strings ("2025-01-01", "2025-01-01T09:30", "2025-01-01 09:30").

        Args:
            value: Date value to normalize

        Returns:
            datetime or None

        Raises:
            ValidationError: If a string cannot be parsed
        """
        if value is None:
            return None
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.strip())
            except ValueError:
                raise ValidationError(f"Invalid date format: '{value}'")
        if isinstance(value, datetime):
            # Offsets are converted to local time; memo days are always naive
            if value.tzinfo is not None:
                return value.astimezone().replace(tzinfo=None)
            return value
        if isinstance(value, date):
            return datetime.combine(value, time.min)
        raise ValidationError(f"Cannot convert {type(value).__name__} to datetime")

    @staticmethod
    def normalize_bool(value: Any) -> Optional[bool]:
        """
        Convert various inputs to boolean.

        Args:
            value: Value to convert

        Returns:
            Boolean value or None

        Raises:
            ValidationError: If conversion fails
        """
        if isinstance(value, bool):
            return value
        elif isinstance(value, (int, float)):
            if value == 0:
                return False
            elif value == 1:
                return True
            else:
                raise ValidationError(f"Cannot convert numeric '{value}' to boolean")
        elif isinstance(value, str):
            if value.lower() in ("true", "1", "yes", "on"):
                return True
            elif value.lower() in ("false", "0", "no", "off"):
                return False
            else:
                raise ValidationError(f"Cannot convert '{value}' to boolean")
        elif value is not None:
            return bool(value)
        return None

    @staticmethod
    def normalize_float(value: Any) -> Optional[float]:
        """
        Convert value to float.

        Args:
            value: Value to convert

        Returns:
            Float value or None

        Raises:
            ValidationError: If the value is not numeric
        """
        if value is None:
            return None
        try:
            return float(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Cannot convert '{value}' to number")
