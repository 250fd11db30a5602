#!/usr/bin/env python3
"""
settings_manager.py
--------------------
User preferences stored in the key-value settings table.

Keys and defaults:
    - fontSize          float, 20.0 (15-30, step 1)
    - userName          str, ""
    - isDarkMode        bool, False
    - profileImageData  bytes stored base64, None

Absent keys fall back to their defaults; there is no schema versioning.
Out-of-range or malformed values raise SettingsError.

Usage:
    settings = SettingsManager(session, logger)

    settings.set_font_size(24)
    settings.set_user_name("  Alex ")   # stored as "Alex"
    settings.reset()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import base64
import binascii
from typing import Any, Dict, Optional

# --- Local imports ---
from reflog.core.exceptions import SettingsError, ValidationError
from reflog.core.validators import DataValidator
from reflog.database.decorators import handle_db_errors, log_database_operation
from .base_manager import BaseManager

FONT_SIZE_KEY = "fontSize"
USER_NAME_KEY = "userName"
DARK_MODE_KEY = "isDarkMode"
PROFILE_IMAGE_KEY = "profileImageData"

FONT_SIZE_MIN = 15.0
FONT_SIZE_MAX = 30.0
FONT_SIZE_STEP = 1.0

DEFAULTS: Dict[str, Any] = {
    FONT_SIZE_KEY: 20.0,
    USER_NAME_KEY: "",
    DARK_MODE_KEY: False,
    PROFILE_IMAGE_KEY: None,
}


class SettingsManager(BaseManager):
    """Typed accessors over the preference keys."""

    # -------------------------------------------------------------------------
    # Font size
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_font_size(self) -> float:
        value = self._read_value(FONT_SIZE_KEY, DEFAULTS[FONT_SIZE_KEY])
        try:
            return float(value)
        except (TypeError, ValueError):
            return DEFAULTS[FONT_SIZE_KEY]

    @handle_db_errors
    @log_database_operation("set_font_size")
    def set_font_size(self, size: Any) -> float:
        """
        Store the memo body font size.

        Values are snapped to the nearest whole step.

        Args:
            size: Number (or numeric string) between 15 and 30

        Returns:
            The stored size

        Raises:
            SettingsError: If the value is not numeric or out of range
        """
        try:
            value = DataValidator.normalize_float(size)
        except ValidationError as e:
            raise SettingsError(str(e))
        if value is None:
            raise SettingsError("Font size is required")

        value = round(value / FONT_SIZE_STEP) * FONT_SIZE_STEP
        if not FONT_SIZE_MIN <= value <= FONT_SIZE_MAX:
            raise SettingsError(
                f"Font size must be between {FONT_SIZE_MIN:g} and "
                f"{FONT_SIZE_MAX:g}, got {size}"
            )

        self._write_value(FONT_SIZE_KEY, value)
        return value

    # -------------------------------------------------------------------------
    # User name
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_user_name(self) -> str:
        return str(self._read_value(USER_NAME_KEY, DEFAULTS[USER_NAME_KEY]))

    @handle_db_errors
    @log_database_operation("set_user_name")
    def set_user_name(self, name: Optional[str]) -> str:
        """Store the display name; None and blanks clear it."""
        value = DataValidator.normalize_string(name) or ""
        self._write_value(USER_NAME_KEY, value)
        return value

    # -------------------------------------------------------------------------
    # Appearance
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_dark_mode(self) -> bool:
        return bool(self._read_value(DARK_MODE_KEY, DEFAULTS[DARK_MODE_KEY]))

    @handle_db_errors
    @log_database_operation("set_dark_mode")
    def set_dark_mode(self, enabled: Any) -> bool:
        try:
            value = DataValidator.normalize_bool(enabled)
        except ValidationError as e:
            raise SettingsError(str(e))
        if value is None:
            raise SettingsError("Dark mode flag is required")

        self._write_value(DARK_MODE_KEY, value)
        return value

    # -------------------------------------------------------------------------
    # Profile image
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_profile_image(self) -> Optional[bytes]:
        """
        Decoded profile image bytes, or None when unset.

        Raises:
            SettingsError: If the stored value is not valid base64
        """
        encoded = self._read_value(PROFILE_IMAGE_KEY, None)
        if not encoded:
            return None
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, TypeError, ValueError):
            raise SettingsError("Stored profile image is not valid base64")

    @handle_db_errors
    @log_database_operation("set_profile_image")
    def set_profile_image(self, data: Optional[bytes]) -> None:
        """Store raw image bytes as base64; None or empty bytes clear it."""
        if data is not None and not isinstance(data, (bytes, bytearray)):
            raise SettingsError(
                f"Profile image must be bytes, got {type(data).__name__}"
            )
        encoded = base64.b64encode(bytes(data)).decode("ascii") if data else None
        self._write_value(PROFILE_IMAGE_KEY, encoded)

    # -------------------------------------------------------------------------
    # Bulk operations
    # -------------------------------------------------------------------------

    @handle_db_errors
    def get_all(self) -> Dict[str, Any]:
        """
        Snapshot of every preference.

        Returns:
            Dictionary keyed by storage key; the profile image is reported
            as its byte length (or None)
        """
        image = self.get_profile_image()
        return {
            FONT_SIZE_KEY: self.get_font_size(),
            USER_NAME_KEY: self.get_user_name(),
            DARK_MODE_KEY: self.get_dark_mode(),
            PROFILE_IMAGE_KEY: len(image) if image else None,
        }

    @handle_db_errors
    @log_database_operation("reset_settings")
    def reset(self) -> int:
        """
        Restore every preference to its default by dropping the stored keys.

        The tag registry is kept.

        Returns:
            Number of preference keys that were stored
        """
        removed = sum(self._delete_value(key) for key in DEFAULTS)

        if self.logger:
            self.logger.log_info("Settings reset to defaults", {"removed": removed})
        return removed
