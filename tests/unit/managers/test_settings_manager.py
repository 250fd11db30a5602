"""
test_settings_manager.py
------------------------
Unit tests for SettingsManager preferences.
"""
import pytest

from reflog.core.exceptions import SettingsError
from reflog.database.managers.settings_manager import (
    DARK_MODE_KEY,
    FONT_SIZE_KEY,
    PROFILE_IMAGE_KEY,
    USER_NAME_KEY,
)
from reflog.database.models import Setting

PNG_HEADER = b"\x89PNG\r\n\x1a\n"


class TestDefaults:
    def test_absent_keys_use_defaults(self, settings_manager):
        assert settings_manager.get_font_size() == 20.0
        assert settings_manager.get_user_name() == ""
        assert settings_manager.get_dark_mode() is False
        assert settings_manager.get_profile_image() is None

    def test_get_all(self, settings_manager):
        assert settings_manager.get_all() == {
            FONT_SIZE_KEY: 20.0,
            USER_NAME_KEY: "",
            DARK_MODE_KEY: False,
            PROFILE_IMAGE_KEY: None,
        }


class TestFontSize:
    @pytest.mark.parametrize("value,expected", [(15, 15.0), ("24", 24.0), (30, 30.0), (22.4, 22.0)])
    def test_valid_sizes(self, settings_manager, value, expected):
        assert settings_manager.set_font_size(value) == expected
        assert settings_manager.get_font_size() == expected

    @pytest.mark.parametrize("value", [14, 31, "huge", None])
    def test_invalid_sizes(self, settings_manager, value):
        with pytest.raises(SettingsError):
            settings_manager.set_font_size(value)
        assert settings_manager.get_font_size() == 20.0

    def test_garbage_stored_value_falls_back(self, settings_manager, db_session):
        db_session.add(Setting(key=FONT_SIZE_KEY, value="big"))
        db_session.flush()
        assert settings_manager.get_font_size() == 20.0


class TestUserName:
    def test_name_is_trimmed(self, settings_manager):
        assert settings_manager.set_user_name("  Alex  ") == "Alex"
        assert settings_manager.get_user_name() == "Alex"

    def test_blank_clears(self, settings_manager):
        settings_manager.set_user_name("Alex")
        assert settings_manager.set_user_name("   ") == ""
        assert settings_manager.set_user_name(None) == ""


class TestDarkMode:
    @pytest.mark.parametrize("value,expected", [("on", True), ("off", False), (True, True)])
    def test_toggle(self, settings_manager, value, expected):
        assert settings_manager.set_dark_mode(value) is expected
        assert settings_manager.get_dark_mode() is expected

    def test_invalid_flag(self, settings_manager):
        with pytest.raises(SettingsError):
            settings_manager.set_dark_mode("sometimes")


class TestProfileImage:
    def test_bytes_round_trip_through_base64(self, settings_manager, db_session):
        settings_manager.set_profile_image(PNG_HEADER)

        assert settings_manager.get_profile_image() == PNG_HEADER
        assert db_session.get(Setting, PROFILE_IMAGE_KEY).value == "iVBORw0KGgo="
        assert settings_manager.get_all()[PROFILE_IMAGE_KEY] == len(PNG_HEADER)

    def test_clear(self, settings_manager):
        settings_manager.set_profile_image(PNG_HEADER)
        settings_manager.set_profile_image(None)
        assert settings_manager.get_profile_image() is None

    def test_non_bytes_rejected(self, settings_manager):
        with pytest.raises(SettingsError, match="bytes"):
            settings_manager.set_profile_image("image.png")

    def test_corrupt_stored_value(self, settings_manager, db_session):
        db_session.add(Setting(key=PROFILE_IMAGE_KEY, value="%%%not-base64"))
        db_session.flush()
        with pytest.raises(SettingsError, match="base64"):
            settings_manager.get_profile_image()


class TestReset:
    def test_reset_restores_defaults_and_keeps_tags(self, settings_manager, tag_manager):
        settings_manager.set_font_size(28)
        settings_manager.set_user_name("Alex")
        settings_manager.set_dark_mode(True)
        tag_manager.add("work")

        settings_manager.reset()

        assert settings_manager.get_font_size() == 20.0
        assert settings_manager.get_user_name() == ""
        assert settings_manager.get_dark_mode() is False
        assert tag_manager.get_all() == ["work"]

    def test_reset_drops_stored_keys(self, settings_manager, db_session):
        settings_manager.set_font_size(28)
        settings_manager.set_user_name("Alex")

        assert settings_manager.reset() == 2
        assert db_session.get(Setting, FONT_SIZE_KEY) is None
        assert db_session.get(Setting, USER_NAME_KEY) is None

    def test_reset_when_nothing_stored(self, settings_manager):
        assert settings_manager.reset() == 0
