"""
test_validators.py
------------------
Unit tests for DataValidator normalization helpers.
"""
import pytest
from datetime import date, datetime, timedelta, timezone

from reflog.core.exceptions import ValidationError
from reflog.core.validators import DataValidator


class TestRequiredFields:
    def test_passes_when_present(self):
        DataValidator.validate_required_fields({"title": "x"}, ["title"])

    @pytest.mark.parametrize("data", [{}, {"title": None}, {"title": ""}])
    def test_raises_when_missing_or_empty(self, data):
        with pytest.raises(ValidationError, match="title"):
            DataValidator.validate_required_fields(data, ["title"])


class TestStrings:
    def test_normalize_string_strips(self):
        assert DataValidator.normalize_string("  Work  ") == "Work"

    def test_normalize_string_keeps_case(self):
        assert DataValidator.normalize_string("SwiftUI") == "SwiftUI"

    def test_normalize_string_blank_is_none(self):
        assert DataValidator.normalize_string("   ") is None
        assert DataValidator.normalize_string(None) is None

    @pytest.mark.parametrize("value,expected", [(None, True), ("", True), ("  ", True), ("a", False)])
    def test_is_blank(self, value, expected):
        assert DataValidator.is_blank(value) is expected


class TestTags:
    def test_normalize_tags_drops_blanks_and_duplicates(self):
        assert DataValidator.normalize_tags([" work", "", "work", "reading "]) == [
            "work",
            "reading",
        ]

    def test_normalize_tags_is_case_sensitive(self):
        assert DataValidator.normalize_tags(["Work", "work"]) == ["Work", "work"]

    def test_normalize_tags_splits_comma_string(self):
        assert DataValidator.normalize_tags("work, reading,") == ["work", "reading"]

    def test_normalize_tags_none(self):
        assert DataValidator.normalize_tags(None) == []


class TestDatetimes:
    def test_datetime_passthrough(self):
        value = datetime(2025, 1, 31, 15, 0)
        assert DataValidator.normalize_datetime(value) is value

    def test_date_becomes_midnight(self):
        assert DataValidator.normalize_datetime(date(2025, 1, 31)) == datetime(2025, 1, 31)

    def test_iso_string(self):
        assert DataValidator.normalize_datetime("2025-01-31T09:30") == datetime(
            2025, 1, 31, 9, 30
        )

    @pytest.mark.parametrize(
        "value",
        [
            "2025-01-01T09:00+09:00",
            datetime(2025, 1, 1, 9, 0, tzinfo=timezone(timedelta(hours=9))),
        ],
    )
    def test_offset_converted_to_naive_local(self, value):
        expected = (
            datetime(2025, 1, 1, 0, 0, tzinfo=timezone.utc)
            .astimezone()
            .replace(tzinfo=None)
        )
        result = DataValidator.normalize_datetime(value)

        assert result.tzinfo is None
        assert result == expected

    def test_offset_and_naive_values_sort_together(self):
        days = [
            DataValidator.normalize_datetime("2025-01-01T09:00+09:00"),
            DataValidator.normalize_datetime("2025-03-01T09:00"),
        ]
        assert sorted(days)[-1] == datetime(2025, 3, 1, 9, 0)

    def test_bad_string_raises(self):
        with pytest.raises(ValidationError, match="Invalid date format"):
            DataValidator.normalize_datetime("31/01/2025")

    def test_unsupported_type_raises(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_datetime(42)


class TestScalars:
    @pytest.mark.parametrize("value", ["on", "yes", "TRUE", 1, True])
    def test_truthy_values(self, value):
        assert DataValidator.normalize_bool(value) is True

    @pytest.mark.parametrize("value", ["off", "no", "false", 0, False])
    def test_falsy_values(self, value):
        assert DataValidator.normalize_bool(value) is False

    def test_bad_bool_raises(self):
        with pytest.raises(ValidationError):
            DataValidator.normalize_bool("maybe")

    def test_normalize_float(self):
        assert DataValidator.normalize_float("24") == 24.0
        assert DataValidator.normalize_float(None) is None

    def test_bad_float_raises(self):
        with pytest.raises(ValidationError, match="number"):
            DataValidator.normalize_float("big")
