"""
test_memo.py
------------
Unit tests for the Memo dataclass and the list helpers.
"""
import uuid
import pytest
from datetime import date, datetime

from reflog.core.exceptions import MemoValidationError
from reflog.dataclasses.memo import Memo, filter_memos, memos_on, sort_memos


class TestMemoProperties:
    def test_visible_tags_hide_placeholders(self):
        memo = Memo(day=datetime(2025, 1, 1), tags=["work", "", "reading"])
        assert memo.visible_tags == ["work", "reading"]
        assert memo.tags == ["work", "", "reading"]

    def test_day_key_is_calendar_day(self):
        memo = Memo(day=datetime(2025, 1, 31, 23, 59))
        assert memo.day_key == date(2025, 1, 31)

    def test_list_date_format(self):
        memo = Memo(day=datetime(2025, 1, 5, 15, 15))
        assert memo.list_date == "2025. 01. 05"

    def test_detail_date_format(self):
        memo = Memo(day=datetime(2025, 1, 5, 15, 15))
        assert memo.detail_date.startswith("2025/01/05 ")
        assert memo.detail_date.endswith("03:15")

    def test_ids_are_unique(self):
        day = datetime(2025, 1, 1)
        assert Memo(day=day).id != Memo(day=day).id


class TestMemoMatches:
    @pytest.fixture
    def memo(self):
        return Memo(
            day=datetime(2025, 1, 1),
            title="Weekly Review",
            tags=["Work"],
            content="Shipped the release",
        )

    @pytest.mark.parametrize("keyword", ["weekly", "REVIEW", "release", "work"])
    def test_matches_title_content_and_tags(self, memo, keyword):
        assert memo.matches(keyword)

    def test_empty_keyword_matches_everything(self, memo):
        assert memo.matches("")
        assert memo.matches(None)

    def test_non_matching_keyword(self, memo):
        assert not memo.matches("groceries")


class TestMemoSerialization:
    def test_to_dict(self):
        memo_id = uuid.UUID(int=7)
        memo = Memo(
            id=memo_id,
            day=datetime(2025, 1, 31, 9, 30, 12, 999),
            title="Run",
            tags=["exercise"],
            content="5km",
        )
        assert memo.to_dict() == {
            "id": str(memo_id),
            "day": "2025-01-31T09:30:12",
            "title": "Run",
            "tags": ["exercise"],
            "content": "5km",
        }

    def test_from_dict_restores_fields(self):
        memo = Memo.from_dict(
            {
                "id": str(uuid.UUID(int=7)),
                "day": "2025-01-31T09:30:00",
                "title": "Run",
                "tags": ["exercise", ""],
                "content": "5km",
            }
        )
        assert memo.id == uuid.UUID(int=7)
        assert memo.day == datetime(2025, 1, 31, 9, 30)
        assert memo.tags == ["exercise", ""]

    def test_from_dict_generates_missing_id(self):
        memo = Memo.from_dict({"day": "2025-01-31"})
        assert isinstance(memo.id, uuid.UUID)
        assert memo.title == ""

    def test_from_dict_requires_day(self):
        with pytest.raises(MemoValidationError, match="day"):
            Memo.from_dict({"title": "No date"})

    def test_from_dict_rejects_bad_id(self):
        with pytest.raises(MemoValidationError, match="Invalid memo id"):
            Memo.from_dict({"day": "2025-01-31", "id": "not-a-uuid"})

    def test_from_dict_rejects_non_list_tags(self):
        with pytest.raises(MemoValidationError, match="tags"):
            Memo.from_dict({"day": "2025-01-31", "tags": "work"})

    def test_from_dict_rejects_non_mapping(self):
        with pytest.raises(MemoValidationError):
            Memo.from_dict(["2025-01-31"])


class TestListHelpers:
    def test_sort_newest_first(self, sample_memos):
        days = [m.day for m in sort_memos(sample_memos)]
        assert days == sorted(days, reverse=True)

    def test_sort_ties_broken_by_id(self, memo_factory):
        day = datetime(2025, 1, 1, 9, 0)
        b = memo_factory(day, "b", memo_id=2)
        a = memo_factory(day, "a", memo_id=1)
        assert sort_memos([b, a]) == [a, b]

    def test_filter_by_keyword(self, sample_memos):
        titles = [m.title for m in filter_memos(sample_memos, "reading")]
        assert titles == ["Evening read", "Book club"]

    def test_filter_blank_keyword_returns_all_sorted(self, sample_memos):
        assert filter_memos(sample_memos, "") == sort_memos(sample_memos)

    def test_memos_on_day(self, sample_memos):
        titles = [m.title for m in memos_on(sample_memos, date(2025, 3, 10))]
        assert titles == ["Evening read", "Standup notes"]

    def test_memos_on_empty_day(self, sample_memos):
        assert memos_on(sample_memos, date(2024, 12, 25)) == []
