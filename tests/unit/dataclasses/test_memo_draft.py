"""
test_memo_draft.py
------------------
Unit tests for editor state: tag entry, save gating and save behaviour.
"""
import pytest
from datetime import datetime
from unittest.mock import MagicMock

from reflog.core.events import EventBus, MEMOS_DID_CHANGE
from reflog.dataclasses.memo_collection import MemoCollection
from reflog.dataclasses.memo_draft import MemoDraft

NOW = datetime(2025, 3, 15, 10, 0)


@pytest.fixture
def registry():
    registry = MagicMock()
    registry.suggestions.return_value = ["reading"]
    return registry


class TestTagEntry:
    def test_add_tag_strips_commas_and_whitespace(self):
        draft = MemoDraft.new()
        assert draft.add_tag(" work, ") == "work"
        assert draft.tags == ["work"]

    @pytest.mark.parametrize("raw", ["", "   ", ",", " , "])
    def test_blank_tag_ignored(self, raw):
        draft = MemoDraft.new()
        assert draft.add_tag(raw) is None
        assert draft.tags == []

    def test_duplicate_tag_ignored(self):
        draft = MemoDraft.new()
        draft.add_tag("work")
        assert draft.add_tag("work") is None
        assert draft.tags == ["work"]

    def test_add_tag_registers_with_registry(self, registry):
        draft = MemoDraft.new()
        draft.add_tag("work", registry)
        registry.add.assert_called_once_with("work")

    def test_remove_tag(self):
        draft = MemoDraft(tags=["work", "reading"])
        assert draft.remove_tag("work") is True
        assert draft.remove_tag("work") is False
        assert draft.tags == ["reading"]

    def test_suggestions_exclude_draft_tags(self, registry):
        draft = MemoDraft(tags=["work"])
        assert draft.suggestions(registry, "re") == ["reading"]
        registry.suggestions.assert_called_once_with("re", exclude=["work"])


class TestSaveGating:
    def test_new_draft_cannot_save(self):
        assert not MemoDraft.new().can_save

    def test_title_alone_is_not_enough(self):
        draft = MemoDraft(title="Only a title")
        assert draft.is_changed
        assert not draft.can_save

    def test_whitespace_content_is_not_enough(self):
        assert not MemoDraft(title="t", content="   ").can_save

    def test_content_enables_save(self):
        assert MemoDraft(content="Body").can_save

    def test_tag_enables_save(self):
        assert MemoDraft(tags=["work"]).can_save

    def test_unchanged_edit_cannot_save(self, sample_memos):
        draft = MemoDraft.from_memo(sample_memos[0])
        assert not draft.is_changed
        assert not draft.can_save

    def test_from_memo_drops_placeholders(self, sample_memos):
        draft = MemoDraft.from_memo(sample_memos[1])
        assert draft.tags == ["reading"]
        assert draft.is_edit_mode


class TestSave:
    def test_new_memo_inserted_and_broadcast(self, registry):
        bus = EventBus()
        received = []
        bus.subscribe(MEMOS_DID_CHANGE, received.append)
        collection = MemoCollection([], bus)

        draft = MemoDraft(title="  Plan  ", content=" Ship it ", tags=["work"])
        memo = draft.save(collection, registry, now=NOW)

        assert memo.title == "Plan"
        assert memo.content == "Ship it"
        assert memo.day == NOW
        assert collection.memos == [memo]
        assert len(received) == 1
        registry.add_many.assert_called_once_with(["work"])

    def test_save_switches_to_edit_mode(self):
        collection = MemoCollection()
        draft = MemoDraft(title="Plan", content="Body")
        draft.save(collection, now=NOW)

        assert draft.is_edit_mode
        assert not draft.is_changed

        draft.content = "Body v2"
        draft.save(collection, now=NOW)
        assert len(collection) == 1
        assert collection.memos[0].content == "Body v2"

    def test_blank_title_new_memo_not_inserted(self, registry):
        collection = MemoCollection()
        draft = MemoDraft(title="   ", content="Body", tags=["idea"])

        assert draft.save(collection, registry, now=NOW) is None
        assert len(collection) == 0
        registry.add_many.assert_called_once_with(["idea"])
        assert not draft.is_changed

    def test_edit_updates_in_place_and_restamps(self, sample_memos):
        collection = MemoCollection(sample_memos)
        target = sample_memos[3]
        draft = MemoDraft.from_memo(target)
        draft.content = "Went well"

        saved = draft.save(collection, now=NOW)

        assert saved is target
        assert target.content == "Went well"
        assert target.day == NOW
        assert len(collection) == 5
