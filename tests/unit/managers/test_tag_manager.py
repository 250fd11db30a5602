"""
test_tag_manager.py
-------------------
Unit tests for the TagManager registry.

The registry is a single sorted list stored under the allSavedTags key,
independent of memos.
"""
from reflog.database.managers.tag_manager import TAGS_KEY
from reflog.database.models import Setting


class TestTagManagerAdd:
    """Test TagManager.add() and add_many()."""

    def test_add_persists_sorted(self, tag_manager, db_session):
        assert tag_manager.add("work") is True
        assert tag_manager.add("reading") is True

        assert tag_manager.get_all() == ["reading", "work"]
        assert db_session.get(Setting, TAGS_KEY).value == ["reading", "work"]

    def test_add_duplicate_is_noop(self, tag_manager):
        tag_manager.add("work")
        assert tag_manager.add("work") is False
        assert tag_manager.get_all() == ["work"]

    def test_add_is_case_sensitive(self, tag_manager):
        tag_manager.add("Work")
        assert tag_manager.add("work") is True
        assert tag_manager.get_all() == ["Work", "work"]

    def test_add_blank_is_noop(self, tag_manager):
        assert tag_manager.add("") is False
        assert tag_manager.add("   ") is False
        assert tag_manager.add(None) is False
        assert tag_manager.get_all() == []

    def test_add_many_counts_new_tags(self, tag_manager):
        tag_manager.add("work")
        assert tag_manager.add_many(["work", "life", "", "study"]) == 2
        assert tag_manager.get_all() == ["life", "study", "work"]


class TestTagManagerQueries:
    """Test exists() and suggestions()."""

    def test_empty_registry(self, tag_manager):
        assert tag_manager.get_all() == []

    def test_exists(self, tag_manager):
        tag_manager.add("python")
        assert tag_manager.exists("python") is True
        assert tag_manager.exists("Python") is False
        assert tag_manager.exists("") is False
        assert tag_manager.exists(None) is False

    def test_suggestions_filter_case_insensitively(self, tag_manager):
        tag_manager.add_many(["Work", "workout", "reading"])
        assert tag_manager.suggestions("WOR") == ["Work", "workout"]

    def test_suggestions_exclude_attached(self, tag_manager):
        tag_manager.add_many(["work", "workout", "reading"])
        assert tag_manager.suggestions("", exclude=["work"]) == ["reading", "workout"]


class TestTagManagerDelete:
    """Test delete_at() and delete()."""

    def test_delete_at_positions(self, tag_manager):
        tag_manager.add_many(["a", "b", "c"])

        assert tag_manager.delete_at([0, 2]) == ["a", "c"]
        assert tag_manager.get_all() == ["b"]

    def test_delete_at_out_of_range_ignored(self, tag_manager):
        tag_manager.add_many(["a", "b"])
        assert tag_manager.delete_at([5, -1]) == []
        assert tag_manager.get_all() == ["a", "b"]

    def test_delete_by_name(self, tag_manager):
        tag_manager.add_many(["a", "b"])
        assert tag_manager.delete("a") is True
        assert tag_manager.delete("a") is False
        assert tag_manager.get_all() == ["b"]


class TestTagManagerRename:
    """Test rename() rules."""

    def test_rename_resorts(self, tag_manager):
        tag_manager.add_many(["apple", "mango"])

        assert tag_manager.rename("apple", "zebra") is True
        assert tag_manager.get_all() == ["mango", "zebra"]

    def test_rename_to_existing_is_noop(self, tag_manager):
        tag_manager.add_many(["a", "b"])
        assert tag_manager.rename("a", "b") is False
        assert tag_manager.get_all() == ["a", "b"]

    def test_rename_blank_is_noop(self, tag_manager):
        tag_manager.add("a")
        assert tag_manager.rename("a", "  ") is False
        assert tag_manager.rename("a", None) is False

    def test_rename_missing_is_noop(self, tag_manager):
        tag_manager.add("a")
        assert tag_manager.rename("ghost", "b") is False
        assert tag_manager.get_all() == ["a"]


class TestTagManagerPersistence:
    """Registry survives across sessions."""

    def test_registry_persists_after_commit(self, test_db):
        with test_db.session_scope():
            test_db.tags.add_many(["work", "reading"])

        with test_db.session_scope():
            assert test_db.tags.get_all() == ["reading", "work"]

    def test_corrupt_value_reads_as_empty(self, test_db):
        with test_db.session_scope() as session:
            session.add(Setting(key=TAGS_KEY, value="not a list"))

        with test_db.session_scope():
            assert test_db.tags.get_all() == []
