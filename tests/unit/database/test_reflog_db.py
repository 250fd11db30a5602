"""
test_reflog_db.py
-----------------
Unit tests for ReflogDB engine setup, session scopes and manager access.
"""
import pytest
from sqlalchemy import inspect
from sqlalchemy.exc import OperationalError
from unittest.mock import patch

from reflog.core.exceptions import DatabaseError
from reflog.database.manager import ReflogDB
from reflog.database.managers import MemoManager, SettingsManager, TagManager


class TestInitialization:
    def test_creates_schema(self, test_db, test_db_path):
        assert test_db_path.exists()
        tables = set(inspect(test_db.engine).get_table_names())
        assert {"memos", "settings"} <= tables

    def test_creates_parent_directory(self, tmp_dir):
        path = tmp_dir / "nested" / "dir" / "reflog.db"
        with ReflogDB(path) as db:
            assert path.exists()
            assert db.db_path == path.resolve()

    def test_logs_to_system_dir(self, tmp_dir):
        db = ReflogDB(tmp_dir / "reflog.db", log_dir=tmp_dir / "logs")
        db.close()

        log_file = tmp_dir / "logs" / "system" / "database.log"
        assert log_file.exists()
        content = log_file.read_text(encoding="utf-8")
        assert "database_init_complete" in content
        assert "schema_created" in content

    def test_reopen_existing_database(self, test_db_path):
        with ReflogDB(test_db_path) as db:
            with db.session_scope():
                db.tags.add("kept")

        with ReflogDB(test_db_path) as db:
            with db.session_scope():
                assert db.tags.get_all() == ["kept"]

    def test_init_failure_wrapped(self, tmp_dir):
        with patch(
            "reflog.database.manager.create_engine", side_effect=RuntimeError("boom")
        ):
            with pytest.raises(DatabaseError, match="initialization failed"):
                ReflogDB(tmp_dir / "reflog.db")


class TestSessionScope:
    def test_managers_bound_inside_scope(self, test_db):
        with test_db.session_scope():
            assert isinstance(test_db.memos, MemoManager)
            assert isinstance(test_db.tags, TagManager)
            assert isinstance(test_db.settings, SettingsManager)

    @pytest.mark.parametrize("attribute", ["memos", "tags", "settings"])
    def test_managers_unavailable_outside_scope(self, test_db, attribute):
        with pytest.raises(DatabaseError, match="requires active session"):
            getattr(test_db, attribute)

    def test_managers_unbound_after_scope(self, test_db):
        with test_db.session_scope():
            pass
        with pytest.raises(DatabaseError):
            test_db.memos

    def test_commit_on_success(self, test_db):
        with test_db.session_scope():
            test_db.memos.create({"title": "kept"})

        with test_db.session_scope():
            assert test_db.memos.count() == 1

    def test_rollback_on_error(self, test_db):
        with pytest.raises(RuntimeError):
            with test_db.session_scope():
                test_db.memos.create({"title": "discarded"})
                raise RuntimeError("abort")

        with test_db.session_scope():
            assert test_db.memos.count() == 0


class TestRetry:
    def test_retries_locked_database(self, db_session):
        manager = TagManager(db_session)
        calls = []

        def flaky():
            calls.append(1)
            if len(calls) < 3:
                raise OperationalError("stmt", {}, Exception("database is locked"))
            return "done"

        assert manager._execute_with_retry(flaky, retry_delay=0) == "done"
        assert len(calls) == 3

    def test_other_operational_errors_raise(self, db_session):
        manager = TagManager(db_session)

        def broken():
            raise OperationalError("stmt", {}, Exception("no such table"))

        with pytest.raises(OperationalError):
            manager._execute_with_retry(broken, retry_delay=0)
