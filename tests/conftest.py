"""
conftest.py
-----------
Shared pytest fixtures for Reflog tests.

Provides fixtures for:
- Temporary directories and database setup/teardown
- Manager instances bound to a test session
- Sample memo factories
"""
import uuid
import pytest
from pathlib import Path
from datetime import datetime
from tempfile import TemporaryDirectory


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Data Factory Functions -----

def make_memo(day, title="Memo", tags=None, content="", memo_id=None):
    """Factory for memos with a predictable id when one is given."""
    from reflog.dataclasses.memo import Memo

    if isinstance(memo_id, int):
        memo_id = uuid.UUID(int=memo_id)
    return Memo(
        day=day,
        title=title,
        tags=list(tags or []),
        content=content,
        id=memo_id or uuid.uuid4(),
    )


@pytest.fixture
def memo_factory():
    """Expose make_memo to tests."""
    return make_memo


@pytest.fixture
def sample_memos():
    """
    Five memos across two months of 2025.

    Tags: work x3, reading x2, exercise x1, plus an empty placeholder.
    """
    return [
        make_memo(datetime(2025, 3, 10, 9, 0), "Standup notes", ["work"], "Sprint planning", 1),
        make_memo(datetime(2025, 3, 10, 21, 30), "Evening read", ["reading", ""], "Chapter 3", 2),
        make_memo(datetime(2025, 3, 12, 18, 0), "Run", ["exercise", "work"], "5km", 3),
        make_memo(datetime(2025, 2, 28, 12, 15), "Retro", ["work"], "", 4),
        make_memo(datetime(2025, 2, 1, 8, 45), "Book club", ["reading"], "Discussed ending", 5),
    ]


# ----- Database Fixtures -----

@pytest.fixture
def test_db_path(tmp_dir):
    """Create temporary test database path."""
    return tmp_dir / "test.db"


@pytest.fixture
def test_db(test_db_path):
    """
    Create test database instance with schema.

    Returns a ReflogDB instance with an initialized schema.
    Database is torn down after the test.
    """
    from reflog.database.manager import ReflogDB

    db = ReflogDB(db_path=test_db_path)

    yield db

    # Cleanup
    db.close()
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture
def db_session(test_db):
    """
    Create a database session for tests.

    Provides a session with automatic rollback after test.
    """
    with test_db.session_scope() as session:
        yield session
        session.rollback()


@pytest.fixture
def memo_manager(db_session):
    """Create MemoManager instance for testing."""
    from reflog.database.managers.memo_manager import MemoManager
    return MemoManager(db_session)


@pytest.fixture
def tag_manager(db_session):
    """Create TagManager instance for testing."""
    from reflog.database.managers.tag_manager import TagManager
    return TagManager(db_session)


@pytest.fixture
def settings_manager(db_session):
    """Create SettingsManager instance for testing."""
    from reflog.database.managers.settings_manager import SettingsManager
    return SettingsManager(db_session)
