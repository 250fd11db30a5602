"""
test_fs.py
----------
Unit tests for filesystem helpers.
"""
import hashlib
import pytest

from reflog.utils.fs import get_file_hash, write_if_changed


class TestWriteIfChanged:
    def test_created_then_skipped_then_updated(self, tmp_dir):
        path = tmp_dir / "nested" / "out.md"

        assert write_if_changed(path, "one") == "created"
        assert write_if_changed(path, "one") == "skipped"
        assert write_if_changed(path, "two") == "updated"
        assert path.read_text(encoding="utf-8") == "two"

    def test_force_rewrites_identical_content(self, tmp_dir):
        path = tmp_dir / "out.md"
        write_if_changed(path, "same")
        assert write_if_changed(path, "same", force=True) == "updated"


class TestGetFileHash:
    def test_md5_of_contents(self, tmp_dir):
        path = tmp_dir / "data.txt"
        path.write_bytes(b"reflog")
        assert get_file_hash(path) == hashlib.md5(b"reflog").hexdigest()

    def test_missing_file(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            get_file_hash(tmp_dir / "missing.txt")

    def test_directory_rejected(self, tmp_dir):
        with pytest.raises(FileNotFoundError):
            get_file_hash(tmp_dir)
