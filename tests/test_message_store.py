"""Tests for the message store."""

import os

import pytest

from mailsim.errors import StorageError
from mailsim.storage.message_store import MessageStore, ensure_storage_directory, write_message_file


class TestEnsureStorageDirectory:
    """Test storage directory creation."""

    def test_creates_missing_parents(self, tmp_path):
        """Test nested directory is created."""
        target = tmp_path / "a" / "b" / "emails"
        ensure_storage_directory(target)
        assert target.is_dir()

    def test_idempotent_keeps_contents(self, tmp_path):
        """Test second call succeeds and leaves files alone."""
        target = tmp_path / "emails"
        ensure_storage_directory(target)
        (target / "keep.eml").write_text("data", encoding="utf-8")

        ensure_storage_directory(target)

        assert [p.name for p in target.iterdir()] == ["keep.eml"]
        assert (target / "keep.eml").read_text(encoding="utf-8") == "data"

    def test_file_in_the_way_raises_error(self, tmp_path):
        """Test a regular file at the path is rejected."""
        target = tmp_path / "emails"
        target.write_text("not a directory", encoding="utf-8")

        with pytest.raises(StorageError):
            ensure_storage_directory(target)

    def test_file_as_parent_raises_error(self, tmp_path):
        """Test a regular file as an ancestor is rejected."""
        blocker = tmp_path / "blocker"
        blocker.write_text("x", encoding="utf-8")

        with pytest.raises(StorageError):
            ensure_storage_directory(blocker / "emails")


class TestWriteMessageFile:
    """Test message file writing."""

    def test_writes_content_exactly(self, tmp_path):
        """Test content is written byte for byte."""
        path = tmp_path / "m.eml"
        write_message_file(path, "To: a\n\nbody\n")
        assert path.read_bytes() == b"To: a\n\nbody\n"

    def test_truncates_existing_file(self, tmp_path):
        """Test existing file is replaced, not appended to."""
        path = tmp_path / "m.eml"
        path.write_text("old content that is longer", encoding="utf-8")

        write_message_file(path, "new")

        assert path.read_text(encoding="utf-8") == "new"

    def test_unencodable_content_leaves_existing_file(self, tmp_path):
        """Test a lone surrogate is rejected before the file is truncated."""
        path = tmp_path / "m.eml"
        path.write_text("previous", encoding="utf-8")

        with pytest.raises(StorageError):
            write_message_file(path, "caf\udce9")

        assert path.read_text(encoding="utf-8") == "previous"

    def test_unencodable_content_creates_no_file(self, tmp_path):
        """Test nothing is created when content cannot be encoded."""
        with pytest.raises(StorageError):
            write_message_file(tmp_path / "m.eml", "\ud800")

        assert list(tmp_path.iterdir()) == []

    def test_unwritable_path_raises_error(self, tmp_path):
        """Test missing directory surfaces as StorageError."""
        with pytest.raises(StorageError):
            write_message_file(tmp_path / "missing" / "m.eml", "x")


class TestMessageStore:
    """Test listing and reading stored messages."""

    @pytest.fixture
    def store(self, tmp_path):
        """Create store in a temporary directory."""
        store = MessageStore(tmp_path / "emails")
        store.ensure_storage_directory()
        return store

    def test_list_newest_first(self, store):
        """Test listing is sorted by modification time, newest first."""
        older = store.write_message_file("2025-01-01_00-00-00.eml", "old")
        newer = store.write_message_file("2025-01-02_00-00-00.eml", "new")
        os.utime(older, (1_000_000, 1_000_000))
        os.utime(newer, (2_000_000, 2_000_000))

        assert [p.name for p in store.list_messages()] == [newer.name, older.name]

    def test_list_ignores_other_extensions(self, store):
        """Test only files with the configured extension are listed."""
        store.write_message_file("a.eml", "x")
        store.write_message_file("notes.txt", "x")
        (store.storage_path / "sub.eml").mkdir()

        assert [p.name for p in store.list_messages()] == ["a.eml"]

    def test_list_missing_directory(self, tmp_path):
        """Test listing a directory that does not exist returns nothing."""
        assert MessageStore(tmp_path / "nowhere").list_messages() == []

    def test_read_message(self, store):
        """Test stored content is returned unchanged."""
        store.write_message_file("a.eml", "From: x\n\nbody\n")
        assert store.read_message("a.eml") == "From: x\n\nbody\n"

    def test_read_missing_message_raises_error(self, store):
        """Test reading an unknown file raises StorageError."""
        with pytest.raises(StorageError):
            store.read_message("missing.eml")

    @pytest.mark.parametrize("name", ["../secret.eml", "sub/a.eml", "", ".."])
    def test_rejects_path_components(self, store, name):
        """Test names that leave the storage directory are refused."""
        with pytest.raises(StorageError):
            store.read_message(name)
