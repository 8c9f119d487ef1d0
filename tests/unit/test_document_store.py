"""Tests for DocumentStore and its repositories."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonworkbench.service.document_store import (
    CONTENT_KEY,
    LAST_SAVED_KEY,
    DocumentStore,
    PersistenceError,
)
from jsonworkbench.settings import Settings
from jsonworkbench.storage import FileRepository, InMemoryRepository


class TestInMemoryStore:
    def test_empty_store(self, document_store: DocumentStore) -> None:
        assert document_store.load() is None
        assert document_store.last_saved is None

    def test_save_and_load(self, document_store: DocumentStore) -> None:
        saved_at = document_store.save('{"a": 1}')
        assert document_store.load() == '{"a": 1}'
        assert document_store.last_saved == saved_at

    def test_save_overwrites(self, document_store: DocumentStore) -> None:
        document_store.save("[1]")
        document_store.save("[2]")
        assert document_store.load() == "[2]"

    def test_timestamp_persisted_in_repository(self) -> None:
        repo = InMemoryRepository()
        saved_at = DocumentStore(repo).save("{}")
        assert repo.get(CONTENT_KEY) == "{}"
        assert repo.get(LAST_SAVED_KEY) == saved_at.isoformat()
        assert DocumentStore(repo).last_saved == saved_at


class TestSaveFailure:
    def test_generic_error_raised(self, failing_store: DocumentStore) -> None:
        with pytest.raises(PersistenceError, match="Failed to save content") as info:
            failing_store.save('{"a": 1}')
        assert "No space left" not in str(info.value)
        assert isinstance(info.value.__cause__, OSError)

    def test_last_saved_unchanged(self, failing_store: DocumentStore) -> None:
        with pytest.raises(PersistenceError):
            failing_store.save("{}")
        assert failing_store.last_saved is None


class TestFileRepository:
    def test_survives_reopen(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        saved_at = DocumentStore(FileRepository(path)).save('{"x": [1, 2]}')
        reopened = DocumentStore(FileRepository(path))
        assert reopened.load() == '{"x": [1, 2]}'
        assert reopened.last_saved == saved_at

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "doc.json"
        DocumentStore(FileRepository(path)).save("[]")
        assert path.exists()

    def test_corrupt_file_loads_as_none(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        path.write_text("not json", encoding="utf-8")
        store = DocumentStore(FileRepository(path))
        assert store.load() is None
        assert store.last_saved is None

    def test_write_into_unwritable_location_fails_generically(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = DocumentStore(FileRepository(blocker / "doc.json"))
        with pytest.raises(PersistenceError, match="Failed to save content"):
            store.save("{}")

    def test_unpaired_surrogate_round_trips(self, tmp_path: Path) -> None:
        repo = FileRepository(tmp_path / "doc.json")
        repo.put("k", "[\"\ud800\"]")
        assert FileRepository(tmp_path / "doc.json").get("k") == "[\"\ud800\"]"


class TestFromSettings:
    def test_in_memory_when_no_path(self) -> None:
        store = DocumentStore.from_settings(Settings(_env_file=None, document_path=None))
        store.save("{}")
        assert store.load() == "{}"

    def test_file_backed_when_path_set(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.json"
        store = DocumentStore.from_settings(Settings(_env_file=None, document_path=path))
        store.save("[]")
        assert path.exists()
