"""File-backed and in-memory key-value repositories."""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

from jsonworkbench.storage.repository import KeyValueRepository


class InMemoryRepository(KeyValueRepository):
    """In-memory repository for development/testing."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        self._store[key] = value

    def get(self, key: str) -> str | None:
        return self._store.get(key)


class FileRepository(KeyValueRepository):
    """Repository persisted as a single JSON object on disk.

    Writes go to a temporary file in the same directory and are moved into
    place with ``os.replace`` so a crash never leaves a half-written file.
    I/O errors (``OSError``) and a corrupt file (``ValueError``) propagate to
    the caller.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        with self._path.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
        if not isinstance(data, dict):
            raise ValueError(f"Repository file {self._path} does not hold a JSON object")
        return data

    def _write_all(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def put(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_all()
            data[key] = value
            self._write_all(data)

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._read_all().get(key)
