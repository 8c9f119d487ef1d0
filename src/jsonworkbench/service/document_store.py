"""Persistence of the current editor document and its last-saved timestamp."""

from __future__ import annotations

import logging
import threading
from datetime import UTC, datetime

from jsonworkbench.settings import Settings
from jsonworkbench.storage.file_repo import FileRepository, InMemoryRepository
from jsonworkbench.storage.repository import KeyValueRepository

logger = logging.getLogger("jsonworkbench.store")

CONTENT_KEY = "json-editor-content"
LAST_SAVED_KEY = "json-editor-last-saved"


class PersistenceError(Exception):
    """Raised when the document cannot be saved.

    Carries a generic message only; the underlying cause is logged and
    chained, never shown to the user.
    """


class DocumentStore:
    """Single-document store on top of a ``KeyValueRepository``.

    Saves are not retried.  Reads never raise: a missing or unreadable
    document loads as ``None``.
    """

    def __init__(self, repository: KeyValueRepository) -> None:
        self._repository = repository
        self._lock = threading.Lock()
        self._last_saved = self._read_last_saved()

    @classmethod
    def from_settings(cls, settings: Settings) -> DocumentStore:
        """File-backed store when ``document_path`` is set, in-memory otherwise."""
        if settings.document_path is not None:
            logger.info("Using document file %s", settings.document_path)
            return cls(FileRepository(settings.document_path))
        return cls(InMemoryRepository())

    @property
    def last_saved(self) -> datetime | None:
        with self._lock:
            return self._last_saved

    def save(self, content: str) -> datetime:
        """Persist *content* and return the save time.

        Raises :class:`PersistenceError` if the repository write fails.
        """
        now = datetime.now(UTC)
        with self._lock:
            try:
                self._repository.put(CONTENT_KEY, content)
                self._repository.put(LAST_SAVED_KEY, now.isoformat())
            except (OSError, ValueError) as exc:
                logger.error("Failed to save document: %s", exc)
                raise PersistenceError("Failed to save content") from exc
            self._last_saved = now
        logger.info("Document saved (length=%d)", len(content))
        return now

    def load(self) -> str | None:
        """Return the saved document, or ``None`` if absent or unreadable."""
        with self._lock:
            try:
                return self._repository.get(CONTENT_KEY)
            except (OSError, ValueError) as exc:
                logger.error("Failed to load document: %s", exc)
                return None

    def _read_last_saved(self) -> datetime | None:
        try:
            raw = self._repository.get(LAST_SAVED_KEY)
            return datetime.fromisoformat(raw) if raw else None
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable last-saved timestamp: %s", exc)
            return None
