"""Headless editor workspace: live buffer + policy, re-validated on every change."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any

from jsonworkbench.models.errors import InvalidResult, ValidationResult
from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.formatter import format_json
from jsonworkbench.parser.validator import JsonValidator
from jsonworkbench.service.document_store import DocumentStore, PersistenceError
from jsonworkbench.service.samples import get_sample


class NoticeLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class Notice:
    """Short user-facing message produced by a workspace action."""

    level: NoticeLevel
    message: str

    @property
    def ok(self) -> bool:
        return self.level is NoticeLevel.SUCCESS


FORMATTED = Notice(NoticeLevel.SUCCESS, "JSON formatted successfully")
CANNOT_FORMAT = Notice(NoticeLevel.ERROR, "Cannot format invalid JSON")
SAVED = Notice(NoticeLevel.SUCCESS, "JSON saved successfully!")
SAVE_FAILED = Notice(NoticeLevel.ERROR, "Failed to save JSON")
NOTHING_TO_SAVE = Notice(NoticeLevel.ERROR, "Only valid, non-empty JSON can be saved")


def _parse_int(raw: Any) -> int | None:
    try:
        return int(str(raw).strip())
    except ValueError:
        return None


class Workspace:
    """The single document being edited, with its policy and latest result.

    Every change to the content or the policy re-runs validation, so
    ``result`` always describes the current buffer.  Thread-safe.
    """

    def __init__(
        self,
        store: DocumentStore,
        policy: Policy | None = None,
        validator: JsonValidator | None = None,
    ) -> None:
        self._store = store
        self._validator = validator or JsonValidator()
        self._lock = threading.RLock()
        self._policy = policy or Policy()

        saved = store.load()
        if saved:
            self._content = saved
        else:
            first = get_sample(0)
            self._content = first.content if first is not None else ""
        self._result = self._validator.validate(self._content, self._policy)

    # -- state ---------------------------------------------------------------

    @property
    def content(self) -> str:
        with self._lock:
            return self._content

    @property
    def policy(self) -> Policy:
        with self._lock:
            return self._policy

    @property
    def result(self) -> ValidationResult:
        with self._lock:
            return self._result

    @property
    def last_saved(self) -> datetime | None:
        return self._store.last_saved

    @property
    def character_count(self) -> int:
        return len(self.content)

    @property
    def is_over_limit(self) -> bool:
        with self._lock:
            return len(self._content) > self._policy.max_characters

    @property
    def can_save(self) -> bool:
        with self._lock:
            return self._result.valid and len(self._content) > 0

    @property
    def error_message(self) -> str | None:
        result = self.result
        if isinstance(result, InvalidResult):
            return result.diagnostic.describe()
        return None

    # -- edits ---------------------------------------------------------------

    def _revalidate(self) -> ValidationResult:
        self._result = self._validator.validate(self._content, self._policy)
        return self._result

    def set_content(self, content: str) -> ValidationResult:
        with self._lock:
            self._content = content
            return self._revalidate()

    def update_policy(self, **changes: Any) -> ValidationResult:
        """Replace the policy with a copy carrying *changes*, then re-validate."""
        with self._lock:
            self._policy = Policy.model_validate({**self._policy.model_dump(), **changes})
            return self._revalidate()

    def set_max_characters(self, raw: Any) -> bool:
        """Apply a user-entered character limit; ignored unless a positive integer."""
        value = _parse_int(raw)
        if value is None or value <= 0:
            return False
        self.update_policy(max_characters=value)
        return True

    def set_max_depth(self, raw: Any) -> bool:
        """Apply a user-entered depth limit; empty input clears it."""
        if raw is None or str(raw).strip() == "":
            self.update_policy(max_depth=None)
            return True
        value = _parse_int(raw)
        if value is None or value <= 0:
            return False
        self.update_policy(max_depth=value)
        return True

    def apply_sample(self, index: int) -> bool:
        sample = get_sample(index)
        if sample is None:
            return False
        self.set_content(sample.content)
        return True

    # -- actions -------------------------------------------------------------

    def format(self) -> Notice:
        with self._lock:
            formatted = format_json(self._content)
            if formatted is None:
                return CANNOT_FORMAT
            self._content = formatted
            self._revalidate()
        return FORMATTED

    def save(self) -> Notice:
        with self._lock:
            if not self.can_save:
                return NOTHING_TO_SAVE
            content = self._content
        try:
            self._store.save(content)
        except PersistenceError:
            return SAVE_FAILED
        return SAVED
