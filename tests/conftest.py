"""Shared test fixtures for JSON Workbench."""

from __future__ import annotations

import pytest

from jsonworkbench.models.policy import Policy
from jsonworkbench.parser.validator import JsonValidator
from jsonworkbench.service.document_store import DocumentStore
from jsonworkbench.storage import InMemoryRepository

# Invalid value at line 2, column 8 (zero-based offset 9).
MISSING_VALUE_JSON = '{\n  "a": }'


class FailingRepository(InMemoryRepository):
    """Repository whose writes always fail, as a full disk would."""

    def put(self, key: str, value: str) -> None:
        raise OSError("No space left on device")


@pytest.fixture
def validator() -> JsonValidator:
    return JsonValidator()


@pytest.fixture
def strict_policy() -> Policy:
    return Policy()


@pytest.fixture
def lenient_policy() -> Policy:
    return Policy(allow_comments=True, allow_trailing_commas=True)


@pytest.fixture
def document_store() -> DocumentStore:
    return DocumentStore(InMemoryRepository())


@pytest.fixture
def failing_store() -> DocumentStore:
    return DocumentStore(FailingRepository())
