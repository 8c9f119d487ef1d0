"""Dependency injection for FastAPI: DocumentStore, Workspace and default policy."""

from __future__ import annotations

from jsonworkbench.models.policy import Policy
from jsonworkbench.service.document_store import DocumentStore
from jsonworkbench.service.workspace import Workspace

_document_store: DocumentStore | None = None
_workspace: Workspace | None = None
_default_policy: Policy = Policy()


def init_document_store(store: DocumentStore, *, default_policy: Policy | None = None) -> None:
    """Set the global DocumentStore and open a Workspace on it (called at app startup)."""
    global _document_store, _workspace, _default_policy  # noqa: PLW0603
    _document_store = store
    _default_policy = default_policy or Policy()
    _workspace = Workspace(store, policy=_default_policy)


def get_document_store() -> DocumentStore:
    """FastAPI ``Depends`` provider for DocumentStore."""
    if _document_store is None:
        raise RuntimeError("DocumentStore not initialised, call init_document_store() first")
    return _document_store


def get_workspace() -> Workspace:
    """FastAPI ``Depends`` provider for the shared editor Workspace."""
    if _workspace is None:
        raise RuntimeError("Workspace not initialised, call init_document_store() first")
    return _workspace


def get_default_policy() -> Policy:
    """FastAPI ``Depends`` provider for the policy used when a request omits one."""
    return _default_policy


def reset_document_store() -> None:
    """Clear the global DocumentStore and Workspace (for tests)."""
    global _document_store, _workspace, _default_policy  # noqa: PLW0603
    _document_store = None
    _workspace = None
    _default_policy = Policy()
