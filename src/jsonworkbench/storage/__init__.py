"""Persistence backends for the saved document."""

from jsonworkbench.storage.file_repo import FileRepository, InMemoryRepository
from jsonworkbench.storage.repository import KeyValueRepository

__all__ = [
    "FileRepository",
    "InMemoryRepository",
    "KeyValueRepository",
]
