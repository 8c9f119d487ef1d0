"""Abstract key-value repository interface for persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueRepository(ABC):
    @abstractmethod
    def put(self, key: str, value: str) -> None: ...

    @abstractmethod
    def get(self, key: str) -> str | None: ...
