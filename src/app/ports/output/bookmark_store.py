from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IBookmarkStore(ABC):
    """Port for opaque key -> JSON list blobs (favorites, history)."""

    @abstractmethod
    def get(self, key: str) -> list[dict[str, Any]]:
        raise NotImplementedError

    @abstractmethod
    def put(self, key: str, items: list[dict[str, Any]]) -> None:
        raise NotImplementedError
