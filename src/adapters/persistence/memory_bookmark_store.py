from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any

from src.app.ports.output import IBookmarkStore


@dataclass(slots=True)
class InMemoryBookmarkStore(IBookmarkStore):
    """Process-local store; the default when no DynamoDB table is configured."""

    data: dict[str, list[dict[str, Any]]] = field(default_factory=dict)

    def get(self, key: str) -> list[dict[str, Any]]:
        return copy.deepcopy(self.data.get(key, []))

    def put(self, key: str, items: list[dict[str, Any]]) -> None:
        self.data[key] = copy.deepcopy(items)
