from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping


class BookmarkKind(str, Enum):
    FAVORITES = "favorites"
    HISTORY = "history"


@dataclass(frozen=True, slots=True)
class Bookmark:
    """A saved (departure, destination) pair of stop display names."""

    dep: str
    dest: str

    def to_dict(self) -> dict[str, str]:
        return {"dep": self.dep, "dest": self.dest}

    @staticmethod
    def from_dict(raw: Mapping[str, Any]) -> "Bookmark":
        return Bookmark(dep=str(raw.get("dep") or ""), dest=str(raw.get("dest") or ""))
