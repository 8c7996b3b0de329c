from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import IBookmarkStore
from src.domain.models import Bookmark, BookmarkKind

MAX_HISTORY = 10


@dataclass(slots=True)
class BookmarkService:
    """Favorites and recent searches, as ordered lists of stop-name pairs."""

    store: IBookmarkStore
    max_history: int = MAX_HISTORY

    def entries(self, kind: BookmarkKind) -> list[Bookmark]:
        return [Bookmark.from_dict(item) for item in self.store.get(kind.value)]

    def _save(self, kind: BookmarkKind, items: list[Bookmark]) -> None:
        self.store.put(kind.value, [b.to_dict() for b in items])

    def add_history(self, *, dep: str, dest: str) -> list[Bookmark]:
        entry = Bookmark(dep=dep, dest=dest)
        items = [b for b in self.entries(BookmarkKind.HISTORY) if b != entry]
        items.insert(0, entry)
        items = items[: self.max_history]
        self._save(BookmarkKind.HISTORY, items)
        return items

    def is_favorite(self, *, dep: str, dest: str) -> bool:
        return Bookmark(dep=dep, dest=dest) in self.entries(BookmarkKind.FAVORITES)

    def toggle_favorite(self, *, dep: str, dest: str) -> bool:
        """Add or remove the pair; returns whether it is now a favorite."""

        entry = Bookmark(dep=dep, dest=dest)
        items = self.entries(BookmarkKind.FAVORITES)
        if entry in items:
            self._save(BookmarkKind.FAVORITES, [b for b in items if b != entry])
            return False
        self._save(BookmarkKind.FAVORITES, [entry, *items])
        return True

    def remove(self, kind: BookmarkKind, index: int) -> list[Bookmark]:
        items = self.entries(kind)
        if 0 <= index < len(items):
            del items[index]
            self._save(kind, items)
        return items
