from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from src.domain.exceptions import UnknownStopError
from src.domain.models.query import StopName
from src.domain.models.selection import Selection
from src.domain.models.stop import Stop

# Variation selectors: VS1-VS16 (BMP) and VS17-VS256 (plane 14).
_VARIATION_SELECTORS = re.compile("[\ufe00-\ufe0f\U000e0100-\U000e01ef]")

DEFAULT_SEARCH_LIMIT = 50


def normalize_name(name: str) -> str:
    """Drop invisible variation selectors so duplicate stop names compare equal."""

    return _VARIATION_SELECTORS.sub("", name)


@dataclass(frozen=True, slots=True)
class StopIndex:
    """The one place that maps stop display names to stop ids.

    Several stop records can carry the same visible name with different ids;
    queries must match against all of them.
    """

    stops_by_id: dict[str, Stop]
    representatives: dict[str, StopName]
    ids_by_name: dict[str, frozenset[str]]

    @staticmethod
    def from_stops(stops: Iterable[Stop]) -> "StopIndex":
        stops_by_id: dict[str, Stop] = {}
        representatives: dict[str, StopName] = {}
        ids_by_name: dict[str, list[str]] = {}
        for stop in stops:
            stops_by_id.setdefault(stop.id, stop)
            display = normalize_name(stop.name)
            if display not in representatives:
                representatives[display] = StopName(
                    id=stop.id, name=stop.name, display_name=display
                )
            ids = ids_by_name.setdefault(display, [])
            if stop.id not in ids:
                ids.append(stop.id)

        return StopIndex(
            stops_by_id=stops_by_id,
            representatives=representatives,
            ids_by_name={k: frozenset(v) for k, v in ids_by_name.items()},
        )

    def all_stop_names(self) -> tuple[StopName, ...]:
        return tuple(self.representatives.values())

    def search(
        self, query: str = "", *, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[StopName]:
        q = query.strip()
        items = [
            s for s in self.representatives.values() if not q or q in s.display_name
        ]
        return items[: max(0, limit)]

    def resolve_ids(self, display_name: str) -> frozenset[str]:
        return self.ids_by_name.get(normalize_name(display_name), frozenset())

    def selection_for(self, display_name: str) -> Selection:
        display = normalize_name(display_name)
        ids = self.resolve_ids(display)
        if not ids:
            raise UnknownStopError(display_name)
        return Selection(
            primary_id=self.representatives[display].id,
            all_ids=ids,
            display_name=display,
        )

    def get(self, stop_id: str) -> Stop | None:
        return self.stops_by_id.get(stop_id)
