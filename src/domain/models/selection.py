from __future__ import annotations

from dataclasses import dataclass

from .timetable import ServiceType


@dataclass(frozen=True, slots=True)
class Selection:
    """A chosen stop: every id sharing the normalized display name."""

    primary_id: str
    all_ids: frozenset[str]
    display_name: str


@dataclass(slots=True)
class QueryContext:
    """Per-session query state passed to the engine instead of globals."""

    departure: Selection | None = None
    destination: Selection | None = None
    day_type: ServiceType = ServiceType.WEEKDAY

    def select_departure(self, selection: Selection) -> None:
        # A new departure always invalidates the destination.
        self.departure = selection
        self.destination = None

    def select_destination(self, selection: Selection) -> None:
        self.destination = selection

    def reset(self) -> None:
        self.departure = None
        self.destination = None

    @property
    def is_complete(self) -> bool:
        return self.departure is not None and self.destination is not None
