from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class StopName:
    """One autocomplete entry per normalized stop name."""

    id: str
    name: str
    display_name: str


@dataclass(frozen=True, slots=True)
class DestinationCandidate:
    id: str
    name: str
    display_name: str
    routes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TripMatch:
    route_name: str
    route_long_name: str
    headsign: str
    departure: str
    arrival: str

    @property
    def group_key(self) -> str:
        return f"{self.route_name} {self.headsign}"


@dataclass(frozen=True, slots=True)
class DisplayRow:
    trip: TripMatch
    departure_label: str
    arrival_label: str
    duration_label: str
    is_past: bool = False
    is_next: bool = False


@dataclass(frozen=True, slots=True)
class TripGroup:
    name: str
    rows: tuple[DisplayRow, ...] = ()


@dataclass(frozen=True, slots=True)
class DepartureBoard:
    """Derived view over the sorted trip list for one point in time.

    ``trips`` is the full sorted list; ``groups`` only covers the window
    ``[window_start, window_end)`` and exists for presentation.
    """

    now: str
    trips: tuple[TripMatch, ...]
    next_index: int | None = None
    window_start: int = 0
    window_end: int = 0
    groups: tuple[TripGroup, ...] = field(default_factory=tuple)
    countdown_minutes: int | None = None
    countdown_label: str | None = None

    @property
    def has_trips(self) -> bool:
        return bool(self.trips)

    @property
    def next_trip(self) -> TripMatch | None:
        if self.next_index is None:
            return None
        return self.trips[self.next_index]

    @property
    def window(self) -> tuple[TripMatch, ...]:
        return self.trips[self.window_start : self.window_end]
