from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Mapping

from .stop import Stop

# Sort key for trips without a first departure.
NO_DEPARTURE_SENTINEL = "99:99:99"


class ServiceType(str, Enum):
    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    HOLIDAY = "holiday"


@dataclass(frozen=True, slots=True, order=True)
class RouteDirectionKey:
    route_id: str
    direction_id: str

    def __str__(self) -> str:
        return f"{self.route_id}_{self.direction_id}"


@dataclass(frozen=True, slots=True)
class TimetableStopTime:
    stop_id: str
    arr: str
    dep: str


@dataclass(frozen=True, slots=True)
class ScheduledTrip:
    service_type: ServiceType
    times: tuple[TimetableStopTime, ...]

    @property
    def first_departure(self) -> str:
        if not self.times or not self.times[0].dep:
            return NO_DEPARTURE_SENTINEL
        return self.times[0].dep

    def time_at(self, stop_id: str) -> TimetableStopTime | None:
        """First entry for stop_id in trip order (loops may revisit a stop)."""

        for t in self.times:
            if t.stop_id == stop_id:
                return t
        return None


@dataclass(frozen=True, slots=True)
class RouteDirection:
    """All trips of one route in one direction, sharing a canonical stop order.

    The stop order is taken from the first trip seen for the key and is never
    merged with the order of later trips.
    """

    key: RouteDirectionKey
    route_name: str
    route_long_name: str
    headsign: str
    stops: tuple[str, ...]
    trips: tuple[ScheduledTrip, ...] = ()

    def first_index_of(self, stop_ids: frozenset[str], *, after: int = -1) -> int | None:
        for i in range(after + 1, len(self.stops)):
            if self.stops[i] in stop_ids:
                return i
        return None


@dataclass(frozen=True, slots=True)
class Timetable:
    """Read-only mapping RouteDirectionKey -> RouteDirection."""

    route_directions: Mapping[RouteDirectionKey, RouteDirection] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        if not isinstance(self.route_directions, MappingProxyType):
            object.__setattr__(
                self, "route_directions", MappingProxyType(dict(self.route_directions))
            )

    def __iter__(self) -> Iterator[RouteDirection]:
        return iter(self.route_directions.values())

    def __len__(self) -> int:
        return len(self.route_directions)

    def get(self, key: RouteDirectionKey) -> RouteDirection | None:
        return self.route_directions.get(key)


@dataclass(frozen=True, slots=True)
class TimetableSnapshot:
    """Both persisted artifacts, loaded together and swapped as one unit."""

    stops: tuple[Stop, ...]
    timetable: Timetable
