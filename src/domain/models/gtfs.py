from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.models.stop import Stop


@dataclass(frozen=True, slots=True)
class CalendarEntry:
    """Weekly service pattern of one service_id (subset of GTFS calendar.txt).

    ``weekday`` is only true when Monday through Friday are all active.
    """

    service_id: str
    weekday: bool = False
    saturday: bool = False
    sunday: bool = False
    start_date: str = ""
    end_date: str = ""


@dataclass(frozen=True, slots=True)
class CalendarDate:
    """A calendar_dates.txt exception row (1 = added, 2 = removed)."""

    service_id: str
    date: str
    exception_type: str


@dataclass(frozen=True, slots=True)
class GtfsRoute:
    route_id: str
    short_name: str = ""
    long_name: str = ""


@dataclass(frozen=True, slots=True)
class TripRef:
    trip_id: str
    route_id: str
    service_id: str
    direction_id: str = "0"
    headsign: str = ""


@dataclass(frozen=True, slots=True)
class StopTimeRecord:
    """One stop_times.txt row. Times keep the raw GTFS string (HH may exceed 23)."""

    trip_id: str
    stop_id: str
    arrival: str
    departure: str
    sequence: int


@dataclass(frozen=True, slots=True)
class GtfsFeed:
    """Raw GTFS tables, in file order, as needed to build the timetable."""

    stops: tuple[Stop, ...]
    routes_by_id: dict[str, GtfsRoute]
    trips_by_id: dict[str, TripRef]
    stop_times: tuple[StopTimeRecord, ...]
    calendar_by_service: dict[str, CalendarEntry]
    calendar_dates: tuple[CalendarDate, ...] = field(default_factory=tuple)
    # stop_times rows dropped while reading (e.g. unparseable stop_sequence).
    skipped_stop_times: int = 0
