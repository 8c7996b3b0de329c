from __future__ import annotations

import pytest

from src.domain.models import Stop
from src.domain.models.gtfs import (
    CalendarEntry,
    GtfsFeed,
    GtfsRoute,
    StopTimeRecord,
    TripRef,
)


def _times(trip_id: str, *rows: tuple[str, str]) -> list[StopTimeRecord]:
    # (stop_id, HH:MM:SS) pairs; arrival == departure, sequence from position.
    return [
        StopTimeRecord(
            trip_id=trip_id, stop_id=stop_id, arrival=t, departure=t, sequence=i + 1
        )
        for i, (stop_id, t) in enumerate(rows)
    ]


def make_feed(
    *,
    stops: tuple[Stop, ...],
    routes: tuple[GtfsRoute, ...],
    trips: tuple[TripRef, ...],
    stop_times: list[StopTimeRecord],
    calendar: tuple[CalendarEntry, ...] = (),
) -> GtfsFeed:
    return GtfsFeed(
        stops=stops,
        routes_by_id={r.route_id: r for r in routes},
        trips_by_id={t.trip_id: t for t in trips},
        stop_times=tuple(stop_times),
        calendar_by_service={c.service_id: c for c in calendar},
    )


@pytest.fixture
def sample_feed() -> GtfsFeed:
    """Two routes; "Central" exists twice (S1, S2) with an invisible selector on S2."""

    stops = (
        Stop(id="A", name="Alpha", lat=35.17, lon=136.88),
        Stop(id="B", name="Beta", lat=35.18, lon=136.89),
        Stop(id="S1", name="Central"),
        Stop(id="S2", name="Central\ufe00"),
        Stop(id="D", name="Delta"),
    )
    routes = (
        GtfsRoute(route_id="R1", short_name="1", long_name="Alpha Line"),
        GtfsRoute(route_id="R2", short_name="", long_name="Beta Line"),
    )
    trips = (
        TripRef(trip_id="T1", route_id="R1", service_id="WK", headsign="for Central"),
        TripRef(trip_id="T2", route_id="R1", service_id="WK", headsign="for Central"),
        TripRef(trip_id="T3", route_id="R1", service_id="SAT", headsign="for Central"),
        TripRef(
            trip_id="T4",
            route_id="R1",
            service_id="WK",
            direction_id="1",
            headsign="for Alpha",
        ),
        TripRef(trip_id="T5", route_id="R2", service_id="WK", headsign="for Delta"),
    )
    stop_times = [
        *_times("T1", ("A", "08:00:00"), ("B", "08:10:00"), ("S1", "08:20:00")),
        *_times("T2", ("A", "07:30:00"), ("B", "07:40:00"), ("S1", "07:50:00")),
        *_times("T3", ("A", "09:00:00"), ("B", "09:10:00"), ("S1", "09:20:00")),
        *_times("T4", ("S1", "08:30:00"), ("B", "08:40:00"), ("A", "08:50:00")),
        *_times("T5", ("B", "10:00:00"), ("S2", "10:05:00"), ("D", "10:15:00")),
    ]
    calendar = (
        CalendarEntry(service_id="WK", weekday=True),
        CalendarEntry(service_id="SAT", saturday=True),
    )
    return make_feed(
        stops=stops, routes=routes, trips=trips, stop_times=stop_times, calendar=calendar
    )


@pytest.fixture
def feed_factory():
    return make_feed


@pytest.fixture
def times_factory():
    return _times


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
