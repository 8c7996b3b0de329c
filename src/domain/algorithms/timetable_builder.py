from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.domain.algorithms.calendar import service_type_for
from src.domain.models.gtfs import GtfsFeed, GtfsRoute, StopTimeRecord, TripRef
from src.domain.models.timetable import (
    RouteDirection,
    RouteDirectionKey,
    ScheduledTrip,
    Timetable,
    TimetableStopTime,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _PendingDirection:
    key: RouteDirectionKey
    route_name: str
    route_long_name: str
    headsign: str
    stops: tuple[str, ...]
    trips: list[ScheduledTrip] = field(default_factory=list)

    def freeze(self) -> RouteDirection:
        # sorted() is stable: equal first departures keep insertion order.
        trips = sorted(self.trips, key=lambda t: t.first_departure)
        return RouteDirection(
            key=self.key,
            route_name=self.route_name,
            route_long_name=self.route_long_name,
            headsign=self.headsign,
            stops=self.stops,
            trips=tuple(trips),
        )


def route_display_name(route: GtfsRoute) -> str:
    return route.short_name or route.long_name or route.route_id


def group_stop_times_by_trip(
    stop_times: tuple[StopTimeRecord, ...], *, known_stop_ids: frozenset[str]
) -> dict[str, list[StopTimeRecord]]:
    """Group rows per trip (first-appearance order), each sorted by stop_sequence."""

    by_trip: dict[str, list[StopTimeRecord]] = {}
    skipped = 0
    for st in stop_times:
        if known_stop_ids and st.stop_id not in known_stop_ids:
            skipped += 1
            continue
        by_trip.setdefault(st.trip_id, []).append(st)

    for entries in by_trip.values():
        entries.sort(key=lambda st: st.sequence)

    if skipped:
        logger.debug("Skipped %d stop_times with unknown stop_id", skipped)
    return by_trip


def _scheduled_trip(
    ref: TripRef, entries: list[StopTimeRecord], feed: GtfsFeed
) -> ScheduledTrip:
    return ScheduledTrip(
        service_type=service_type_for(ref.service_id, feed.calendar_by_service),
        times=tuple(
            TimetableStopTime(stop_id=st.stop_id, arr=st.arrival, dep=st.departure)
            for st in entries
        ),
    )


def build_timetable(feed: GtfsFeed) -> Timetable:
    """Index the feed by route and direction.

    Each direction's stop order is the order of the first trip seen for it.
    Trips with unknown trip or route references are skipped.
    """

    known_stop_ids = frozenset(s.id for s in feed.stops)
    by_trip = group_stop_times_by_trip(feed.stop_times, known_stop_ids=known_stop_ids)

    pending: dict[RouteDirectionKey, _PendingDirection] = {}
    skipped_trips = 0
    for trip_id, entries in by_trip.items():
        ref = feed.trips_by_id.get(trip_id)
        route = feed.routes_by_id.get(ref.route_id) if ref is not None else None
        if ref is None or route is None:
            skipped_trips += 1
            continue

        key = RouteDirectionKey(route_id=ref.route_id, direction_id=ref.direction_id)
        direction = pending.get(key)
        if direction is None:
            direction = _PendingDirection(
                key=key,
                route_name=route_display_name(route),
                route_long_name=route.long_name,
                headsign=ref.headsign,
                stops=tuple(st.stop_id for st in entries),
            )
            pending[key] = direction

        direction.trips.append(_scheduled_trip(ref, entries, feed))

    if skipped_trips:
        logger.debug("Skipped %d trips with unknown trip or route", skipped_trips)

    return Timetable({key: d.freeze() for key, d in pending.items()})
