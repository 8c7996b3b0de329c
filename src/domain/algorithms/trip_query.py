from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.algorithms.stop_index import StopIndex, normalize_name
from src.domain.models.query import DestinationCandidate, TripMatch
from src.domain.models.selection import Selection
from src.domain.models.timetable import ServiceType, Timetable


@dataclass(slots=True)
class _CandidateGroup:
    id: str
    name: str
    display_name: str
    routes: list[str] = field(default_factory=list)


def destination_candidates(
    timetable: Timetable, index: StopIndex, departure: Selection
) -> list[DestinationCandidate]:
    """Stops reachable after the departure on some route direction.

    Only stops strictly after the first departure-stop position count, so a
    destination can never lie behind the departure. Candidates are merged by
    normalized name, collecting the distinct route names that serve them.
    """

    by_name: dict[str, _CandidateGroup] = {}
    for direction in timetable:
        dep_idx = direction.first_index_of(departure.all_ids)
        if dep_idx is None:
            continue

        for stop_id in direction.stops[dep_idx + 1 :]:
            if stop_id in departure.all_ids:
                continue
            stop = index.get(stop_id)
            if stop is None:
                continue

            display = normalize_name(stop.name)
            group = by_name.get(display)
            if group is None:
                group = _CandidateGroup(id=stop.id, name=stop.name, display_name=display)
                by_name[display] = group
            if direction.route_name not in group.routes:
                group.routes.append(direction.route_name)

    return [
        DestinationCandidate(
            id=g.id, name=g.name, display_name=g.display_name, routes=tuple(g.routes)
        )
        for g in by_name.values()
    ]


def matching_trips(
    timetable: Timetable,
    departure: Selection,
    destination: Selection,
    day_type: ServiceType,
) -> list[TripMatch]:
    """All trips of day_type running from departure to destination, by departure time."""

    results: list[TripMatch] = []
    for direction in timetable:
        dep_idx = direction.first_index_of(departure.all_ids)
        if dep_idx is None:
            continue
        dest_idx = direction.first_index_of(destination.all_ids, after=dep_idx)
        if dest_idx is None:
            continue

        dep_stop_id = direction.stops[dep_idx]
        dest_stop_id = direction.stops[dest_idx]

        for trip in direction.trips:
            if trip.service_type != day_type:
                continue
            dep_time = trip.time_at(dep_stop_id)
            arr_time = trip.time_at(dest_stop_id)
            if dep_time is None or arr_time is None:
                continue
            # Non-timepoint stops may leave one or both times empty.
            departure_at = dep_time.dep or dep_time.arr
            if not departure_at:
                continue

            results.append(
                TripMatch(
                    route_name=direction.route_name,
                    route_long_name=direction.route_long_name,
                    headsign=direction.headsign,
                    departure=departure_at,
                    arrival=arr_time.arr or arr_time.dep,
                )
            )

    # Zero-padded HH:MM:SS strings sort chronologically, including 24h+.
    results.sort(key=lambda r: r.departure)
    return results
