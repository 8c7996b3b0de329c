from __future__ import annotations

from typing import Any, Mapping

from src.domain.models import Stop
from src.domain.models.timetable import (
    RouteDirection,
    RouteDirectionKey,
    ScheduledTrip,
    ServiceType,
    Timetable,
    TimetableSnapshot,
    TimetableStopTime,
)

# Field names of stops.json / timetable.json are a public contract with other
# consumers; keep them camelCase.

STOPS_FILE = "stops.json"
TIMETABLE_FILE = "timetable.json"


def stops_to_json(stops: tuple[Stop, ...]) -> list[dict[str, Any]]:
    return [{"id": s.id, "name": s.name, "lat": s.lat, "lon": s.lon} for s in stops]


def _route_direction_to_json(direction: RouteDirection) -> dict[str, Any]:
    return {
        "routeId": direction.key.route_id,
        "directionId": direction.key.direction_id,
        "routeName": direction.route_name,
        "routeLongName": direction.route_long_name,
        "headsign": direction.headsign,
        "stops": list(direction.stops),
        "trips": [
            {
                "serviceType": trip.service_type.value,
                "times": [
                    {"stopId": t.stop_id, "arr": t.arr, "dep": t.dep}
                    for t in trip.times
                ],
            }
            for trip in direction.trips
        ],
    }


def timetable_to_json(timetable: Timetable) -> dict[str, Any]:
    return {str(d.key): _route_direction_to_json(d) for d in timetable}


def _optional_float(raw: Any) -> float | None:
    if raw is None:
        return None
    return float(raw)


def stops_from_json(raw: list[Mapping[str, Any]]) -> tuple[Stop, ...]:
    return tuple(
        Stop(
            id=str(item["id"]),
            name=str(item.get("name") or ""),
            lat=_optional_float(item.get("lat")),
            lon=_optional_float(item.get("lon")),
        )
        for item in raw
    )


def _route_direction_from_json(raw: Mapping[str, Any]) -> RouteDirection:
    key = RouteDirectionKey(
        route_id=str(raw["routeId"]), direction_id=str(raw["directionId"])
    )
    return RouteDirection(
        key=key,
        route_name=str(raw.get("routeName") or key.route_id),
        route_long_name=str(raw.get("routeLongName") or ""),
        headsign=str(raw.get("headsign") or ""),
        stops=tuple(str(s) for s in raw.get("stops", ())),
        trips=tuple(
            ScheduledTrip(
                service_type=ServiceType(trip["serviceType"]),
                times=tuple(
                    TimetableStopTime(
                        stop_id=str(t["stopId"]),
                        arr=str(t.get("arr") or ""),
                        dep=str(t.get("dep") or ""),
                    )
                    for t in trip.get("times", ())
                ),
            )
            for trip in raw.get("trips", ())
        ),
    )


def timetable_from_json(raw: Mapping[str, Mapping[str, Any]]) -> Timetable:
    directions = [_route_direction_from_json(v) for v in raw.values()]
    return Timetable({d.key: d for d in directions})


def snapshot_from_json(
    stops_raw: list[Mapping[str, Any]], timetable_raw: Mapping[str, Mapping[str, Any]]
) -> TimetableSnapshot:
    return TimetableSnapshot(
        stops=stops_from_json(stops_raw), timetable=timetable_from_json(timetable_raw)
    )
