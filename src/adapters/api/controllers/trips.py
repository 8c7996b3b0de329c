from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query

from src.adapters.api.dependencies import (
    get_timetable_query_service,
    require_admin_token,
)
from src.adapters.api.schemas.timetable import (
    DepartureBoardSchema,
    DisplayRowSchema,
    ReloadResponseSchema,
    TripGroupSchema,
    TripSchema,
)
from src.app.services.timetable_query_service import TimetableQueryService
from src.domain.algorithms.gtfs_time import (
    day_type_label,
    format_duration,
    format_time,
    parse_clock_time,
)
from src.domain.models import ServiceType, TripMatch

router = APIRouter(tags=["trips"])


def _trip_to_schema(trip: TripMatch) -> TripSchema:
    return TripSchema(
        route_name=trip.route_name,
        route_long_name=trip.route_long_name,
        headsign=trip.headsign,
        departure=trip.departure,
        arrival=trip.arrival,
        departure_label=format_time(trip.departure),
        arrival_label=format_time(trip.arrival),
        duration_label=format_duration(trip.departure, trip.arrival),
    )


@router.get("/trips", response_model=DepartureBoardSchema)
def get_trips(
    departure: str = Query(..., min_length=1),
    destination: str = Query(..., min_length=1),
    day_type: ServiceType | None = Query(default=None),
    at: str | None = Query(default=None, description="HH:MM or HH:MM:SS"),
    service: TimetableQueryService = Depends(get_timetable_query_service),
) -> DepartureBoardSchema:
    try:
        now = parse_clock_time(at) if at else datetime.now()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    ctx = service.context_for(
        departure=departure, destination=destination, day_type=day_type
    )
    board = service.departure_board(ctx, now=now)

    label = day_type_label(ctx.day_type)
    next_trip = board.next_trip
    return DepartureBoardSchema(
        departure=ctx.departure.display_name if ctx.departure else departure,
        destination=(
            ctx.destination.display_name if ctx.destination else destination
        ),
        day_type=ctx.day_type.value,
        day_type_label=label,
        now=board.now,
        trips=[_trip_to_schema(t) for t in board.trips],
        next_index=board.next_index,
        next_trip=_trip_to_schema(next_trip) if next_trip is not None else None,
        countdown_minutes=board.countdown_minutes,
        countdown_label=board.countdown_label,
        window_start=board.window_start,
        window_end=board.window_end,
        groups=[
            TripGroupSchema(
                name=g.name,
                rows=[
                    DisplayRowSchema(
                        **_trip_to_schema(r.trip).model_dump(),
                        is_past=r.is_past,
                        is_next=r.is_next,
                    )
                    for r in g.rows
                ],
            )
            for g in board.groups
        ],
        message=(
            None
            if board.has_trips
            else f"この区間の{label}ダイヤは見つかりませんでした"
        ),
    )


@router.post(
    "/admin/reload",
    response_model=ReloadResponseSchema,
    dependencies=[Depends(require_admin_token)],
)
def reload_timetable(
    service: TimetableQueryService = Depends(get_timetable_query_service),
) -> ReloadResponseSchema:
    loaded = service.refresh()
    return ReloadResponseSchema(
        stops=len(loaded.snapshot.stops),
        route_directions=len(loaded.snapshot.timetable),
    )
