from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from src.adapters.api.dependencies import get_timetable_query_service
from src.adapters.api.schemas.timetable import (
    DestinationCandidateSchema,
    GeoPointSchema,
    StopNameSchema,
)
from src.app.services.timetable_query_service import TimetableQueryService

router = APIRouter(prefix="/stops", tags=["stops"])


@router.get("", response_model=list[StopNameSchema])
def search_stops(
    q: str = Query(default=""),
    limit: int = Query(default=50, ge=1, le=500),
    service: TimetableQueryService = Depends(get_timetable_query_service),
) -> list[StopNameSchema]:
    index = service.loaded().index
    out: list[StopNameSchema] = []
    for s in service.search_stops(q, limit=limit):
        stop = index.get(s.id)
        location = stop.location if stop is not None else None
        out.append(
            StopNameSchema(
                id=s.id,
                name=s.name,
                display_name=s.display_name,
                location=(
                    GeoPointSchema(lat=location.lat, lon=location.lon)
                    if location is not None
                    else None
                ),
            )
        )
    return out


@router.get("/destinations", response_model=list[DestinationCandidateSchema])
def list_destinations(
    departure: str = Query(..., min_length=1),
    q: str = Query(default=""),
    limit: int = Query(default=50, ge=1, le=500),
    service: TimetableQueryService = Depends(get_timetable_query_service),
) -> list[DestinationCandidateSchema]:
    ctx = service.context_for(departure=departure)
    return [
        DestinationCandidateSchema(
            id=c.id, name=c.name, display_name=c.display_name, routes=list(c.routes)
        )
        for c in service.destination_candidates(ctx, query=q, limit=limit)
    ]
