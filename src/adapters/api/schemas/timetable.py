from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class StopNameSchema(BaseModel):
    id: str
    name: str
    display_name: str
    location: GeoPointSchema | None = None


class DestinationCandidateSchema(BaseModel):
    id: str
    name: str
    display_name: str
    routes: list[str] = []


class TripSchema(BaseModel):
    route_name: str
    route_long_name: str
    headsign: str
    departure: str
    arrival: str
    departure_label: str
    arrival_label: str
    duration_label: str


class DisplayRowSchema(TripSchema):
    is_past: bool = False
    is_next: bool = False


class TripGroupSchema(BaseModel):
    name: str
    rows: list[DisplayRowSchema] = []


class DepartureBoardSchema(BaseModel):
    departure: str
    destination: str
    day_type: Literal["weekday", "saturday", "holiday"]
    day_type_label: str
    now: str
    trips: list[TripSchema] = []
    next_index: int | None = None
    next_trip: TripSchema | None = None
    countdown_minutes: int | None = None
    countdown_label: str | None = None
    window_start: int = 0
    window_end: int = 0
    groups: list[TripGroupSchema] = []
    message: str | None = None


class ReloadResponseSchema(BaseModel):
    stops: int
    route_directions: int
