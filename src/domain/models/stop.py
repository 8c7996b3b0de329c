from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")


@dataclass(frozen=True, slots=True)
class Stop:
    """A stops.txt record. Coordinates are display-only and may be absent."""

    id: str
    name: str
    lat: float | None = None
    lon: float | None = None

    @property
    def location(self) -> GeoPoint | None:
        # Feeds carry junk coordinates; a stop outside the globe has no location.
        if self.lat is None or self.lon is None:
            return None
        try:
            return GeoPoint(lat=self.lat, lon=self.lon)
        except ValueError:
            return None
