from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path

from src.app.ports.output import IGtfsRepository
from src.domain.algorithms.calendar import calendar_dates_from_rows, classify_calendar
from src.domain.algorithms.csv_reader import parse_csv
from src.domain.exceptions import MissingGtfsFileError
from src.domain.models import Stop
from src.domain.models.gtfs import GtfsFeed, GtfsRoute, StopTimeRecord, TripRef

logger = logging.getLogger(__name__)

REQUIRED_FILES = ("stops.txt", "routes.txt", "trips.txt", "stop_times.txt", "calendar.txt")
OPTIONAL_CALENDAR_DATES = "calendar_dates.txt"


def parse_coordinate(raw: str | None) -> float | None:
    """Float coordinate, or None when empty, unparseable or zero."""

    try:
        value = float((raw or "").strip())
    except ValueError:
        return None
    if value == 0.0 or math.isnan(value):
        return None
    return value


@dataclass(slots=True)
class LocalGtfsRepository(IGtfsRepository):
    """Loads a GTFS feed from a directory of .txt files.

    Env vars:
      - GTFS_PATH: directory containing stops.txt, routes.txt, trips.txt,
        stop_times.txt, calendar.txt and optionally calendar_dates.txt
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("GTFS_PATH") or "data/gtfs"
        return Path(value)

    def _read(self, name: str, *, required: bool = True) -> list[dict[str, str]]:
        path = self._base() / name
        if not path.exists():
            if required:
                raise MissingGtfsFileError(str(path))
            return []
        return parse_csv(path.read_text(encoding="utf-8"))

    def load_feed(self) -> GtfsFeed:
        base = self._base()
        # Fail before reading anything if a required table is absent.
        for name in REQUIRED_FILES:
            if not (base / name).exists():
                raise MissingGtfsFileError(str(base / name))

        stops = tuple(
            Stop(
                id=row.get("stop_id", ""),
                name=row.get("stop_name", ""),
                lat=parse_coordinate(row.get("stop_lat")),
                lon=parse_coordinate(row.get("stop_lon")),
            )
            for row in self._read("stops.txt")
        )

        routes_by_id: dict[str, GtfsRoute] = {}
        for row in self._read("routes.txt"):
            route_id = row.get("route_id", "")
            routes_by_id[route_id] = GtfsRoute(
                route_id=route_id,
                short_name=row.get("route_short_name", ""),
                long_name=row.get("route_long_name", ""),
            )

        trips_by_id: dict[str, TripRef] = {}
        for row in self._read("trips.txt"):
            trip_id = row.get("trip_id", "")
            trips_by_id[trip_id] = TripRef(
                trip_id=trip_id,
                route_id=row.get("route_id", ""),
                service_id=row.get("service_id", ""),
                direction_id=row.get("direction_id") or "0",
                headsign=row.get("trip_headsign", ""),
            )

        stop_times: list[StopTimeRecord] = []
        skipped = 0
        for row in self._read("stop_times.txt"):
            try:
                seq = int(row.get("stop_sequence", ""))
            except ValueError:
                skipped += 1
                continue
            stop_times.append(
                StopTimeRecord(
                    trip_id=row.get("trip_id", ""),
                    stop_id=row.get("stop_id", ""),
                    arrival=row.get("arrival_time", ""),
                    departure=row.get("departure_time", ""),
                    sequence=seq,
                )
            )

        calendar_by_service = classify_calendar(self._read("calendar.txt"))
        calendar_dates = calendar_dates_from_rows(
            self._read(OPTIONAL_CALENDAR_DATES, required=False)
        )

        logger.info(
            "Loaded GTFS from %s: %d stops, %d routes, %d trips, %d stop_times, "
            "%d calendar entries, %d calendar date exceptions",
            base,
            len(stops),
            len(routes_by_id),
            len(trips_by_id),
            len(stop_times),
            len(calendar_by_service),
            len(calendar_dates),
        )
        if skipped:
            logger.info("Skipped %d stop_times with invalid stop_sequence", skipped)

        return GtfsFeed(
            stops=stops,
            routes_by_id=routes_by_id,
            trips_by_id=trips_by_id,
            stop_times=tuple(stop_times),
            calendar_by_service=calendar_by_service,
            calendar_dates=calendar_dates,
            skipped_stop_times=skipped,
        )
