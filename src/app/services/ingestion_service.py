from __future__ import annotations

import logging
from dataclasses import dataclass

from src.app.ports.output import IGtfsRepository, ITimetableRepository
from src.domain.algorithms.timetable_builder import build_timetable
from src.domain.models.timetable import TimetableSnapshot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class IngestionService:
    """Builds the timetable from a GTFS feed and persists both artifacts.

    Nothing is written unless the whole feed was read and indexed.
    """

    gtfs_repository: IGtfsRepository
    timetable_repository: ITimetableRepository

    def build(self) -> TimetableSnapshot:
        feed = self.gtfs_repository.load_feed()
        timetable = build_timetable(feed)

        if feed.calendar_dates:
            logger.info(
                "Read %d calendar_dates exceptions; they are not applied to "
                "service-day classification",
                len(feed.calendar_dates),
            )
        trip_count = sum(len(d.trips) for d in timetable)
        logger.info(
            "Built %d route directions with %d trips", len(timetable), trip_count
        )
        return TimetableSnapshot(stops=feed.stops, timetable=timetable)

    def run(self) -> TimetableSnapshot:
        snapshot = self.build()
        self.timetable_repository.save(snapshot)
        return snapshot
