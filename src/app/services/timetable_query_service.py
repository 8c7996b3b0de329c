from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from src.app.ports.output import ITimetableRepository
from src.domain.algorithms.calendar import day_type_for_date
from src.domain.algorithms.departure_board import build_departure_board
from src.domain.algorithms.stop_index import DEFAULT_SEARCH_LIMIT, StopIndex
from src.domain.algorithms.trip_query import destination_candidates, matching_trips
from src.domain.exceptions import SelectionIncompleteError
from src.domain.models import (
    DepartureBoard,
    DestinationCandidate,
    QueryContext,
    Selection,
    ServiceType,
    StopName,
    TimetableSnapshot,
    TripMatch,
)


@dataclass(frozen=True, slots=True)
class LoadedTimetable:
    snapshot: TimetableSnapshot
    index: StopIndex


@dataclass(slots=True)
class TimetableQueryService:
    """Read-only queries over the built timetable.

    The loaded timetable is never mutated. refresh() builds a new
    LoadedTimetable and replaces the reference in one assignment, so a query
    that already holds the previous one finishes against it.
    """

    timetable_repository: ITimetableRepository
    _loaded: LoadedTimetable | None = None

    def refresh(self) -> LoadedTimetable:
        snapshot = self.timetable_repository.load()
        loaded = LoadedTimetable(
            snapshot=snapshot, index=StopIndex.from_stops(snapshot.stops)
        )
        self._loaded = loaded
        return loaded

    def loaded(self) -> LoadedTimetable:
        loaded = self._loaded
        if loaded is None:
            loaded = self.refresh()
        return loaded

    def search_stops(
        self, query: str = "", *, limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[StopName]:
        return self.loaded().index.search(query, limit=limit)

    def select(self, display_name: str) -> Selection:
        return self.loaded().index.selection_for(display_name)

    def context_for(
        self,
        *,
        departure: str | None,
        destination: str | None = None,
        day_type: ServiceType | None = None,
        today: date | None = None,
    ) -> QueryContext:
        """Build a session context from display names.

        Without an explicit day type, today's weekday decides it.
        """

        ctx = QueryContext(day_type=day_type or day_type_for_date(today or date.today()))
        if departure:
            ctx.select_departure(self.select(departure))
        if destination:
            ctx.select_destination(self.select(destination))
        return ctx

    def destination_candidates(
        self, ctx: QueryContext, *, query: str = "", limit: int = DEFAULT_SEARCH_LIMIT
    ) -> list[DestinationCandidate]:
        if ctx.departure is None:
            raise SelectionIncompleteError("Choose a departure stop first")
        loaded = self.loaded()
        candidates = destination_candidates(
            loaded.snapshot.timetable, loaded.index, ctx.departure
        )
        q = query.strip()
        if q:
            candidates = [c for c in candidates if q in c.display_name]
        return candidates[: max(0, limit)]

    def matching_trips(self, ctx: QueryContext) -> list[TripMatch]:
        if ctx.departure is None or ctx.destination is None:
            raise SelectionIncompleteError(
                "Choose both a departure and a destination stop"
            )
        return matching_trips(
            self.loaded().snapshot.timetable,
            ctx.departure,
            ctx.destination,
            ctx.day_type,
        )

    def departure_board(
        self, ctx: QueryContext, *, now: datetime | time | None = None
    ) -> DepartureBoard:
        """Trips for the context, windowed around now (sampled per call)."""

        trips = self.matching_trips(ctx)
        return build_departure_board(trips, now or datetime.now())
