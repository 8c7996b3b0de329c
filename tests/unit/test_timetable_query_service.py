from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time

import pytest

from src.app.services.timetable_query_service import TimetableQueryService
from src.domain.algorithms.timetable_builder import build_timetable
from src.domain.exceptions import SelectionIncompleteError, UnknownStopError
from src.domain.models import QueryContext, ServiceType, TimetableSnapshot


@dataclass(slots=True)
class FakeTimetableRepository:
    snapshots: list[TimetableSnapshot]
    loads: int = 0
    saved: list[TimetableSnapshot] = field(default_factory=list)

    def load(self) -> TimetableSnapshot:
        snapshot = self.snapshots[min(self.loads, len(self.snapshots) - 1)]
        self.loads += 1
        return snapshot

    def save(self, snapshot: TimetableSnapshot) -> None:
        self.saved.append(snapshot)


def _service(feed) -> tuple[TimetableQueryService, FakeTimetableRepository]:
    snapshot = TimetableSnapshot(stops=feed.stops, timetable=build_timetable(feed))
    repo = FakeTimetableRepository(snapshots=[snapshot])
    return TimetableQueryService(timetable_repository=repo), repo


def test_loads_lazily_once(sample_feed) -> None:
    service, repo = _service(sample_feed)

    service.search_stops("Al")
    service.search_stops("Be")

    assert repo.loads == 1


def test_refresh_swaps_to_new_snapshot(sample_feed) -> None:
    service, repo = _service(sample_feed)
    empty = TimetableSnapshot(stops=(), timetable=build_timetable(sample_feed))
    repo.snapshots.append(empty)

    before = service.loaded()
    after = service.refresh()

    assert before is not after
    assert before.snapshot.stops == sample_feed.stops
    assert after.snapshot.stops == ()
    assert service.loaded() is after


def test_context_defaults_day_type_from_date(sample_feed) -> None:
    service, _ = _service(sample_feed)

    ctx = service.context_for(departure="Alpha", today=date(2026, 10, 17))

    assert ctx.day_type is ServiceType.SATURDAY
    assert ctx.departure is not None and ctx.departure.primary_id == "A"
    assert ctx.destination is None


def test_selecting_departure_clears_destination(sample_feed) -> None:
    service, _ = _service(sample_feed)
    ctx = service.context_for(
        departure="Alpha", destination="Central", day_type=ServiceType.WEEKDAY
    )

    ctx.select_departure(service.select("Beta"))

    assert ctx.destination is None
    assert not ctx.is_complete
    ctx.reset()
    assert ctx.departure is None


def test_board_for_complete_selection(sample_feed) -> None:
    service, _ = _service(sample_feed)
    ctx = service.context_for(
        departure="Alpha", destination="Central", day_type=ServiceType.WEEKDAY
    )

    board = service.departure_board(ctx, now=time(7, 45))

    assert [t.departure for t in board.trips] == ["07:30:00", "08:00:00"]
    assert board.next_index == 1
    assert board.countdown_label == "あと15分"


def test_incomplete_selection_is_not_an_empty_result(sample_feed) -> None:
    service, _ = _service(sample_feed)

    with pytest.raises(SelectionIncompleteError):
        service.departure_board(QueryContext(), now=time(8, 0))
    with pytest.raises(SelectionIncompleteError):
        service.destination_candidates(QueryContext())


def test_unknown_stop_name(sample_feed) -> None:
    service, _ = _service(sample_feed)

    with pytest.raises(UnknownStopError):
        service.context_for(departure="Nowhere")


def test_destination_candidates_filter(sample_feed) -> None:
    service, _ = _service(sample_feed)
    ctx = service.context_for(departure="Beta", day_type=ServiceType.WEEKDAY)

    names = [c.display_name for c in service.destination_candidates(ctx, query="De")]

    assert names == ["Delta"]
