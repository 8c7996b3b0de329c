from __future__ import annotations

from uuid import uuid4

import pytest

from src.adapters.persistence.dynamodb_bookmark_store import DynamoDbBookmarkStore
from src.adapters.persistence.s3_timetable_repository import S3TimetableRepository
from src.app.services.bookmark_service import BookmarkService
from src.domain.exceptions import TimetableDataUnavailableError
from src.domain.models import (
    BookmarkKind,
    RouteDirection,
    RouteDirectionKey,
    ScheduledTrip,
    ServiceType,
    Stop,
    Timetable,
    TimetableSnapshot,
    TimetableStopTime,
)


def _snapshot() -> TimetableSnapshot:
    key = RouteDirectionKey(route_id="R1", direction_id="0")
    direction = RouteDirection(
        key=key,
        route_name="1",
        route_long_name="Alpha Line",
        headsign="for Central",
        stops=("A", "S1"),
        trips=(
            ScheduledTrip(
                service_type=ServiceType.WEEKDAY,
                times=(
                    TimetableStopTime(stop_id="A", arr="24:10:00", dep="24:10:00"),
                    TimetableStopTime(stop_id="S1", arr="24:25:00", dep="24:25:00"),
                ),
            ),
        ),
    )
    return TimetableSnapshot(
        stops=(
            Stop(id="A", name="Alpha", lat=35.17, lon=136.88),
            Stop(id="S1", name="Central"),
        ),
        timetable=Timetable({key: direction}),
    )


@pytest.mark.integration
def test_s3_timetable_repository_save_and_load(artifact_bucket: str) -> None:
    repo = S3TimetableRepository(
        bucket=artifact_bucket, prefix=f"timetable-test-{uuid4()}"
    )
    snapshot = _snapshot()
    repo.save(snapshot)

    assert repo.load() == snapshot


@pytest.mark.integration
def test_s3_timetable_repository_missing_prefix(artifact_bucket: str) -> None:
    repo = S3TimetableRepository(bucket=artifact_bucket, prefix=f"missing-{uuid4()}")
    with pytest.raises(TimetableDataUnavailableError):
        repo.load()


@pytest.mark.integration
def test_dynamodb_bookmark_store_put_and_get(bookmark_table: str) -> None:
    store = DynamoDbBookmarkStore(table_name=bookmark_table, owner=f"test-{uuid4()}")
    assert store.get("history") == []

    service = BookmarkService(store=store)
    service.add_history(dep="名古屋駅", dest="栄")
    assert service.toggle_favorite(dep="名古屋駅", dest="栄") is True

    assert store.get("history") == [{"dep": "名古屋駅", "dest": "栄"}]
    assert service.is_favorite(dep="名古屋駅", dest="栄")
    assert [b.dest for b in service.entries(BookmarkKind.FAVORITES)] == ["栄"]
