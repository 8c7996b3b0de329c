from __future__ import annotations

from pathlib import Path

import pytest

from src.adapters.persistence.local_gtfs_repository import (
    LocalGtfsRepository,
    parse_coordinate,
)
from src.domain.exceptions import MissingGtfsFileError

GTFS_FILES = {
    "stops.txt": (
        "stop_id,stop_name,stop_lat,stop_lon\n"
        'A,"Alpha, North",35.1,136.9\n'
        "B,Beta,,\n"
    ),
    "routes.txt": "route_id,route_short_name,route_long_name\nR1,1,Alpha Line\n",
    "trips.txt": (
        "route_id,service_id,trip_id,trip_headsign,direction_id\n"
        "R1,WK,T1,for Beta,\n"
        "R1,WK,T2,for Alpha,1\n"
    ),
    "stop_times.txt": (
        "trip_id,arrival_time,departure_time,stop_id,stop_sequence\r\n"
        "T1,08:00:00,08:00:00,A,1\r\n"
        "T1,08:10:00,08:10:00,B,2\r\n"
        "T1,08:20:00,08:20:00,B,x\r\n"
    ),
    "calendar.txt": (
        "service_id,monday,tuesday,wednesday,thursday,friday,saturday,sunday,"
        "start_date,end_date\n"
        "WK,1,1,1,1,1,0,0,20260101,20261231\n"
    ),
}


def _write_feed(base: Path, *, skip: str | None = None) -> Path:
    base.mkdir(parents=True, exist_ok=True)
    for name, text in GTFS_FILES.items():
        if name != skip:
            (base / name).write_text(text, encoding="utf-8")
    return base


def test_load_feed_reads_all_tables(tmp_path: Path) -> None:
    repo = LocalGtfsRepository(base_path=_write_feed(tmp_path / "gtfs"))

    feed = repo.load_feed()

    assert [s.id for s in feed.stops] == ["A", "B"]
    assert feed.stops[0].name == "Alpha, North"
    assert feed.stops[0].location is not None
    assert feed.stops[1].lat is None and feed.stops[1].location is None
    assert feed.routes_by_id["R1"].long_name == "Alpha Line"
    assert feed.trips_by_id["T1"].direction_id == "0"
    assert feed.trips_by_id["T2"].direction_id == "1"
    assert feed.trips_by_id["T1"].headsign == "for Beta"
    assert len(feed.stop_times) == 2
    assert feed.skipped_stop_times == 1
    assert feed.calendar_by_service["WK"].weekday is True
    assert feed.calendar_dates == ()


def test_calendar_dates_are_optional_but_read(tmp_path: Path) -> None:
    base = _write_feed(tmp_path / "gtfs")
    (base / "calendar_dates.txt").write_text(
        "service_id,date,exception_type\nWK,20260105,2\n", encoding="utf-8"
    )

    feed = LocalGtfsRepository(base_path=base).load_feed()

    assert [(d.service_id, d.date, d.exception_type) for d in feed.calendar_dates] == [
        ("WK", "20260105", "2")
    ]


@pytest.mark.parametrize(
    "missing", ["stops.txt", "routes.txt", "trips.txt", "stop_times.txt", "calendar.txt"]
)
def test_missing_required_file_is_fatal(tmp_path: Path, missing: str) -> None:
    repo = LocalGtfsRepository(base_path=_write_feed(tmp_path / "gtfs", skip=missing))

    with pytest.raises(MissingGtfsFileError) as excinfo:
        repo.load_feed()

    assert missing in str(excinfo.value)


def test_gtfs_path_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GTFS_PATH", str(_write_feed(tmp_path / "env-gtfs")))

    feed = LocalGtfsRepository().load_feed()

    assert len(feed.stops) == 2


def test_parse_coordinate() -> None:
    assert parse_coordinate("35.5") == 35.5
    assert parse_coordinate("") is None
    assert parse_coordinate("0") is None
    assert parse_coordinate("n/a") is None
    assert parse_coordinate(None) is None
