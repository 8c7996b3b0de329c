from __future__ import annotations

from datetime import datetime, time
from typing import Sequence

from src.domain.algorithms.gtfs_time import (
    countdown_minutes,
    format_countdown,
    format_duration,
    format_time,
    time_str,
)
from src.domain.models.query import DepartureBoard, DisplayRow, TripGroup, TripMatch

WINDOW_BEFORE = 2
WINDOW_AFTER = 2
TAIL_SIZE = 4


def next_trip_index(trips: Sequence[TripMatch], now: str) -> int | None:
    """Index of the first trip departing at or after now (HH:MM:SS).

    now never exceeds 23:59:59, so trips departing at 24:00:00 or later are
    always still ahead.
    """

    for i, trip in enumerate(trips):
        if trip.departure >= now:
            return i
    return None


def display_window(count: int, next_index: int | None) -> tuple[int, int]:
    """Half-open [start, end) slice: two before the next trip and two after.

    Without a next trip, the last TAIL_SIZE trips of the day are shown.
    """

    if next_index is None:
        return max(0, count - TAIL_SIZE), count
    return max(0, next_index - WINDOW_BEFORE), min(count, next_index + WINDOW_AFTER + 1)


def group_for_display(rows: Sequence[DisplayRow]) -> tuple[TripGroup, ...]:
    groups: dict[str, list[DisplayRow]] = {}
    for row in rows:
        groups.setdefault(row.trip.group_key, []).append(row)
    return tuple(TripGroup(name=name, rows=tuple(items)) for name, items in groups.items())


def build_departure_board(
    trips: Sequence[TripMatch], now: datetime | time
) -> DepartureBoard:
    now_s = time_str(now)
    trips = tuple(trips)
    next_index = next_trip_index(trips, now_s)
    start, end = display_window(len(trips), next_index)

    rows = [
        DisplayRow(
            trip=trip,
            departure_label=format_time(trip.departure),
            arrival_label=format_time(trip.arrival),
            duration_label=format_duration(trip.departure, trip.arrival),
            is_past=trip.departure < now_s,
            is_next=i == next_index,
        )
        for i, trip in enumerate(trips[start:end], start=start)
    ]

    minutes: int | None = None
    label: str | None = None
    if next_index is not None:
        minutes = countdown_minutes(now, trips[next_index].departure)
        label = format_countdown(minutes)

    return DepartureBoard(
        now=now_s,
        trips=trips,
        next_index=next_index,
        window_start=start,
        window_end=end,
        groups=group_for_display(rows),
        countdown_minutes=minutes,
        countdown_label=label,
    )
