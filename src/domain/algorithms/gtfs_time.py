from __future__ import annotations

from datetime import datetime, time

from src.domain.models.timetable import ServiceType

# GTFS times are zero-padded HH:MM:SS and may run past 24:00:00, so plain
# string comparison orders them chronologically within one service day.
# The helpers below are only for arithmetic and display, never for sorting.

UNKNOWN_DURATION = "--"
UNKNOWN_TIME = "--"
NEXT_DAY_MARKER = " (翌)"

_DAY_TYPE_LABELS = {
    ServiceType.WEEKDAY: "平日",
    ServiceType.SATURDAY: "土曜",
    ServiceType.HOLIDAY: "休日",
}


def to_minutes(raw: str) -> int:
    """Minutes since service-day midnight; seconds are dropped.

    No modulo is applied: "25:30:00" -> 1530.
    """

    parts = raw.strip().split(":")
    return int(parts[0]) * 60 + int(parts[1])


def time_str(now: datetime | time) -> str:
    return now.strftime("%H:%M:%S")


def duration_minutes(dep: str, arr: str) -> int | None:
    # Non-timepoint stops carry empty times.
    if not dep.strip() or not arr.strip():
        return None
    diff = to_minutes(arr) - to_minutes(dep)
    if diff <= 0:
        return None
    return diff


def format_duration(dep: str, arr: str) -> str:
    diff = duration_minutes(dep, arr)
    if diff is None:
        return UNKNOWN_DURATION
    if diff >= 60:
        return f"{diff // 60}時間{diff % 60}分"
    return f"{diff}分"


def countdown_minutes(now: datetime | time, dep: str) -> int:
    """Whole minutes from now (hour/minute only) until dep."""

    return to_minutes(dep) - (now.hour * 60 + now.minute)


def format_countdown(minutes: int) -> str:
    if minutes <= 0:
        return "まもなく出発"
    if minutes == 1:
        return "あと1分"
    return f"あと{minutes}分"


def format_time(raw: str) -> str:
    """Display form: hours past 24 wrap and get a next-day marker."""

    if not raw.strip():
        return UNKNOWN_TIME
    parts = raw.strip().split(":")
    hour = int(parts[0])
    minute = parts[1] if len(parts) > 1 else "00"
    if hour >= 24:
        return f"{hour - 24}:{minute}{NEXT_DAY_MARKER}"
    return f"{hour}:{minute}"


def day_type_label(day_type: ServiceType) -> str:
    return _DAY_TYPE_LABELS.get(day_type, "")


def parse_clock_time(raw: str) -> time:
    """Parse a caller supplied wall-clock time (HH:MM or HH:MM:SS)."""

    value = raw.strip()
    try:
        return time.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Invalid clock time: {raw!r}") from exc
