from __future__ import annotations

from datetime import date
from typing import Iterable, Mapping

from src.domain.models.gtfs import CalendarDate, CalendarEntry
from src.domain.models.timetable import ServiceType

_WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday")


def _flag(row: Mapping[str, str], name: str) -> bool:
    return (row.get(name) or "") == "1"


def calendar_entry_from_row(row: Mapping[str, str]) -> CalendarEntry:
    return CalendarEntry(
        service_id=row.get("service_id") or "",
        weekday=all(_flag(row, d) for d in _WEEKDAYS),
        saturday=_flag(row, "saturday"),
        sunday=_flag(row, "sunday"),
        start_date=row.get("start_date") or "",
        end_date=row.get("end_date") or "",
    )


def classify_calendar(rows: Iterable[Mapping[str, str]]) -> dict[str, CalendarEntry]:
    """Map service_id -> weekly flags. A repeated service_id keeps the last row."""

    out: dict[str, CalendarEntry] = {}
    for row in rows:
        entry = calendar_entry_from_row(row)
        out[entry.service_id] = entry
    return out


def calendar_dates_from_rows(rows: Iterable[Mapping[str, str]]) -> tuple[CalendarDate, ...]:
    return tuple(
        CalendarDate(
            service_id=row.get("service_id") or "",
            date=row.get("date") or "",
            exception_type=row.get("exception_type") or "",
        )
        for row in rows
    )


def service_type_for(
    service_id: str, calendar_by_service: Mapping[str, CalendarEntry]
) -> ServiceType:
    """Sunday service wins over Saturday, which wins over weekday.

    calendar_dates exceptions are not taken into account.
    """

    entry = calendar_by_service.get(service_id)
    if entry is None:
        return ServiceType.WEEKDAY
    if entry.sunday:
        return ServiceType.HOLIDAY
    if entry.saturday:
        return ServiceType.SATURDAY
    return ServiceType.WEEKDAY


def day_type_for_date(day: date) -> ServiceType:
    weekday = day.weekday()
    if weekday == 6:
        return ServiceType.HOLIDAY
    if weekday == 5:
        return ServiceType.SATURDAY
    return ServiceType.WEEKDAY
