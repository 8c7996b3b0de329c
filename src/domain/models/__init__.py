from .bookmark import Bookmark, BookmarkKind
from .gtfs import CalendarDate, CalendarEntry, GtfsFeed, GtfsRoute, StopTimeRecord, TripRef
from .query import (
    DepartureBoard,
    DestinationCandidate,
    DisplayRow,
    StopName,
    TripGroup,
    TripMatch,
)
from .selection import QueryContext, Selection
from .stop import GeoPoint, Stop
from .timetable import (
    RouteDirection,
    RouteDirectionKey,
    ScheduledTrip,
    ServiceType,
    Timetable,
    TimetableSnapshot,
    TimetableStopTime,
)

__all__ = [
    "Bookmark",
    "BookmarkKind",
    "CalendarDate",
    "CalendarEntry",
    "DepartureBoard",
    "DestinationCandidate",
    "DisplayRow",
    "GeoPoint",
    "GtfsFeed",
    "GtfsRoute",
    "QueryContext",
    "RouteDirection",
    "RouteDirectionKey",
    "ScheduledTrip",
    "Selection",
    "ServiceType",
    "Stop",
    "StopName",
    "StopTimeRecord",
    "Timetable",
    "TimetableSnapshot",
    "TimetableStopTime",
    "TripGroup",
    "TripMatch",
    "TripRef",
]
