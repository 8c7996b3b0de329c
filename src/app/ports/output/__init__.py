from .bookmark_store import IBookmarkStore
from .gtfs_repository import IGtfsRepository
from .timetable_repository import ITimetableRepository

__all__ = [
    "IBookmarkStore",
    "IGtfsRepository",
    "ITimetableRepository",
]
