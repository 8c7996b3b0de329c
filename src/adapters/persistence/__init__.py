from .dynamodb_bookmark_store import DynamoDbBookmarkStore
from .local_gtfs_repository import LocalGtfsRepository
from .local_timetable_repository import LocalTimetableRepository
from .memory_bookmark_store import InMemoryBookmarkStore
from .s3_timetable_repository import S3TimetableRepository

__all__ = [
    "DynamoDbBookmarkStore",
    "InMemoryBookmarkStore",
    "LocalGtfsRepository",
    "LocalTimetableRepository",
    "S3TimetableRepository",
]
