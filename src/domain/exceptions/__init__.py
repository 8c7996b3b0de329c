from .timetable import (
    IngestionError,
    MissingGtfsFileError,
    SelectionIncompleteError,
    TimetableDataUnavailableError,
    TimetableError,
    UnknownStopError,
)

__all__ = [
    "IngestionError",
    "MissingGtfsFileError",
    "SelectionIncompleteError",
    "TimetableDataUnavailableError",
    "TimetableError",
    "UnknownStopError",
]
