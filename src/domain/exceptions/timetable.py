from __future__ import annotations


class TimetableError(Exception):
    """Base exception for timetable ingestion and queries."""


class IngestionError(TimetableError):
    """Raised when the timetable cannot be built from the GTFS feed."""


class MissingGtfsFileError(IngestionError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Required GTFS file not found: {path}")
        self.path = path


class TimetableDataUnavailableError(TimetableError):
    """Raised when the built artifacts are absent or unreadable."""

    def __init__(self, detail: str) -> None:
        super().__init__(
            f"{detail}. Timetable data is missing; run the ingestion "
            "(python -m src.ingest) to generate stops.json and timetable.json."
        )


class UnknownStopError(TimetableError):
    def __init__(self, display_name: str) -> None:
        super().__init__(f"No stop named {display_name!r}")
        self.display_name = display_name


class SelectionIncompleteError(TimetableError):
    """Raised when a query needs both a departure and a destination."""
