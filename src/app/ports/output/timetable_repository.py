from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.timetable import TimetableSnapshot


class ITimetableRepository(ABC):
    """Port for the persisted stops/timetable artifacts."""

    @abstractmethod
    def save(self, snapshot: TimetableSnapshot) -> None:
        raise NotImplementedError

    @abstractmethod
    def load(self) -> TimetableSnapshot:
        """Raise TimetableDataUnavailableError when the artifacts are missing."""

        raise NotImplementedError
