from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.gtfs import GtfsFeed


class IGtfsRepository(ABC):
    """Port for reading the raw GTFS tables of a static feed."""

    @abstractmethod
    def load_feed(self) -> GtfsFeed:
        raise NotImplementedError
