from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from src.adapters.persistence.timetable_codec import (
    STOPS_FILE,
    TIMETABLE_FILE,
    snapshot_from_json,
    stops_to_json,
    timetable_to_json,
)
from src.app.ports.output import ITimetableRepository
from src.domain.exceptions import TimetableDataUnavailableError
from src.domain.models.timetable import TimetableSnapshot

logger = logging.getLogger(__name__)


def _atomic_write_json(path: Path, payload: Any) -> None:
    # Write next to the target and rename so readers never see a partial file.
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fp:
            json.dump(payload, fp, ensure_ascii=False, indent=2)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise


@dataclass(slots=True)
class LocalTimetableRepository(ITimetableRepository):
    """Stores stops.json and timetable.json in a local directory.

    Env vars:
      - TIMETABLE_DATA_PATH: output/input directory (default: data)
    """

    base_path: str | Path | None = None

    def _base(self) -> Path:
        value = self.base_path or os.getenv("TIMETABLE_DATA_PATH") or "data"
        return Path(value)

    def save(self, snapshot: TimetableSnapshot) -> None:
        base = self._base()
        base.mkdir(parents=True, exist_ok=True)
        _atomic_write_json(base / STOPS_FILE, stops_to_json(snapshot.stops))
        _atomic_write_json(base / TIMETABLE_FILE, timetable_to_json(snapshot.timetable))
        logger.info(
            "Wrote %s (%d stops) and %s (%d route directions)",
            base / STOPS_FILE,
            len(snapshot.stops),
            base / TIMETABLE_FILE,
            len(snapshot.timetable),
        )

    def load(self) -> TimetableSnapshot:
        base = self._base()
        try:
            stops_raw = json.loads((base / STOPS_FILE).read_text(encoding="utf-8"))
            timetable_raw = json.loads(
                (base / TIMETABLE_FILE).read_text(encoding="utf-8")
            )
        except FileNotFoundError as exc:
            raise TimetableDataUnavailableError(f"Not found: {exc.filename}") from exc
        except (OSError, ValueError) as exc:
            raise TimetableDataUnavailableError(
                f"Unreadable timetable data in {base}: {exc}"
            ) from exc

        try:
            return snapshot_from_json(stops_raw, timetable_raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise TimetableDataUnavailableError(
                f"Malformed timetable data in {base}: {exc}"
            ) from exc
