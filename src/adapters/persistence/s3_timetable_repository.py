from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any

from botocore.exceptions import ClientError

from src.adapters.aws import s3_client
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


@dataclass(slots=True)
class S3TimetableRepository(ITimetableRepository):
    """Stores stops.json and timetable.json in S3.

    Env vars:
      - TIMETABLE_BUCKET (required)
      - TIMETABLE_PREFIX (default: timetable)
      - ENDPOINT_URL (preferred for LocalStack)
      - AWS_REGION
    """

    bucket: str | None = None
    prefix: str | None = None

    def _bucket(self) -> str:
        value = self.bucket or os.getenv("TIMETABLE_BUCKET")
        if not value:
            raise RuntimeError("Missing TIMETABLE_BUCKET")
        return value

    def _key(self, name: str) -> str:
        prefix = (self.prefix or os.getenv("TIMETABLE_PREFIX") or "timetable").strip("/")
        return f"{prefix}/{name}"

    def save(self, snapshot: TimetableSnapshot) -> None:
        s3 = s3_client()
        bucket = self._bucket()
        # Timetable last: a reader finding it can rely on stops being present.
        for name, payload in (
            (STOPS_FILE, stops_to_json(snapshot.stops)),
            (TIMETABLE_FILE, timetable_to_json(snapshot.timetable)),
        ):
            s3.put_object(
                Bucket=bucket,
                Key=self._key(name),
                Body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
                ContentType="application/json",
            )
        logger.info(
            "Uploaded timetable artifacts to s3://%s/%s", bucket, self._key("")
        )

    def _get_json(self, name: str) -> Any:
        s3 = s3_client()
        bucket = self._bucket()
        key = self._key(name)
        try:
            obj = s3.get_object(Bucket=bucket, Key=key)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "")
            raise TimetableDataUnavailableError(
                f"Cannot read s3://{bucket}/{key} ({code or exc})"
            ) from exc
        try:
            return json.loads(obj["Body"].read().decode("utf-8"))
        except ValueError as exc:
            raise TimetableDataUnavailableError(
                f"Unreadable s3://{bucket}/{key}: {exc}"
            ) from exc

    def load(self) -> TimetableSnapshot:
        stops_raw = self._get_json(STOPS_FILE)
        timetable_raw = self._get_json(TIMETABLE_FILE)
        try:
            return snapshot_from_json(stops_raw, timetable_raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise TimetableDataUnavailableError(
                f"Malformed timetable data in s3://{self._bucket()}: {exc}"
            ) from exc
