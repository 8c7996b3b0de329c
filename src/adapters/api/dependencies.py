from __future__ import annotations

import hmac
import os
from functools import lru_cache

from fastapi import Header, HTTPException

from src.adapters.persistence.dynamodb_bookmark_store import DynamoDbBookmarkStore
from src.adapters.persistence.local_timetable_repository import LocalTimetableRepository
from src.adapters.persistence.memory_bookmark_store import InMemoryBookmarkStore
from src.adapters.persistence.s3_timetable_repository import S3TimetableRepository
from src.app.ports.output import IBookmarkStore, ITimetableRepository
from src.app.services.bookmark_service import BookmarkService
from src.app.services.timetable_query_service import TimetableQueryService


def get_timetable_repository() -> ITimetableRepository:
    store = (os.getenv("TIMETABLE_STORE") or "local").strip().lower()
    if store == "s3":
        return S3TimetableRepository()
    if store != "local":
        raise RuntimeError(f"Unsupported TIMETABLE_STORE: {store}")
    return LocalTimetableRepository()


# One service per process: it holds the loaded timetable between requests.
@lru_cache(maxsize=1)
def get_timetable_query_service() -> TimetableQueryService:
    return TimetableQueryService(timetable_repository=get_timetable_repository())


@lru_cache(maxsize=1)
def _bookmark_store() -> IBookmarkStore:
    store = (os.getenv("BOOKMARK_STORE") or "").strip().lower()
    if store == "dynamodb" or (not store and os.getenv("BOOKMARK_TABLE")):
        return DynamoDbBookmarkStore()
    return InMemoryBookmarkStore()


def get_bookmark_service() -> BookmarkService:
    return BookmarkService(store=_bookmark_store())


def require_admin_token(
    x_admin_token: str | None = Header(default=None),
) -> None:
    """Guard for admin routes.

    Env vars:
      - TIMETABLE_ADMIN_TOKEN: when set, admin requests must send it in the
        X-Admin-Token header; when unset, admin routes are open (local use)
    """

    expected = (os.getenv("TIMETABLE_ADMIN_TOKEN") or "").strip()
    if not expected:
        return
    if x_admin_token is None or not hmac.compare_digest(
        x_admin_token.encode("utf-8"), expected.encode("utf-8")
    ):
        raise HTTPException(status_code=403, detail="Invalid admin token")
