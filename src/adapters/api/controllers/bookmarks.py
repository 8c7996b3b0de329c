from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_bookmark_service
from src.adapters.api.schemas.bookmarks import (
    BookmarkSchema,
    BookmarksSchema,
    FavoriteToggleSchema,
)
from src.app.services.bookmark_service import BookmarkService
from src.domain.models import Bookmark, BookmarkKind

router = APIRouter(prefix="/bookmarks", tags=["bookmarks"])


def _to_schema(items: list[Bookmark]) -> list[BookmarkSchema]:
    return [BookmarkSchema(dep=b.dep, dest=b.dest) for b in items]


def _all(service: BookmarkService) -> BookmarksSchema:
    return BookmarksSchema(
        favorites=_to_schema(service.entries(BookmarkKind.FAVORITES)),
        history=_to_schema(service.entries(BookmarkKind.HISTORY)),
    )


@router.get("", response_model=BookmarksSchema)
def list_bookmarks(
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarksSchema:
    return _all(service)


@router.post("/history", response_model=BookmarksSchema)
def add_history(
    req: BookmarkSchema,
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarksSchema:
    service.add_history(dep=req.dep, dest=req.dest)
    return _all(service)


@router.post("/favorites/toggle", response_model=FavoriteToggleSchema)
def toggle_favorite(
    req: BookmarkSchema,
    service: BookmarkService = Depends(get_bookmark_service),
) -> FavoriteToggleSchema:
    starred = service.toggle_favorite(dep=req.dep, dest=req.dest)
    return FavoriteToggleSchema(dep=req.dep, dest=req.dest, is_favorite=starred)


@router.delete("/{kind}/{index}", response_model=BookmarksSchema)
def delete_bookmark(
    kind: BookmarkKind,
    index: int,
    service: BookmarkService = Depends(get_bookmark_service),
) -> BookmarksSchema:
    service.remove(kind, index)
    return _all(service)
