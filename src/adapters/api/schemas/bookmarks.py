from __future__ import annotations

from pydantic import BaseModel, Field


class BookmarkSchema(BaseModel):
    dep: str = Field(..., min_length=1)
    dest: str = Field(..., min_length=1)


class BookmarksSchema(BaseModel):
    favorites: list[BookmarkSchema] = []
    history: list[BookmarkSchema] = []


class FavoriteToggleSchema(BaseModel):
    dep: str
    dest: str
    is_favorite: bool
