#!/usr/bin/env python
"""
Pydantic records mirroring the persisted user document.

Field names follow Python conventions; aliases keep the camelCase keys the
JSON document and the HTTP API use. Unknown keys are preserved so a manual
edit of the document survives the next rewrite.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


MIN_RATING = 0
MAX_RATING = 10


def _parse_number(value: Any) -> float:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if value is None:
        return 0
    text = str(value).strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return 0


def coerce_rating(value: Any) -> int:
    """Numeric value of ``value`` truncated to an int in 0..10; junk becomes 0."""
    number = _parse_number(value)
    # ints of any size clamp directly; float() on them can overflow
    if isinstance(number, float):
        if not math.isfinite(number):
            return MIN_RATING
        number = int(number)
    return max(MIN_RATING, min(MAX_RATING, number))


class PlaylistItem(_Record):
    """A playable reference: a YouTube video or an uploaded MP3."""

    item_id: str = Field(alias="itemId")
    # "type" ("youtube" or "mp3") and the rest ride along as extra fields
    rating: int = 0

    @field_validator("rating", mode="before")
    @classmethod
    def _coerce_rating(cls, value: Any) -> int:
        return coerce_rating(value)


class Playlist(_Record):
    id: str
    name: str
    created_at: str = Field(alias="createdAt")
    items: List[PlaylistItem] = Field(default_factory=list)

    def find_item(self, item_id: str) -> Optional[PlaylistItem]:
        return next((item for item in self.items if item.item_id == item_id), None)


class PublicUser(BaseModel):
    """What the session and the API expose about an account."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    first_name: str = Field(alias="firstName")
    image_url: str = Field(alias="imageUrl")

    def to_dict(self) -> dict:
        return self.model_dump(by_alias=True)


class User(_Record):
    username: str
    password_hash: str = Field(alias="passwordHash")
    first_name: str = Field(alias="firstName")
    image_url: str = Field(alias="imageUrl")
    playlists: List[Playlist] = Field(default_factory=list)

    def find_playlist(self, playlist_id: str) -> Optional[Playlist]:
        return next((pl for pl in self.playlists if pl.id == playlist_id), None)

    def public(self) -> PublicUser:
        return PublicUser(
            username=self.username,
            first_name=self.first_name,
            image_url=self.image_url,
        )


__all__ = ["PlaylistItem", "Playlist", "PublicUser", "User", "coerce_rating", "MIN_RATING", "MAX_RATING"]
