"""Playlist and playlist-item operations on the caller's user record."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from playlist_manager.database import UserStore
from playlist_manager.errors import BadRequest, NotFound
from playlist_manager.models import Playlist, PlaylistItem, User, coerce_rating
from playlist_manager.observability.metrics import record_playlist_mutation
from playlist_manager.support.identity import Identity
from playlist_manager.utils.ids import timestamp_id, utc_now_iso

logger = logging.getLogger(__name__)

# Assigned by the server; never taken from the client payload
_RESERVED_ITEM_KEYS = {"itemId", "item_id", "rating"}


def _require_playlist(user: User, playlist_id: str) -> Playlist:
    playlist = user.find_playlist(playlist_id)
    if playlist is None:
        raise NotFound("Playlist not found")
    return playlist


class PlaylistService:
    def __init__(self, store: UserStore) -> None:
        self.store = store

    def _owner(self, identity: Identity) -> User:
        user = self.store.get(identity.username)
        if user is None:
            raise NotFound("User not found")
        return user

    def list(self, identity: Identity) -> List[Playlist]:
        return list(self._owner(identity).playlists)

    def get(self, identity: Identity, playlist_id: str) -> Playlist:
        return _require_playlist(self._owner(identity), playlist_id)

    def create(self, identity: Identity, name: Any) -> Playlist:
        name = "" if name is None else str(name).strip()
        if not name:
            raise BadRequest("Missing name")

        with self.store.mutate(identity.username) as user:
            playlist = Playlist(
                id=timestamp_id("pl", {pl.id for pl in user.playlists}),
                name=name,
                created_at=utc_now_iso(),
                items=[],
            )
            user.playlists.append(playlist)

        record_playlist_mutation("create")
        logger.info("User %s created playlist %s (%s)", identity.username, playlist.id, name)
        return playlist

    def remove(self, identity: Identity, playlist_id: str) -> None:
        with self.store.mutate(identity.username) as user:
            before = len(user.playlists)
            user.playlists = [pl for pl in user.playlists if pl.id != playlist_id]
            removed = before != len(user.playlists)

        record_playlist_mutation("remove")
        if removed:
            logger.info("User %s removed playlist %s", identity.username, playlist_id)

    def add_item(self, identity: Identity, playlist_id: str, payload: Dict[str, Any]) -> PlaylistItem:
        if not isinstance(payload, dict):
            raise BadRequest("Item payload must be an object")

        fields = {key: value for key, value in payload.items() if key not in _RESERVED_ITEM_KEYS}
        with self.store.mutate(identity.username) as user:
            playlist = _require_playlist(user, playlist_id)
            item = PlaylistItem.model_validate(
                {
                    **fields,
                    "itemId": timestamp_id("it", {it.item_id for it in playlist.items}),
                    "rating": 0,
                }
            )
            playlist.items.append(item)

        record_playlist_mutation("add_item")
        logger.info(
            "User %s added %s item %s to %s",
            identity.username, getattr(item, "type", None) or "untyped", item.item_id, playlist_id,
        )
        return item

    def rate(self, identity: Identity, playlist_id: str, item_id: str, rating: Any) -> PlaylistItem:
        value = coerce_rating(rating)
        with self.store.mutate(identity.username) as user:
            playlist = _require_playlist(user, playlist_id)
            item = playlist.find_item(item_id)
            if item is None:
                raise NotFound("Item not found")
            item.rating = value

        record_playlist_mutation("rate")
        return item

    def remove_item(self, identity: Identity, playlist_id: str, item_id: str) -> None:
        with self.store.mutate(identity.username) as user:
            playlist = _require_playlist(user, playlist_id)
            playlist.items = [it for it in playlist.items if it.item_id != item_id]

        record_playlist_mutation("remove_item")


__all__ = ["PlaylistService"]
