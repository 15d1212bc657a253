"""Playlist CRUD routes scoped to the logged-in user."""

from __future__ import annotations

from flask import Blueprint, jsonify
from flask_login import login_required

from playlist_manager.support.identity import require_identity

from ._common import json_body, service

playlist_bp = Blueprint("playlist_bp", __name__, url_prefix="/api/playlists")


def _playlists():
    return service("playlist_service")


@playlist_bp.route("", methods=["GET"])
@login_required
def list_playlists():
    playlists = _playlists().list(require_identity())
    return jsonify({"playlists": [pl.to_dict() for pl in playlists]}), 200


@playlist_bp.route("", methods=["POST"])
@login_required
def create_playlist():
    payload = json_body()
    playlist = _playlists().create(require_identity(), payload.get("name"))
    return jsonify({"playlist": playlist.to_dict()}), 200


@playlist_bp.route("/<playlist_id>", methods=["GET"])
@login_required
def get_playlist(playlist_id: str):
    playlist = _playlists().get(require_identity(), playlist_id)
    return jsonify({"playlist": playlist.to_dict()}), 200


@playlist_bp.route("/<playlist_id>", methods=["DELETE"])
@login_required
def delete_playlist(playlist_id: str):
    _playlists().remove(require_identity(), playlist_id)
    return jsonify({"ok": True}), 200


@playlist_bp.route("/<playlist_id>/items", methods=["POST"])
@login_required
def add_item(playlist_id: str):
    item = _playlists().add_item(require_identity(), playlist_id, json_body())
    return jsonify({"item": item.to_dict()}), 200


@playlist_bp.route("/<playlist_id>/items/<item_id>", methods=["PATCH"])
@login_required
def rate_item(playlist_id: str, item_id: str):
    payload = json_body()
    _playlists().rate(require_identity(), playlist_id, item_id, payload.get("rating"))
    return jsonify({"ok": True}), 200


@playlist_bp.route("/<playlist_id>/items/<item_id>", methods=["DELETE"])
@login_required
def remove_item(playlist_id: str, item_id: str):
    _playlists().remove_item(require_identity(), playlist_id, item_id)
    return jsonify({"ok": True}), 200


__all__ = ["playlist_bp"]
