"""MP3 upload endpoint and static serving of stored uploads."""

from __future__ import annotations

from flask import Blueprint, jsonify, request, send_from_directory
from flask_login import login_required

from ._common import service

upload_bp = Blueprint("upload_bp", __name__)


@upload_bp.route("/api/playlists/upload/mp3", methods=["POST"])
@login_required
def upload_mp3():
    handler = service("upload_handler")
    result = handler.save(handler.select(request.files))
    return jsonify(result), 200


def serve_upload(filename: str):
    return send_from_directory(service("upload_handler").uploads_dir, filename)


def register_upload_serving(app, url_prefix: str) -> None:
    """Expose stored uploads under ``url_prefix``."""
    app.add_url_rule(
        f"{url_prefix.rstrip('/')}/<path:filename>",
        endpoint="serve_upload",
        view_func=serve_upload,
        methods=["GET"],
    )


__all__ = ["upload_bp", "register_upload_serving", "serve_upload"]
