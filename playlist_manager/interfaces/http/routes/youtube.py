"""Server-side YouTube search; the API key never reaches the client."""

from __future__ import annotations

from flask import Blueprint, jsonify, request
from flask_login import login_required

from ._common import service

youtube_bp = Blueprint("youtube_bp", __name__, url_prefix="/api/youtube")


@youtube_bp.route("/search", methods=["GET"])
@login_required
def search():
    query = request.args.get("q", "")
    results = service("youtube_search").search(query)
    return jsonify({"query": query, "results": [r.to_dict() for r in results]}), 200


__all__ = ["youtube_bp"]
