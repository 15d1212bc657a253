from __future__ import annotations

import os

from flask import Blueprint, current_app, jsonify

health_bp = Blueprint("health_bp", __name__)


@health_bp.route("/healthz")
def healthz():
    status = 200
    checks = {}

    try:
        current_app.extensions["user_store"].all()
        checks["user_store"] = "ok"
    except Exception as exc:
        status = 503
        checks["user_store"] = f"error: {exc}"

    uploads_dir = current_app.extensions["upload_handler"].uploads_dir
    if os.path.isdir(uploads_dir) and os.access(uploads_dir, os.W_OK):
        checks["uploads"] = "ok"
    else:
        status = 503
        checks["uploads"] = "unwritable"

    settings = current_app.extensions["settings"]
    checks["youtube"] = "configured" if settings.youtube_api_key else "unconfigured"

    overall = "ok" if status == 200 else "degraded"
    return jsonify({"status": overall, "checks": checks}), status


@health_bp.route("/readyz")
def readyz():
    return jsonify({"status": "ready"}), 200
