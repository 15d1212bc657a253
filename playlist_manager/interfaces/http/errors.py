"""Map service errors to JSON responses."""

from __future__ import annotations

import logging

from flask import jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from playlist_manager.errors import PlaylistManagerError

logger = logging.getLogger(__name__)


def register_error_handlers(app) -> None:
    @app.errorhandler(PlaylistManagerError)
    def _handle_service_error(exc: PlaylistManagerError):
        if exc.status_code >= 500:
            logger.error(
                "%s %s failed: %s", request.method, request.path, exc.message,
                exc_info=exc.__cause__ or exc,
            )
        else:
            logger.warning(
                "%s %s -> %s %s",
                request.method, request.path, exc.status_code, exc.message,
            )
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def _handle_too_large(exc: RequestEntityTooLarge):
        limit = app.config.get("MAX_CONTENT_LENGTH")
        logger.warning("Request body over %s bytes refused on %s", limit, request.path)
        return jsonify({"error": "File too large"}), 413


__all__ = ["register_error_handlers"]
