"""Error taxonomy shared by the services and mapped to HTTP by the API layer."""

from __future__ import annotations


class PlaylistManagerError(Exception):
    """Base class for errors that carry an HTTP status and a short message."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"error": self.message}


class BadRequest(PlaylistManagerError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(PlaylistManagerError):
    status_code = 401
    default_message = "Not authenticated"


class NotFound(PlaylistManagerError):
    status_code = 404
    default_message = "Not found"


class Conflict(PlaylistManagerError):
    status_code = 409
    default_message = "Conflict"


class UploadRejected(PlaylistManagerError):
    status_code = 400
    default_message = "Only MP3 files allowed"


class UpstreamFailure(PlaylistManagerError):
    status_code = 500
    default_message = "YouTube search failed"


__all__ = [
    "PlaylistManagerError",
    "BadRequest",
    "Unauthorized",
    "NotFound",
    "Conflict",
    "UploadRejected",
    "UpstreamFailure",
]
