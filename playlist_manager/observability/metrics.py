from __future__ import annotations

from flask import Blueprint, Response
from prometheus_client import Counter, generate_latest

metrics_blueprint = Blueprint("metrics_bp", __name__)

CONTENT_TYPE_LATEST = "text/plain; version=0.0.4; charset=utf-8"

AUTH_EVENTS = Counter(
    "playlist_manager_auth_events_total",
    "Registration and login attempts by outcome.",
    ["operation", "outcome"],
)
PLAYLIST_MUTATIONS = Counter(
    "playlist_manager_playlist_mutations_total",
    "Playlist and item mutations applied to the user store.",
    ["operation"],
)
UPLOADS = Counter(
    "playlist_manager_uploads_total",
    "MP3 upload attempts by outcome.",
    ["outcome"],
)
SEARCH_REQUESTS = Counter(
    "playlist_manager_youtube_search_total",
    "YouTube search proxy requests by outcome.",
    ["outcome"],
)


def record_auth_event(operation: str, outcome: str) -> None:
    AUTH_EVENTS.labels(operation=operation, outcome=outcome).inc()


def record_playlist_mutation(operation: str) -> None:
    PLAYLIST_MUTATIONS.labels(operation=operation).inc()


def record_upload(outcome: str) -> None:
    UPLOADS.labels(outcome=outcome).inc()


def record_search(outcome: str) -> None:
    SEARCH_REQUESTS.labels(outcome=outcome).inc()


@metrics_blueprint.route("/metrics")
def metrics_endpoint() -> Response:
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
