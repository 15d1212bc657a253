from __future__ import annotations

from typing import Any, Dict

from flask import current_app, request


def json_body() -> Dict[str, Any]:
    """Request JSON as a dict; malformed or non-object bodies read as empty."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def service(name: str):
    return current_app.extensions[name]
