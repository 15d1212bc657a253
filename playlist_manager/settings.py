#!/usr/bin/env python
"""
Centralized configuration schema for the playlist services.

Merges defaults from config.Config (or a Flask config mapping) with runtime
overrides and validates the values the services depend on.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from config import Config

_SETTINGS_KEYS = {
    "users_db_path": "USERS_DB_PATH",
    "store_serialize_writes": "STORE_SERIALIZE_WRITES",
    "uploads_dir": "UPLOADS_DIR",
    "uploads_url_prefix": "UPLOADS_URL_PREFIX",
    "youtube_api_key": "YOUTUBE_API_KEY",
    "youtube_api_base": "YOUTUBE_API_BASE",
    "youtube_timeout_seconds": "YOUTUBE_TIMEOUT_SECONDS",
    "youtube_max_results": "YOUTUBE_MAX_RESULTS",
    "cors_allowed_origins": "CORS_ALLOWED_ORIGINS",
}


class AppSettings(BaseModel):
    """Application-wide settings consumed by the domain services."""

    model_config = ConfigDict(extra="ignore")

    # User store
    users_db_path: str
    store_serialize_writes: bool = False

    # Uploads
    uploads_dir: str
    uploads_url_prefix: str = "/uploads"

    # YouTube Data API
    youtube_api_key: Optional[str] = None
    youtube_api_base: str = "https://www.googleapis.com/youtube/v3"
    youtube_timeout_seconds: float = 10.0
    youtube_max_results: int = 10

    cors_allowed_origins: List[str] = Field(default_factory=list)

    @field_validator("uploads_url_prefix")
    @classmethod
    def _normalize_prefix(cls, value: str) -> str:
        value = "/" + (value or "").strip().strip("/")
        return value if value != "/" else "/uploads"

    @field_validator("youtube_api_base")
    @classmethod
    def _strip_base(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("youtube_timeout_seconds", mode="before")
    @classmethod
    def _coerce_timeout(cls, value: object) -> float:
        try:
            timeout = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 10.0
        return timeout if timeout > 0 else 10.0

    @field_validator("youtube_max_results", mode="before")
    @classmethod
    def _coerce_max_results(cls, value: object) -> int:
        try:
            count = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 10
        return max(1, min(count, 50))

    @field_validator("youtube_api_key", mode="before")
    @classmethod
    def _blank_key_is_none(cls, value: object) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None


def load_app_settings(
    source: Optional[Mapping[str, Any]] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> AppSettings:
    """Load settings from a config mapping (defaults to ``Config``) plus overrides."""
    data: Dict[str, Any] = {}
    for field_name, config_key in _SETTINGS_KEYS.items():
        if source is not None and config_key in source:
            data[field_name] = source[config_key]
        else:
            data[field_name] = getattr(Config, config_key)
    if overrides:
        data.update(overrides)
    return AppSettings.model_validate(data)


__all__ = ["AppSettings", "load_app_settings"]
