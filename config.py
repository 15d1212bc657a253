#!/usr/bin/env python
# config.py
import os
from typing import List

# This assumes config.py is at the root of your project
basedir = os.path.abspath(os.path.dirname(__file__))


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _get_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "t", "yes", "y", "on"}


def _get_csv_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name)
    source = raw if raw is not None else default
    return [token.strip() for token in source.split(",") if token and token.strip()]


class Config:
    # Session signing; SESSION_SECRET kept for deployments configured for the old server
    SECRET_KEY = os.environ.get('SECRET_KEY') or os.environ.get('SESSION_SECRET') or 'dev-only-session-secret'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # User store (single JSON document)
    USERS_DB_PATH = os.environ.get('USERS_DB_PATH') or os.path.join(basedir, 'database', 'users.json')
    # Serialize read-modify-write cycles under one store-wide lock; off reproduces last-write-wins
    STORE_SERIALIZE_WRITES = _get_bool('STORE_SERIALIZE_WRITES', False)

    # MP3 uploads
    UPLOADS_DIR = os.environ.get('UPLOADS_DIR') or os.path.join(basedir, 'uploads')
    UPLOADS_URL_PREFIX = os.getenv('UPLOADS_URL_PREFIX', '/uploads')
    MAX_UPLOAD_MB = max(1, _get_int('MAX_UPLOAD_MB', 25))
    MAX_CONTENT_LENGTH = MAX_UPLOAD_MB * 1024 * 1024

    # YouTube Data API
    YOUTUBE_API_KEY = os.environ.get('YOUTUBE_API_KEY')
    YOUTUBE_API_BASE = os.getenv('YOUTUBE_API_BASE', 'https://www.googleapis.com/youtube/v3')
    YOUTUBE_TIMEOUT_SECONDS = _get_float('YOUTUBE_TIMEOUT_SECONDS', 10.0)
    YOUTUBE_MAX_RESULTS = max(1, min(50, _get_int('YOUTUBE_MAX_RESULTS', 10)))

    # HTTP
    CORS_ALLOWED_ORIGINS = _get_csv_list('CORS_ALLOWED_ORIGINS', 'http://localhost:3000')

    # Runtime behavior
    # Turn Flask debug on/off from env; default off to avoid noisy console
    DEBUG = _get_bool('DEBUG', False)
    # Control console logging; when disabled, logs go only to file
    ENABLE_CONSOLE_LOGS = _get_bool('ENABLE_CONSOLE_LOGS', False)
    PORT = _get_int('PORT', 3000)
