"""Account registration, login and session lifecycle."""

from __future__ import annotations

import logging
from typing import Optional, Protocol

from werkzeug.security import check_password_hash, generate_password_hash

from playlist_manager.database import UserStore
from playlist_manager.errors import BadRequest, Conflict, Unauthorized
from playlist_manager.models import PublicUser, User
from playlist_manager.observability.metrics import record_auth_event
from playlist_manager.support.identity import Identity

logger = logging.getLogger(__name__)


class SessionBackend(Protocol):
    def establish(self, identity: Identity) -> None: ...

    def destroy(self) -> None: ...


def _text(value: object) -> str:
    if value is None:
        return ""
    return str(value).strip()


class AuthService:
    def __init__(self, store: UserStore, sessions: SessionBackend) -> None:
        self.store = store
        self.sessions = sessions

    def register(self, username, password, first_name, image_url) -> None:
        username = _text(username)
        first_name = _text(first_name)
        image_url = _text(image_url)
        # Passwords are hashed as given; surrounding whitespace is significant
        password = "" if password is None else str(password)
        if not username or not password or not first_name or not image_url:
            record_auth_event("register", "invalid")
            raise BadRequest("Missing fields")

        user = User(
            username=username,
            password_hash=generate_password_hash(password),
            first_name=first_name,
            image_url=image_url,
            playlists=[],
        )
        if not self.store.add(user):
            record_auth_event("register", "conflict")
            raise Conflict("User already exists")

        record_auth_event("register", "success")
        logger.info("Registered user %s", username)

    def login(self, username, password) -> PublicUser:
        username = _text(username)
        password = "" if password is None else str(password)
        user = self.store.get(username) if username else None
        if user is None or not password or not check_password_hash(user.password_hash, password):
            record_auth_event("login", "rejected")
            logger.warning("Rejected login for %r", username)
            raise Unauthorized("Invalid credentials")

        identity = Identity.from_user(user)
        self.sessions.establish(identity)
        record_auth_event("login", "success")
        logger.info("User %s logged in", username)
        return identity.to_public()

    def logout(self) -> None:
        self.sessions.destroy()

    def me(self, identity: Optional[Identity]) -> PublicUser:
        if identity is None:
            raise Unauthorized("Not logged in")
        return identity.to_public()


__all__ = ["AuthService", "SessionBackend"]
