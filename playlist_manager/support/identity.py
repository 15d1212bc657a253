from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from flask import has_request_context
from flask_login import UserMixin, current_user

from playlist_manager.errors import Unauthorized
from playlist_manager.models import PublicUser, User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller, passed explicitly into every service call."""

    username: str
    first_name: str
    image_url: str

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(username=user.username, first_name=user.first_name, image_url=user.image_url)

    def to_public(self) -> PublicUser:
        return PublicUser(username=self.username, first_name=self.first_name, image_url=self.image_url)


class SessionUser(UserMixin):
    """Flask-Login adapter; the session only stores the username."""

    def __init__(self, identity: Identity) -> None:
        self.identity = identity

    def get_id(self) -> str:
        return self.identity.username


def resolve_identity() -> Optional[Identity]:
    """Return the identity of the logged-in caller, or None outside a session."""
    if not has_request_context():
        return None
    if not getattr(current_user, "is_authenticated", False):
        return None
    identity = getattr(current_user, "identity", None)
    if identity is None:
        logger.debug("Authenticated user %r carries no identity", current_user)
    return identity


def require_identity() -> Identity:
    identity = resolve_identity()
    if identity is None:
        raise Unauthorized("Not authenticated")
    return identity


__all__ = ["Identity", "SessionUser", "resolve_identity", "require_identity"]
