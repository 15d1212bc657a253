#!/usr/bin/env python
"""Session handling and Flask-Login integration."""

from __future__ import annotations

from flask import current_app, jsonify, session
from flask_login import LoginManager, login_user, logout_user

from playlist_manager.support.identity import Identity, SessionUser

login_manager = LoginManager()
login_manager.session_protection = "strong"
login_manager.login_message = None


class FlaskLoginSessions:
    """Establishes and destroys the cookie session for the current request."""

    def establish(self, identity: Identity) -> None:
        login_user(SessionUser(identity))

    def destroy(self) -> None:
        logout_user()
        session.clear()


def init_auth(app):
    """Attach Flask-Login to the Flask app."""
    login_manager.init_app(app)

    @login_manager.user_loader
    def load_user(user_id: str) -> SessionUser | None:
        store = current_app.extensions["user_store"]
        user = store.get(user_id)
        if user is None:
            return None
        return SessionUser(Identity.from_user(user))

    @login_manager.unauthorized_handler
    def _unauthorized():
        return jsonify({"error": "Not authenticated"}), 401

    return login_manager


__all__ = ["login_manager", "init_auth", "FlaskLoginSessions"]
