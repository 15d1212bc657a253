#!/usr/bin/env python
"""Authentication API endpoints: register, login, logout and profile."""

from __future__ import annotations

from flask import Blueprint, jsonify

from playlist_manager.support.identity import resolve_identity

from ._common import json_body, service

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@auth_bp.route("/register", methods=["POST"])
def register_user():
    data = json_body()
    service("auth_service").register(
        data.get("username"),
        data.get("password"),
        data.get("firstName"),
        data.get("imageUrl"),
    )
    return jsonify({"ok": True}), 200


@auth_bp.route("/login", methods=["POST"])
def login():
    data = json_body()
    user = service("auth_service").login(data.get("username"), data.get("password"))
    return jsonify({"ok": True, "user": user.to_dict()}), 200


@auth_bp.route("/logout", methods=["POST"])
def logout():
    service("auth_service").logout()
    return jsonify({"ok": True}), 200


@auth_bp.route("/me", methods=["GET"])
def me():
    user = service("auth_service").me(resolve_identity())
    return jsonify({"user": user.to_dict()}), 200


__all__ = ["auth_bp"]
