from .identity import Identity, SessionUser, require_identity, resolve_identity

__all__ = ["Identity", "SessionUser", "require_identity", "resolve_identity"]
