from .store import JsonUserStore, UserStore

__all__ = ["JsonUserStore", "UserStore"]
