# database/store.py
"""JSON-document user store.

The whole store is one JSON array of user records. Every mutation reads the
entire document, changes it in memory and writes the entire document back.
Without ``serialize_writes`` two concurrent mutations may interleave and the
later write wins; with it, each read-modify-write cycle holds a store-wide
lock. Per-user locks would not be enough here because every user shares the
same document.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager, nullcontext
from typing import Iterator, List, Optional

from playlist_manager.errors import NotFound
from playlist_manager.models import User

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Keyed access to user records."""

    @abstractmethod
    def all(self) -> List[User]:
        ...

    @abstractmethod
    def get(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    def add(self, user: User) -> bool:
        """Insert ``user``; return False if the username is already taken."""

    @abstractmethod
    def put(self, user: User) -> None:
        ...

    @abstractmethod
    def delete(self, username: str) -> bool:
        ...

    @abstractmethod
    def mutate(self, username: str):
        """Context manager yielding a user to modify in place and persist."""


class JsonUserStore(UserStore):
    def __init__(self, path: str, serialize_writes: bool = False) -> None:
        self.path = os.path.abspath(path)
        self.serialize_writes = serialize_writes
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return f"<JsonUserStore {self.path}>"

    # --- document I/O ---
    def _guard(self):
        return self._lock if self.serialize_writes else nullcontext()

    def _read_document(self) -> List[dict]:
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = fh.read()
        except FileNotFoundError:
            return []
        if not raw.strip():
            return []
        data = json.loads(raw)
        if not isinstance(data, list):
            raise ValueError(f"User store {self.path} must hold a JSON array")
        return data

    def _load(self) -> List[User]:
        return [User.model_validate(record) for record in self._read_document()]

    def _write(self, users: List[User]) -> None:
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)
        payload = [user.to_dict() for user in users]
        fd, tmp_path = tempfile.mkstemp(prefix=".users-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def ensure_document(self) -> None:
        """Create an empty document if none exists yet."""
        with self._guard():
            if not os.path.exists(self.path):
                self._write([])
                logger.info("Created empty user store at %s", self.path)

    # --- keyed access ---
    def all(self) -> List[User]:
        return self._load()

    def get(self, username: str) -> Optional[User]:
        return next((u for u in self._load() if u.username == username), None)

    def add(self, user: User) -> bool:
        with self._guard():
            users = self._load()
            if any(u.username == user.username for u in users):
                return False
            users.append(user)
            self._write(users)
            return True

    def put(self, user: User) -> None:
        with self._guard():
            users = self._load()
            for index, existing in enumerate(users):
                if existing.username == user.username:
                    users[index] = user
                    break
            else:
                users.append(user)
            self._write(users)

    def delete(self, username: str) -> bool:
        with self._guard():
            users = self._load()
            remaining = [u for u in users if u.username != username]
            if len(remaining) == len(users):
                return False
            self._write(remaining)
            return True

    @contextmanager
    def mutate(self, username: str) -> Iterator[User]:
        with self._guard():
            users = self._load()
            index = next((i for i, u in enumerate(users) if u.username == username), None)
            if index is None:
                raise NotFound("User not found")
            user = users[index]
            yield user
            users[index] = user
            self._write(users)


__all__ = ["UserStore", "JsonUserStore"]
