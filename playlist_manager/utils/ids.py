"""Timestamp-derived identifiers and timestamps for stored records."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, Container


def epoch_millis(clock: Callable[[], float] = time.time) -> int:
    return int(clock() * 1000)


def timestamp_id(
    prefix: str,
    taken: Container[str] = (),
    clock: Callable[[], float] = time.time,
) -> str:
    """Return ``<prefix>-<epoch ms>``, bumping the counter past ids in ``taken``."""
    millis = epoch_millis(clock)
    candidate = f"{prefix}-{millis}"
    while candidate in taken:
        millis += 1
        candidate = f"{prefix}-{millis}"
    return candidate


def utc_now_iso() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


__all__ = ["epoch_millis", "timestamp_id", "utc_now_iso"]
