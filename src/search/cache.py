"""In-memory response cache with a fixed time-to-live."""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

ALL_BREEDS_KEY = "all_breeds"


def search_key(query: str) -> str:
    """Cache key for a search query, insensitive to case and spacing."""
    return "search:" + " ".join(query.lower().split())


@dataclass
class _Entry:
    value: Any
    created_at: float
    ttl: float


class ResponseCache:
    """Key/value store whose entries expire lazily.

    An expired entry is dropped when it is read, and every write sweeps
    out whatever else has expired, so entries for one-off queries do not
    accumulate.

    Instances are created by the application and passed to the services
    that use them; there is no module-level cache.

    Args:
        ttl_seconds: Default time-to-live for new entries.
        clock: Monotonic time source, replaceable in tests.
    """

    def __init__(
        self,
        ttl_seconds: float = 1800,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            self.misses += 1
            logger.debug("Cache miss: %s", key)
            return None

        age = self._clock() - entry.created_at
        if age > entry.ttl:
            with self._lock:
                self._entries.pop(key, None)
            self.misses += 1
            logger.debug("Cache entry expired: %s (age %.1fs)", key, age)
            return None

        self.hits += 1
        logger.debug("Cache hit: %s", key)
        return entry.value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        now = self._clock()
        with self._lock:
            self._sweep(now)
            self._entries[key] = _Entry(
                value=value,
                created_at=now,
                ttl=self.ttl_seconds if ttl is None else ttl,
            )

    def has(self, key: str) -> bool:
        return self.get(key) is not None

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
        self.hits = 0
        self.misses = 0

    def stats(self) -> dict:
        """Return size and hit-rate counters for the health endpoint."""
        total = self.hits + self.misses
        return {
            "size": len(self._entries),
            "hits": self.hits,
            "misses": self.misses,
            "hit_rate": round(self.hits / total * 100, 1) if total > 0 else 0.0,
        }

    def _sweep(self, now: float) -> None:
        expired = [
            key for key, entry in self._entries.items() if now - entry.created_at > entry.ttl
        ]
        for key in expired:
            del self._entries[key]
        if expired:
            logger.debug("Swept %d expired cache entries", len(expired))
