"""TTL cache for assembled reports."""

import logging
import threading
import time
from typing import Any, Callable, Hashable

from cachetools import TTLCache

logger = logging.getLogger(__name__)


class ReportCache:
    """Bounded, thread-safe cache whose entries expire purely by age.

    There is no event-based invalidation: a report computed for a request
    tuple is served until its TTL runs out. With capacity reached the
    least recently used entry is dropped.

    Parameters
    ----------
    ttl_seconds : float
        Entry lifetime (default 5 minutes).
    max_entries : int
        Capacity.
    clock : Callable[[], float]
        Monotonic clock, replaceable in tests.
    """

    def __init__(
        self,
        ttl_seconds: float = 300.0,
        max_entries: int = 256,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        # TTLCache is not thread-safe on its own
        self._cache: TTLCache = TTLCache(maxsize=max_entries, ttl=ttl_seconds, timer=clock)
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

        logger.debug("Report cache ready: ttl=%ss, max_entries=%d", ttl_seconds, max_entries)

    def get(self, key: Hashable) -> Any | None:
        """Return the cached value, or None if absent or expired."""
        with self._lock:
            value = self._cache.get(key)
            if value is None:
                self.misses += 1
            else:
                self.hits += 1
            return value

    def set(self, key: Hashable, value: Any) -> None:
        with self._lock:
            self._cache[key] = value

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            self._cache.expire()
            return len(self._cache)
