"""Caching utilities for API responses."""

import time
from typing import Any, Callable
from collections import OrderedDict


class TTLCache:
    """Simple TTL cache with max size limit."""

    def __init__(self, maxsize: int = 128, ttl: int = 3600, clock: Callable[[], float] = time.time):
        """Initialize cache.

        Args:
            maxsize: Maximum number of items to cache
            ttl: Time-to-live in seconds
            clock: Time source, replaceable in tests
        """
        self.maxsize = maxsize
        self.ttl = ttl
        self._clock = clock
        self._cache: OrderedDict[str, tuple[float, Any]] = OrderedDict()

    def get(self, key: str) -> Any | None:
        """Get item from cache if not expired."""
        if key not in self._cache:
            return None

        timestamp, value = self._cache[key]
        if self._clock() - timestamp > self.ttl:
            del self._cache[key]
            return None

        self._cache.move_to_end(key)
        return value

    def set(self, key: str, value: Any) -> None:
        """Set item in cache, evicting the least recently used entries."""
        self._cache.pop(key, None)
        while len(self._cache) >= self.maxsize:
            self._cache.popitem(last=False)
        self._cache[key] = (self._clock(), value)

    def clear(self) -> None:
        self._cache.clear()

    def stats(self) -> dict[str, int]:
        return {"size": len(self._cache), "maxsize": self.maxsize, "ttl": self.ttl}

    def __len__(self) -> int:
        return len(self._cache)
