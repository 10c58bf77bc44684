"""
In-memory TTL cache with single-flight population.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass
from typing import Any


@dataclass
class CacheEntry:
    value: Any
    expires_at: float


class TTLCache:
    """
    Maps keys to values that expire a fixed time after they were stored.

    Population goes through get_or_populate(), which holds a per-key lock so
    that concurrent callers for the same key share one populate() call.
    Exceptions from populate() propagate and leave the key empty.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: dict[Hashable, CacheEntry] = {}
        self._locks: dict[Hashable, asyncio.Lock] = {}

    def __len__(self) -> int:
        now = self._clock()
        return sum(1 for entry in self._entries.values() if entry.expires_at > now)

    def _lookup(self, key: Hashable) -> CacheEntry | None:
        entry = self._entries.get(key)
        if entry is not None and entry.expires_at > self._clock():
            return entry
        return None

    async def get_or_populate(
        self,
        key: Hashable,
        ttl: float,
        populate: Callable[[], Awaitable[Any]],
    ) -> Any:
        """Return the live value for key, calling populate() if there is none."""
        entry = self._lookup(key)
        if entry is not None:
            return entry.value

        lock = self._locks.setdefault(key, asyncio.Lock())
        async with lock:
            # Another caller may have filled the entry while we waited
            entry = self._lookup(key)
            if entry is not None:
                return entry.value

            value = await populate()
            now = self._clock()
            self._prune(now)
            self._entries[key] = CacheEntry(value=value, expires_at=now + ttl)
            return value

    def _prune(self, now: float) -> None:
        """Drop expired entries and the idle locks of keys without an entry."""
        for key in [k for k, entry in self._entries.items() if entry.expires_at <= now]:
            del self._entries[key]
        for key in [k for k, lock in self._locks.items() if k not in self._entries]:
            if not self._locks[key].locked():
                del self._locks[key]

    def clear(self) -> None:
        self._entries.clear()
        self._locks.clear()
