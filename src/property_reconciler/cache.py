"""In-memory response cache with per-entry TTL.

Entries expire lazily on read and in bulk via ``sweep()``; ``run_sweeper``
does the bulk pass on a fixed interval for the lifetime of the orchestrator.
"""
from __future__ import annotations

import asyncio
import threading
import time
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

logger = structlog.get_logger(__name__)

Clock = Callable[[], float]


@dataclass
class CacheEntry:
    data: Any
    expires_at: float


@dataclass
class CacheLookup:
    """Result of ``ResponseCache.get``; ``hit`` is False for missing or expired keys."""

    data: Any = None
    hit: bool = False


class ResponseCache:
    """Key/value store with absolute expiry and an optional LRU capacity bound."""

    def __init__(self, max_entries: int | None = None, clock: Clock = time.time) -> None:
        if max_entries is not None and max_entries < 1:
            raise ValueError("max_entries must be >= 1 or None")
        self.max_entries = max_entries
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._lock = threading.Lock()

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        expires_at = self._clock() + ttl_seconds
        with self._lock:
            self._entries[key] = CacheEntry(data=value, expires_at=expires_at)
            self._entries.move_to_end(key)
            if self.max_entries is not None:
                while len(self._entries) > self.max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("cache_evicted", cache_key=evicted, reason="capacity")
        logger.debug("cache_set", cache_key=key, ttl_seconds=ttl_seconds)

    def get(self, key: str) -> CacheLookup:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return CacheLookup()
            if entry.expires_at <= self._clock():
                del self._entries[key]
                logger.debug("cache_expired", cache_key=key)
                return CacheLookup()
            self._entries.move_to_end(key)
            return CacheLookup(data=entry.data, hit=True)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {"size": len(self._entries), "keys": list(self._entries)}

    def sweep(self) -> int:
        """Drop every expired entry; returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.expires_at <= now]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("cache_swept", removed=len(expired))
        return len(expired)

    async def run_sweeper(self, interval_seconds: float) -> None:
        """Sweep forever; cancel the task to stop."""
        while True:
            await asyncio.sleep(interval_seconds)
            self.sweep()

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key).hit
