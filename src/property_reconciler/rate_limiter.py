"""Fixed-window rate limiter with a burst guard, keyed by (source, client)."""
from __future__ import annotations

import asyncio
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime

import structlog

from .config import RateLimits
from .errors import ErrorCode, PortalError

logger = structlog.get_logger(__name__)

WINDOW_SECONDS = 60.0
BURST_WINDOW_SECONDS = 1.0


@dataclass
class RateLimitRecord:
    count: int
    reset_at: float
    last_request: float


@dataclass
class RateLimitStatus:
    allowed: bool
    remaining: int
    reset_at: float

    @property
    def reset_at_iso(self) -> str:
        return datetime.fromtimestamp(self.reset_at, UTC).isoformat().replace("+00:00", "Z")


class RateLimiter:
    """Per-(source, client) quota over a fixed 60s window.

    A call is refused when the window quota is spent, or when it arrives less
    than a second after the previous one and the burst allowance is spent.
    Only allowed calls consume quota.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._records: dict[str, RateLimitRecord] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(source: str, client_id: str) -> str:
        return f"{source}:{client_id}"

    def check_rate_limit(self, source: str, client_id: str, limits: RateLimits) -> RateLimitStatus:
        """Check and, when allowed, consume one request."""
        key = self.key(source, client_id)
        now = self._clock()
        with self._lock:
            record = self._records.get(key)
            if record is None:
                record = RateLimitRecord(count=0, reset_at=now + WINDOW_SECONDS, last_request=now)
                self._records[key] = record
            elif record.reset_at <= now:
                record.count = 0
                record.reset_at = now + WINDOW_SECONDS

            since_last = now - record.last_request
            is_burst = since_last < BURST_WINDOW_SECONDS
            allowed = record.count < limits.requests_per_minute and (
                not is_burst or record.count < limits.burst_limit
            )
            if allowed:
                record.count += 1
                record.last_request = now
            remaining = max(0, limits.requests_per_minute - record.count)
            status = RateLimitStatus(allowed=allowed, remaining=remaining, reset_at=record.reset_at)

        if not allowed:
            logger.warning(
                "rate_limit_exceeded",
                key=key,
                count=record.count,
                reset_at=status.reset_at_iso,
                time_since_last_ms=round(since_last * 1000),
            )
        return status

    def handle_rate_limit(self, source: str, client_id: str, limits: RateLimits) -> RateLimitStatus:
        """Like check_rate_limit, but raise RATE_LIMIT_EXCEEDED when refused."""
        status = self.check_rate_limit(source, client_id, limits)
        if not status.allowed:
            raise PortalError(
                ErrorCode.RATE_LIMIT_EXCEEDED,
                "Rate limit exceeded. Please try again later.",
                details={"resetAt": status.reset_at_iso, "remaining": status.remaining},
                source=source.upper(),
            )
        return status

    def sweep(self) -> int:
        """Forget records whose window has elapsed."""
        now = self._clock()
        with self._lock:
            expired = [k for k, r in self._records.items() if r.reset_at <= now]
            for key in expired:
                del self._records[key]
        return len(expired)

    async def run_sweeper(self, interval_seconds: float) -> None:
        while True:
            await asyncio.sleep(interval_seconds)
            self.sweep()

    def stats(self) -> dict[str, dict[str, float | int]]:
        with self._lock:
            return {
                key: {"count": r.count, "resetAt": r.reset_at, "lastRequest": r.last_request}
                for key, r in self._records.items()
            }

    def reset(self) -> None:
        with self._lock:
            self._records.clear()
