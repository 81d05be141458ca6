"""Simulated portal latency.

Adapters await a strategy before each fetch so tests can swap the random
delay for a zero-delay one.
"""
from __future__ import annotations

import asyncio
import random
from typing import Protocol, runtime_checkable

from .config import ResponseTime


@runtime_checkable
class LatencyStrategy(Protocol):
    """Anything that can be awaited to simulate a portal round-trip."""

    async def wait(self, bounds: ResponseTime) -> float:
        """Sleep and return the simulated delay in milliseconds."""
        ...


class RandomLatency:
    """Uniform delay between the source's min/max response time."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    async def wait(self, bounds: ResponseTime) -> float:
        lo, hi = sorted((bounds.min_ms, bounds.max_ms))
        delay_ms = self._rng.uniform(lo, hi)
        await asyncio.sleep(delay_ms / 1000.0)
        return delay_ms


class NoLatency:
    """Return immediately (tests, --no-latency)."""

    async def wait(self, bounds: ResponseTime) -> float:
        await asyncio.sleep(0)
        return 0.0


class FixedLatency:
    """Always sleep the same amount; handy for timeout tests."""

    def __init__(self, delay_ms: float) -> None:
        self.delay_ms = delay_ms

    async def wait(self, bounds: ResponseTime) -> float:
        await asyncio.sleep(self.delay_ms / 1000.0)
        return self.delay_ms
