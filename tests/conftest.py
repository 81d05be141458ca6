"""Shared fixtures: fresh cache/limiter instances, a fake clock, zero latency."""

import copy

import pytest

from property_reconciler.cache import ResponseCache
from property_reconciler.config import SOURCE_ORDER, Settings, build_source_config
from property_reconciler.data import (
    CERSAI_DATABASE,
    DLR_DATABASE,
    DORIS_DATABASE,
    MCA21_DATABASE,
    PortalDatasets,
)
from property_reconciler.latency import NoLatency
from property_reconciler.orchestrator import create_orchestrator
from property_reconciler.rate_limiter import RateLimiter
from property_reconciler.xref import CrossReferenceResolver

_ENV_KEYS = (
    "CACHE_TTL_SECONDS",
    "UNIFIED_CACHE_TTL_SECONDS",
    "CACHE_MAX_ENTRIES",
    "LOG_LEVEL",
    "RETRIES_DEFAULT",
)


class FakeClock:
    """Manually advanced wall clock (seconds)."""

    def __init__(self, start: float = 1_700_000_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep portal env overrides from leaking into tests."""
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    for source in SOURCE_ORDER:
        env = source.value.upper()
        for key in (f"RATE_{env}_RPM", f"RATE_{env}_BURST", f"TIMEOUT_{env}_MS", f"RETRIES_{env}"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    return Settings(sources={key: build_source_config(key) for key in SOURCE_ORDER})


@pytest.fixture
def datasets() -> PortalDatasets:
    """Private deep copies so a test can tamper with records safely."""
    return PortalDatasets(
        doris=copy.deepcopy(DORIS_DATABASE),
        dlr=copy.deepcopy(DLR_DATABASE),
        cersai=copy.deepcopy(CERSAI_DATABASE),
        mca21=copy.deepcopy(MCA21_DATABASE),
    )


@pytest.fixture
def cache(clock) -> ResponseCache:
    return ResponseCache(clock=clock)


@pytest.fixture
def rate_limiter(clock) -> RateLimiter:
    return RateLimiter(clock=clock)


@pytest.fixture
def resolver(datasets) -> CrossReferenceResolver:
    return CrossReferenceResolver(datasets=datasets)


@pytest.fixture
def orchestrator(settings, datasets, clock):
    return create_orchestrator(settings, latency=NoLatency(), datasets=datasets, clock=clock)


@pytest.fixture
def make_adapter(settings, cache, rate_limiter, resolver, datasets):
    """Build a portal adapter wired to the shared fresh fixtures."""

    def _make(adapter_cls, config=None, latency=None):
        return adapter_cls(
            config or settings.source(adapter_cls.source),
            cache=cache,
            rate_limiter=rate_limiter,
            resolver=resolver,
            latency=latency or NoLatency(),
            datasets=datasets,
        )

    return _make
