"""Source registry and runtime settings.

Every numeric knob has a default taken from the portal definitions and can
be overridden from the environment (or a ``.env`` file loaded by the CLI).
"""
from __future__ import annotations

import os
from enum import Enum

from pydantic import BaseModel, Field


class SourceName(str, Enum):
    """Portals the reconciler knows how to query."""

    DORIS = "doris"
    DLR = "dlr"
    CERSAI = "cersai"
    MCA21 = "mca21"

    @property
    def label(self) -> str:
        return self.value.upper()

    @classmethod
    def parse(cls, value: str | SourceName) -> SourceName:
        """Case-insensitive lookup; raises ValueError for unknown names."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())


# Fixed processing order used by the merge engine and the default source set
SOURCE_ORDER: tuple[SourceName, ...] = (
    SourceName.DORIS,
    SourceName.DLR,
    SourceName.CERSAI,
    SourceName.MCA21,
)


def _f(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _i(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class RateLimits(BaseModel):
    """Per-(source, client) request quota."""

    requests_per_minute: int = Field(default=60, ge=1)
    burst_limit: int = Field(default=10, ge=1, description="Max calls spaced under 1s in one window")


class ResponseTime(BaseModel):
    """Bounds for the simulated portal latency, in milliseconds."""

    min_ms: int = Field(default=0, ge=0)
    max_ms: int = Field(default=0, ge=0)


class SourceConfig(BaseModel):
    """Static configuration for one portal."""

    key: SourceName
    name: str = Field(description="Display name used in envelopes, e.g. 'DORIS'")
    description: str = ""
    timeout_ms: int = 10_000
    retries: int = 3
    rate_limits: RateLimits = Field(default_factory=RateLimits)
    response_time: ResponseTime = Field(default_factory=ResponseTime)
    required_params: list[str] = Field(default_factory=list, description="At least one must be supplied")
    optional_params: list[str] = Field(default_factory=list)
    cache_ttl_seconds: int = 300

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @property
    def all_params(self) -> list[str]:
        return [*self.required_params, *self.optional_params]


class UnifiedApiConfig(BaseModel):
    """Configuration for the unified orchestrator."""

    name: str = "UNIFIED_API"
    description: str = "Unified API for property data across all portals"
    timeout_ms: int = 30_000
    cache_ttl_seconds: int = 600


class Settings(BaseModel):
    """Everything the factory needs to wire an orchestrator."""

    sources: dict[SourceName, SourceConfig]
    unified: UnifiedApiConfig = Field(default_factory=UnifiedApiConfig)
    cache_sweep_interval_seconds: float = 300.0
    rate_limit_sweep_interval_seconds: float = 60.0
    cache_max_entries: int | None = Field(default=None, description="None keeps the cache unbounded")
    log_level: str = "INFO"

    def source(self, name: SourceName | str) -> SourceConfig:
        return self.sources[SourceName.parse(name)]


_SOURCE_DEFAULTS: dict[SourceName, dict] = {
    SourceName.DORIS: {
        "name": "DORIS",
        "description": "Department of Registration and Stamps",
        "timeout_ms": 8000,
        "rate_limits": (50, 8),
        "response_time": (300, 800),
        "required_params": ["propertyId", "registrationNumber"],
        "optional_params": ["district", "subRegistrarOffice"],
    },
    SourceName.DLR: {
        "name": "DLR",
        "description": "Digital Land Records",
        "timeout_ms": 12000,
        "rate_limits": (40, 6),
        "response_time": (500, 1000),
        "required_params": ["propertyId", "registrationNumber", "ownerName"],
        "optional_params": ["surveyNumber", "district", "village"],
    },
    SourceName.CERSAI: {
        "name": "CERSAI",
        "description": "Central Registry of Securitisation Asset Reconstruction and Security Interest",
        "timeout_ms": 15000,
        "rate_limits": (30, 5),
        "response_time": (700, 1500),
        "required_params": ["assetId", "propertyId", "borrowerName"],
        "optional_params": ["lenderName", "securityType"],
    },
    SourceName.MCA21: {
        "name": "MCA21",
        "description": "Ministry of Corporate Affairs",
        "timeout_ms": 20000,
        "rate_limits": (20, 4),
        "response_time": (800, 2000),
        "required_params": ["cinNumber", "companyName", "propertyId"],
        "optional_params": ["directorName", "registeredOffice"],
    },
}


def build_source_config(key: SourceName) -> SourceConfig:
    """Build one portal's config, applying RATE_/TIMEOUT_ env overrides."""
    defaults = _SOURCE_DEFAULTS[key]
    env = key.value.upper()
    rpm, burst = defaults["rate_limits"]
    lo, hi = defaults["response_time"]
    return SourceConfig(
        key=key,
        name=defaults["name"],
        description=defaults["description"],
        timeout_ms=_i(f"TIMEOUT_{env}_MS", defaults["timeout_ms"]),
        retries=_i(f"RETRIES_{env}", _i("RETRIES_DEFAULT", 3)),
        rate_limits=RateLimits(
            requests_per_minute=_i(f"RATE_{env}_RPM", rpm),
            burst_limit=_i(f"RATE_{env}_BURST", burst),
        ),
        response_time=ResponseTime(min_ms=lo, max_ms=hi),
        required_params=list(defaults["required_params"]),
        optional_params=list(defaults["optional_params"]),
        cache_ttl_seconds=_i("CACHE_TTL_SECONDS", 300),
    )


def load_settings() -> Settings:
    """Read the environment once and return a fresh Settings object."""
    max_entries = _i("CACHE_MAX_ENTRIES", 0)
    return Settings(
        sources={key: build_source_config(key) for key in SOURCE_ORDER},
        unified=UnifiedApiConfig(
            timeout_ms=_i("UNIFIED_TIMEOUT_MS", 30_000),
            cache_ttl_seconds=_i("UNIFIED_CACHE_TTL_SECONDS", 600),
        ),
        cache_sweep_interval_seconds=_f("CACHE_SWEEP_INTERVAL_SECONDS", 300.0),
        rate_limit_sweep_interval_seconds=_f("RATE_LIMIT_SWEEP_INTERVAL_SECONDS", 60.0),
        cache_max_entries=max_entries if max_entries > 0 else None,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
