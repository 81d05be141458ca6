"""Request parameters and response envelopes."""
from __future__ import annotations

import random
import string
import time
from datetime import UTC, datetime
from typing import Any

from pydantic import Field, field_validator

from ..errors import ApiError
from .property import PortalModel

_BASE36 = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def generate_request_id() -> str:
    """``req_<base36 ms timestamp>_<8 random base36 chars>``."""
    random_part = "".join(random.choices(_BASE36, k=8))
    return f"req_{_to_base36(int(time.time() * 1000))}_{random_part}"


def utc_now_iso() -> str:
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


class PortalSearchParams(PortalModel):
    """Union of every parameter any portal understands."""

    property_id: str | None = None
    registration_number: str | None = None
    owner_name: str | None = None
    district: str | None = None
    sub_registrar_office: str | None = None
    survey_number: str | None = None
    village: str | None = None
    asset_id: str | None = None
    borrower_name: str | None = None
    lender_name: str | None = None
    security_type: str | None = None
    cin_number: str | None = None
    company_name: str | None = None
    director_name: str | None = None
    registered_office: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    def get(self, wire_name: str) -> str | None:
        """Look a parameter up by its camelCase name."""
        return self.model_dump(by_alias=True).get(wire_name)

    def provided(self) -> dict[str, str]:
        return {k: v for k, v in self.model_dump(by_alias=True).items() if v is not None}


class UnifiedSearchParams(PortalModel):
    """Parameters accepted by the unified orchestrator."""

    property_id: str | None = None
    registration_number: str | None = None
    owner_name: str | None = None
    sources: list[str] | None = Field(
        default=None, description="Subset of doris|dlr|cersai|mca21; None means all"
    )

    @field_validator("property_id", "registration_number", "owner_name", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("sources", mode="before")
    @classmethod
    def _split_sources(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = [part for part in value.split(",")]
        if isinstance(value, list):
            cleaned = [str(part).strip() for part in value if str(part).strip()]
            return cleaned or None
        return value


class SourceMetadata(PortalModel):
    processing_time_ms: float = 0.0
    cache_hit: bool | None = None
    rate_limit_remaining: int | None = None


class SourceResponse(PortalModel):
    """Envelope returned by a single portal adapter."""

    success: bool
    source: str
    request_id: str
    timestamp: str = Field(default_factory=utc_now_iso)
    data: Any = Field(default_factory=dict)
    metadata: SourceMetadata = Field(default_factory=SourceMetadata)
    errors: list[ApiError] | None = None
    status_code: int = Field(default=200, exclude=True)


class SourceData(PortalModel):
    source: str
    data: Any


class UnifiedError(PortalModel):
    source: str | None = None
    code: str
    message: str
    details: dict[str, Any] | None = None


class UnifiedMetadata(PortalModel):
    total_sources: int = 0
    successful_sources: int = 0
    failed_sources: int = 0
    processing_time_ms: float = 0.0
    cache_hit: bool | None = None


class UnifiedResponse(PortalModel):
    """Envelope returned by the unified orchestrator."""

    success: bool
    request_id: str
    timestamp: str = Field(default_factory=utc_now_iso)
    sources: list[str] = Field(default_factory=list)
    data: list[SourceData] = Field(default_factory=list)
    errors: list[UnifiedError] = Field(default_factory=list)
    metadata: UnifiedMetadata = Field(default_factory=UnifiedMetadata)
    status_code: int = Field(default=200, exclude=True)
