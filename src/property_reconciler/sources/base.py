"""Base class shared by the four portal adapters.

Every adapter call runs the same pipeline:

    validate -> cache lookup -> (miss) rate limit -> latency -> lookup/filter
    -> cache store -> respond

and never raises: each outcome becomes a SourceResponse envelope.
"""
from __future__ import annotations

import asyncio
import re
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, ClassVar

import structlog
from pydantic import ValidationError
from tenacity import retry, retry_if_exception, stop_after_attempt, wait_exponential_jitter

from ..cache import ResponseCache
from ..config import SourceConfig, SourceName
from ..data import PortalDatasets
from ..errors import ErrorCode, PortalError, internal_error
from ..latency import LatencyStrategy, RandomLatency
from ..models.envelope import PortalSearchParams, SourceMetadata, SourceResponse, generate_request_id
from ..rate_limiter import RateLimiter
from ..xref import CrossReferenceResolver

logger = structlog.get_logger(__name__)

PROPERTY_ID_PATTERN = re.compile(r"^[A-Z]{2}\d{5,7}$")
REGISTRATION_NUMBER_PATTERN = re.compile(r"^REG/[A-Z]{2}/\d{4}/\d{5}$")
CIN_NUMBER_PATTERN = re.compile(r"^[UL]\d{5}[A-Z]{2}\d{4}PLC\d{6}$")

_FORMAT_RULES: dict[str, tuple[re.Pattern[str], str]] = {
    "propertyId": (
        PROPERTY_ID_PATTERN,
        "Property ID must be in the format: 2 uppercase letters followed by 5-7 digits (e.g., MH1234567)",
    ),
    "registrationNumber": (
        REGISTRATION_NUMBER_PATTERN,
        "Registration Number must be in the format: REG/XX/YYYY/NNNNN (e.g., REG/MH/2022/12345)",
    ),
    "cinNumber": (
        CIN_NUMBER_PATTERN,
        "CIN Number must be in the format: U/L followed by 5 digits, 2 letters, 4 digits, PLC, and 6 digits",
    ),
}

DEFAULT_CLIENT_ID = "unknown"


def check_formats(values: Mapping[str, str | None], source: str | None = None) -> None:
    """Raise VALIDATION_ERROR for the first malformed propertyId / registrationNumber / cinNumber."""
    for name, (pattern, message) in _FORMAT_RULES.items():
        value = values.get(name)
        if value and not pattern.match(value):
            raise PortalError(ErrorCode.VALIDATION_ERROR, message, details={"providedValue": value}, source=source)


def contains(haystack: str | None, needle: str | None) -> bool:
    """Case-insensitive substring match; a missing needle always matches."""
    if not needle:
        return True
    return bool(haystack) and needle.lower() in haystack.lower()


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, PortalError) and exc.is_transient


class PortalAdapter(ABC):
    """One mock government portal."""

    source: ClassVar[SourceName]

    def __init__(
        self,
        config: SourceConfig,
        cache: ResponseCache,
        rate_limiter: RateLimiter,
        resolver: CrossReferenceResolver | None = None,
        latency: LatencyStrategy | None = None,
        datasets: PortalDatasets | None = None,
    ) -> None:
        self.config = config
        self.cache = cache
        self.rate_limiter = rate_limiter
        self.resolver = resolver if resolver is not None else CrossReferenceResolver(datasets=datasets)
        self.latency = latency or RandomLatency()
        self.datasets = datasets if datasets is not None else self.resolver.datasets

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def records(self) -> Mapping[str, dict]:
        return self.datasets.for_source(self.source)

    # -- pipeline -----------------------------------------------------------------

    async def search(
        self,
        params: PortalSearchParams | Mapping[str, Any],
        client_id: str = DEFAULT_CLIENT_ID,
    ) -> SourceResponse:
        """Run one lookup against this portal and wrap the outcome in an envelope."""
        request_id = generate_request_id()
        started = time.perf_counter()
        log = logger.bind(request_id=request_id, source=self.name)
        try:
            params = self._coerce(params)
            log.info("portal_request", params=params.provided(), client_id=client_id)
            params = self.prepare(params)
            self.validate(params)

            cache_key = self.cache_key(params)
            cached = self.cache.get(cache_key)
            if cached.hit:
                log.info("portal_cache_hit", cache_key=cache_key)
                return self._success(request_id, cached.data, started, cache_hit=True)

            status = self.rate_limiter.handle_rate_limit(self.source.value, client_id, self.config.rate_limits)
            data = await self.fetch(params)
            self.cache.set(cache_key, data, self.config.cache_ttl_seconds)
            response = self._success(
                request_id, data, started, cache_hit=False, rate_limit_remaining=status.remaining
            )
            log.info("portal_response", success=True, processing_time_ms=response.metadata.processing_time_ms)
            return response
        except PortalError as exc:
            if exc.source is None:
                exc.source = self.name
            return self._failure(request_id, exc, started)
        except Exception as exc:
            log.exception("portal_unexpected_error")
            return self._failure(request_id, internal_error(exc, self.name), started)

    def _coerce(self, params: PortalSearchParams | Mapping[str, Any]) -> PortalSearchParams:
        if isinstance(params, PortalSearchParams):
            return params
        try:
            return PortalSearchParams.model_validate(dict(params))
        except ValidationError as exc:
            raise PortalError(
                ErrorCode.VALIDATION_ERROR,
                "Invalid search parameters",
                details={"errors": exc.errors(include_url=False, include_context=False)},
                source=self.name,
            ) from exc

    def prepare(self, params: PortalSearchParams) -> PortalSearchParams:
        """Hook for portal-specific parameter translation before validation."""
        return params

    def validate(self, params: PortalSearchParams) -> None:
        required = self.config.required_params
        if not any(params.get(name) for name in required):
            raise PortalError(
                ErrorCode.MISSING_PARAMETERS,
                f"At least one of these parameters is required: {', '.join(required)}",
                details={"providedParams": sorted(params.provided())},
                source=self.name,
            )
        declared = set(self.config.all_params)
        check_formats({k: v for k, v in params.provided().items() if k in declared}, source=self.name)

    def cache_key(self, params: PortalSearchParams) -> str:
        """``<source>:`` followed by every declared parameter in order, blanks for absent ones."""
        parts = [params.get(name) or "" for name in self.config.all_params]
        return ":".join([self.source.value, *parts])

    async def fetch(self, params: PortalSearchParams) -> Any:
        """Simulated round-trip bounded by the portal timeout, retried on transient faults."""

        @retry(
            reraise=True,
            stop=stop_after_attempt(max(1, self.config.retries + 1)),
            wait=wait_exponential_jitter(initial=0.1, max=2.0),
            retry=retry_if_exception(_is_transient),
        )
        async def _do() -> Any:
            try:
                async with asyncio.timeout(self.config.timeout_seconds):
                    await self.latency.wait(self.config.response_time)
                    return self.lookup(params)
            except TimeoutError as exc:
                raise PortalError(
                    ErrorCode.PORTAL_TIMEOUT,
                    f"{self.name} did not respond within {self.config.timeout_ms} ms",
                    details={"timeoutMs": self.config.timeout_ms},
                    source=self.name,
                ) from exc

        return await _do()

    @abstractmethod
    def lookup(self, params: PortalSearchParams) -> Any:
        """Find matching records (wire dicts); raise NOT_FOUND when nothing matches."""

    # -- helpers ------------------------------------------------------------------

    def not_found(self, **details: Any) -> PortalError:
        return PortalError(
            ErrorCode.NOT_FOUND,
            "No property found with the provided details",
            details={k: v for k, v in details.items() if v is not None},
            source=self.name,
        )

    @staticmethod
    def one_or_many(matches: list[dict]) -> dict | list[dict]:
        return matches[0] if len(matches) == 1 else matches

    def _success(
        self,
        request_id: str,
        data: Any,
        started: float,
        cache_hit: bool,
        rate_limit_remaining: int | None = None,
    ) -> SourceResponse:
        return SourceResponse(
            success=True,
            source=self.name,
            request_id=request_id,
            data=data,
            metadata=SourceMetadata(
                processing_time_ms=round((time.perf_counter() - started) * 1000, 3),
                cache_hit=cache_hit,
                rate_limit_remaining=rate_limit_remaining,
            ),
        )

    def _failure(self, request_id: str, exc: PortalError, started: float) -> SourceResponse:
        logger.info("portal_response", request_id=request_id, source=self.name, success=False, code=exc.code.value)
        return SourceResponse(
            success=False,
            source=self.name,
            request_id=request_id,
            data={},
            metadata=SourceMetadata(processing_time_ms=round((time.perf_counter() - started) * 1000, 3)),
            errors=[exc.to_api_error()],
            status_code=exc.status_code,
        )
