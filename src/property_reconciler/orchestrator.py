"""Unified orchestrator: one query fanned out to every selected portal.

Flow per request:

    validate -> cache lookup -> (miss) resolve cross-references
    -> dispatch adapters concurrently -> merge -> combine -> cache store

The orchestrator never raises to its caller; every outcome, including an
unexpected fault, is a UnifiedResponse.
"""
from __future__ import annotations

import asyncio
import time
from collections.abc import Callable, Mapping
from typing import Any

import structlog
from pydantic import ValidationError

from . import __version__
from .cache import ResponseCache
from .config import SOURCE_ORDER, Settings, SourceName, load_settings
from .data import PortalDatasets
from .errors import ErrorCode, PortalError, internal_error
from .latency import LatencyStrategy
from .merge import MERGED_SOURCE, MergeEngine, MergePolicy
from .models.envelope import (
    PortalSearchParams,
    SourceData,
    SourceResponse,
    UnifiedError,
    UnifiedMetadata,
    UnifiedResponse,
    UnifiedSearchParams,
    generate_request_id,
    utc_now_iso,
)
from .rate_limiter import RateLimiter
from .sources import ADAPTERS, PortalAdapter
from .sources.base import DEFAULT_CLIENT_ID, check_formats
from .xref import CrossReferenceResolver

logger = structlog.get_logger(__name__)

UNIFIED_SOURCE = "UNIFIED_API"


def parse_sources(requested: list[str] | None) -> list[SourceName]:
    """Requested portal names in fixed order; None selects all four."""
    if not requested:
        return list(SOURCE_ORDER)
    chosen: set[SourceName] = set()
    unknown: list[str] = []
    for name in requested:
        try:
            chosen.add(SourceName.parse(name))
        except ValueError:
            unknown.append(name)
    if unknown:
        raise PortalError(
            ErrorCode.VALIDATION_ERROR,
            f"Unknown source(s): {', '.join(unknown)}. Valid sources: {', '.join(s.value for s in SOURCE_ORDER)}",
            details={"unknownSources": unknown},
            source=UNIFIED_SOURCE,
        )
    return [s for s in SOURCE_ORDER if s in chosen]


def translate_params(
    source: SourceName,
    params: UnifiedSearchParams,
    xref: Mapping[SourceName, str],
) -> PortalSearchParams:
    """Map unified parameters onto one portal's vocabulary."""
    pid = params.property_id
    fallback_pid = xref.get(SourceName.DORIS) or xref.get(SourceName.DLR) or pid
    if source is SourceName.DORIS:
        return PortalSearchParams(
            property_id=xref.get(SourceName.DORIS) or pid,
            registration_number=params.registration_number,
        )
    if source is SourceName.DLR:
        return PortalSearchParams(
            property_id=xref.get(SourceName.DLR) or pid,
            registration_number=params.registration_number,
            owner_name=params.owner_name,
        )
    if source is SourceName.CERSAI:
        asset_id = xref.get(SourceName.CERSAI)
        return PortalSearchParams(
            asset_id=asset_id,
            property_id=None if asset_id else fallback_pid,
            borrower_name=params.owner_name,
        )
    cin = xref.get(SourceName.MCA21)
    return PortalSearchParams(
        cin_number=cin,
        property_id=None if cin else fallback_pid,
        company_name=params.owner_name,
    )


class UnifiedOrchestrator:
    """Fans one unified query out to the portal adapters and merges the answers."""

    def __init__(
        self,
        settings: Settings,
        cache: ResponseCache,
        rate_limiter: RateLimiter,
        resolver: CrossReferenceResolver,
        merge_engine: MergeEngine,
        adapters: Mapping[SourceName, PortalAdapter],
    ) -> None:
        self.settings = settings
        self.cache = cache
        self.rate_limiter = rate_limiter
        self.resolver = resolver
        self.merge_engine = merge_engine
        self.adapters = dict(adapters)
        self._started_at = time.monotonic()
        self._sweepers: list[asyncio.Task] = []

    # -- lifecycle ------------------------------------------------------------

    async def start(self) -> None:
        """Start the periodic cache and rate-limit sweepers."""
        if self._sweepers:
            return
        self._sweepers = [
            asyncio.create_task(self.cache.run_sweeper(self.settings.cache_sweep_interval_seconds)),
            asyncio.create_task(self.rate_limiter.run_sweeper(self.settings.rate_limit_sweep_interval_seconds)),
        ]
        logger.debug("sweepers_started")

    async def close(self) -> None:
        for task in self._sweepers:
            task.cancel()
        for task in self._sweepers:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._sweepers = []

    async def __aenter__(self) -> UnifiedOrchestrator:
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> bool:
        await self.close()
        return False

    # -- queries --------------------------------------------------------------

    async def query_source(
        self,
        source: SourceName | str,
        params: PortalSearchParams | Mapping[str, Any],
        client_id: str = DEFAULT_CLIENT_ID,
    ) -> SourceResponse:
        """Run a single portal adapter directly."""
        try:
            key = SourceName.parse(source)
        except ValueError:
            exc = PortalError(
                ErrorCode.VALIDATION_ERROR,
                f"Unknown source: {source}",
                details={"unknownSources": [str(source)]},
                source=UNIFIED_SOURCE,
            )
            return SourceResponse(
                success=False,
                source=str(source).upper(),
                request_id=generate_request_id(),
                errors=[exc.to_api_error()],
                status_code=exc.status_code,
            )
        return await self.adapters[key].search(params, client_id=client_id)

    async def search(
        self,
        params: UnifiedSearchParams | Mapping[str, Any],
        client_id: str = DEFAULT_CLIENT_ID,
    ) -> UnifiedResponse:
        """Query the selected portals concurrently and combine the results."""
        request_id = generate_request_id()
        started = time.perf_counter()
        log = logger.bind(request_id=request_id)
        try:
            query = self._coerce(params)
            sources = self._validate(query)
            log.info("unified_request", params=query.model_dump(by_alias=True, exclude_none=True), client_id=client_id)

            cache_key = self.cache_key(query, sources)
            cached = self.cache.get(cache_key)
            if cached.hit:
                log.info("unified_cache_hit", cache_key=cache_key)
                response: UnifiedResponse = cached.data.model_copy(deep=True)
                response.metadata.cache_hit = True
                return response

            response = await self._dispatch(request_id, query, sources, client_id, started)
            # Failures stay uncached so a rate-limit or timeout error is not replayed for the whole TTL
            if response.success:
                self.cache.set(cache_key, response.model_copy(deep=True), self.settings.unified.cache_ttl_seconds)
            log.info(
                "unified_response",
                success=response.success,
                successful_sources=response.metadata.successful_sources,
                failed_sources=response.metadata.failed_sources,
                processing_time_ms=response.metadata.processing_time_ms,
            )
            return response
        except PortalError as exc:
            return self._failure(request_id, exc, started)
        except Exception as exc:
            log.exception("unified_unexpected_error")
            return self._failure(request_id, internal_error(exc, UNIFIED_SOURCE), started)

    def _coerce(self, params: UnifiedSearchParams | Mapping[str, Any]) -> UnifiedSearchParams:
        if isinstance(params, UnifiedSearchParams):
            return params
        try:
            return UnifiedSearchParams.model_validate(dict(params))
        except ValidationError as exc:
            raise PortalError(
                ErrorCode.VALIDATION_ERROR,
                "Invalid search parameters",
                details={"errors": exc.errors(include_url=False, include_context=False)},
                source=UNIFIED_SOURCE,
            ) from exc

    @staticmethod
    def _validate(query: UnifiedSearchParams) -> list[SourceName]:
        if not (query.property_id or query.registration_number or query.owner_name):
            raise PortalError(
                ErrorCode.MISSING_PARAMETERS,
                "At least one of these parameters is required: propertyId, registrationNumber, ownerName",
                details={"providedParams": sorted(query.model_dump(by_alias=True, exclude_none=True))},
                source=UNIFIED_SOURCE,
            )
        sources = parse_sources(query.sources)
        check_formats(
            {"propertyId": query.property_id, "registrationNumber": query.registration_number},
            source=UNIFIED_SOURCE,
        )
        return sources

    @staticmethod
    def cache_key(query: UnifiedSearchParams, sources: list[SourceName]) -> str:
        names = ",".join(sorted(s.value for s in sources))
        return ":".join(
            ["unified", query.property_id or "", query.registration_number or "", query.owner_name or "", names]
        )

    async def _dispatch(
        self,
        request_id: str,
        query: UnifiedSearchParams,
        sources: list[SourceName],
        client_id: str,
        started: float,
    ) -> UnifiedResponse:
        xref = self.resolver.resolve_all(query.property_id) if query.property_id else {}
        calls = [(src, translate_params(src, query, xref)) for src in sources]
        results: list[SourceResponse] = await asyncio.gather(
            *(self.adapters[src].search(p, client_id=client_id) for src, p in calls)
        )
        return self._combine(request_id, query, sources, results, started)

    def _combine(
        self,
        request_id: str,
        query: UnifiedSearchParams,
        sources: list[SourceName],
        results: list[SourceResponse],
        started: float,
    ) -> UnifiedResponse:
        data = [SourceData(source=r.source, data=r.data) for r in results if r.success]
        errors = [
            UnifiedError(source=r.source, code=e.code, message=e.message, details=e.details)
            for r in results
            if not r.success
            for e in r.errors or []
        ]

        if query.property_id:
            merged = self.merge_engine.merge_with_provenance(query.property_id, include=sources)
            answered = {r.source for r in results if r.success}
            # A lone contributor keeps its raw entry only when its own adapter answered
            lone_answer = len(merged.sources) == 1 and merged.sources[0] in answered
            if merged.record is not None and not lone_answer:
                data = [SourceData(source=MERGED_SOURCE, data=merged.record.to_wire())]

        successful = sum(1 for r in results if r.success)
        response = UnifiedResponse(
            success=bool(data),
            request_id=request_id,
            sources=[s.value for s in sources],
            data=data,
            errors=errors,
            metadata=UnifiedMetadata(
                total_sources=len(results),
                successful_sources=successful,
                failed_sources=len(results) - successful,
                processing_time_ms=round((time.perf_counter() - started) * 1000, 3),
                cache_hit=False,
            ),
        )
        response.status_code = 200 if response.success else self._failure_status(results)
        return response

    @staticmethod
    def _failure_status(results: list[SourceResponse]) -> int:
        statuses = [r.status_code for r in results if not r.success]
        if not statuses or all(s == 404 for s in statuses):
            return 404
        return max(statuses)

    def _failure(self, request_id: str, exc: PortalError, started: float) -> UnifiedResponse:
        error = exc.to_api_error()
        return UnifiedResponse(
            success=False,
            request_id=request_id,
            errors=[UnifiedError(source=error.source, code=error.code, message=error.message, details=error.details)],
            metadata=UnifiedMetadata(processing_time_ms=round((time.perf_counter() - started) * 1000, 3)),
            status_code=exc.status_code,
        )

    # -- health ---------------------------------------------------------------

    def health(self) -> dict[str, Any]:
        """Snapshot of uptime, cache occupancy and rate-limit configuration."""
        cache_stats = self.cache.stats()
        tracked = self.rate_limiter.stats()
        rate_limits = {}
        for key, adapter in self.adapters.items():
            limits = adapter.config.rate_limits
            rate_limits[key.value] = {
                "requestsPerMinute": limits.requests_per_minute,
                "burstLimit": limits.burst_limit,
                "trackedClients": sum(1 for k in tracked if k.startswith(f"{key.value}:")),
            }
        return {
            "status": "healthy",
            "version": __version__,
            "uptimeSeconds": round(time.monotonic() - self._started_at, 3),
            "timestamp": utc_now_iso(),
            "cache": {"size": cache_stats["size"], "maxEntries": self.cache.max_entries},
            "rateLimits": rate_limits,
            "sweepersRunning": any(not t.done() for t in self._sweepers),
        }


def create_orchestrator(
    settings: Settings | None = None,
    latency: LatencyStrategy | None = None,
    datasets: PortalDatasets | None = None,
    policy: MergePolicy | None = None,
    clock: Callable[[], float] = time.time,
) -> UnifiedOrchestrator:
    """Wire an orchestrator with fresh cache, limiter, resolver and adapters."""
    settings = settings or load_settings()
    datasets = datasets if datasets is not None else PortalDatasets()
    cache = ResponseCache(max_entries=settings.cache_max_entries, clock=clock)
    rate_limiter = RateLimiter(clock=clock)
    resolver = CrossReferenceResolver(datasets=datasets)
    adapters = {
        key: ADAPTERS[key](
            settings.source(key),
            cache=cache,
            rate_limiter=rate_limiter,
            resolver=resolver,
            latency=latency,
            datasets=datasets,
        )
        for key in SOURCE_ORDER
    }
    return UnifiedOrchestrator(
        settings=settings,
        cache=cache,
        rate_limiter=rate_limiter,
        resolver=resolver,
        merge_engine=MergeEngine(resolver, policy=policy),
        adapters=adapters,
    )
