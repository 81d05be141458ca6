"""Tests for the fixed-window rate limiter."""

import pytest

from property_reconciler.config import RateLimits
from property_reconciler.errors import ErrorCode, PortalError


class TestRateLimiter:
    """Window and burst boundaries."""

    def test_window_boundary(self, rate_limiter, clock):
        """N spaced calls are allowed, the N+1th is refused."""
        limits = RateLimits(requests_per_minute=5, burst_limit=5)
        for i in range(5):
            status = rate_limiter.check_rate_limit("doris", "c1", limits)
            assert status.allowed, f"call {i + 1} should be allowed"
            assert status.remaining == 5 - (i + 1)
            clock.advance(1.5)

        refused = rate_limiter.check_rate_limit("doris", "c1", limits)
        assert refused.allowed is False
        assert refused.remaining == 0

    def test_burst_boundary(self, rate_limiter, clock):
        """Rapid calls stop at the burst limit even with quota left."""
        limits = RateLimits(requests_per_minute=60, burst_limit=3)
        results = [rate_limiter.check_rate_limit("dlr", "c1", limits).allowed for _ in range(4)]
        assert results == [True, True, True, False]

        clock.advance(1.1)
        assert rate_limiter.check_rate_limit("dlr", "c1", limits).allowed is True

    def test_refused_calls_do_not_consume(self, rate_limiter):
        limits = RateLimits(requests_per_minute=10, burst_limit=1)
        assert rate_limiter.check_rate_limit("cersai", "c1", limits).allowed
        for _ in range(3):
            assert not rate_limiter.check_rate_limit("cersai", "c1", limits).allowed
        assert rate_limiter.stats()["cersai:c1"]["count"] == 1

    def test_window_resets(self, rate_limiter, clock):
        limits = RateLimits(requests_per_minute=2, burst_limit=2)
        rate_limiter.check_rate_limit("mca21", "c1", limits)
        rate_limiter.check_rate_limit("mca21", "c1", limits)
        assert not rate_limiter.check_rate_limit("mca21", "c1", limits).allowed

        clock.advance(61)
        status = rate_limiter.check_rate_limit("mca21", "c1", limits)
        assert status.allowed
        assert status.remaining == 1

    def test_keys_are_independent(self, rate_limiter):
        limits = RateLimits(requests_per_minute=1, burst_limit=1)
        assert rate_limiter.check_rate_limit("doris", "a", limits).allowed
        assert rate_limiter.check_rate_limit("doris", "b", limits).allowed
        assert rate_limiter.check_rate_limit("dlr", "a", limits).allowed
        assert not rate_limiter.check_rate_limit("doris", "a", limits).allowed

    def test_handle_rate_limit_raises(self, rate_limiter):
        limits = RateLimits(requests_per_minute=1, burst_limit=1)
        rate_limiter.handle_rate_limit("doris", "c1", limits)

        with pytest.raises(PortalError) as exc_info:
            rate_limiter.handle_rate_limit("doris", "c1", limits)

        err = exc_info.value
        assert err.code is ErrorCode.RATE_LIMIT_EXCEEDED
        assert err.source == "DORIS"
        assert err.status_code == 400
        assert err.details["remaining"] == 0
        assert err.details["resetAt"].endswith("Z")

    def test_sweep_drops_expired_records(self, rate_limiter, clock):
        limits = RateLimits()
        rate_limiter.check_rate_limit("doris", "old", limits)
        clock.advance(30)
        rate_limiter.check_rate_limit("doris", "new", limits)
        clock.advance(31)

        assert rate_limiter.sweep() == 1
        assert list(rate_limiter.stats()) == ["doris:new"]
