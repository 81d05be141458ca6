"""Tests for the structlog configuration."""

import structlog

from property_reconciler.logging import EVENT_BUFFER, RecentEventBuffer, configure_logging, recent_events


class TestRecentEventBuffer:
    def test_keeps_last_events(self):
        buffer = RecentEventBuffer(maxlen=2)
        for i in range(3):
            buffer(None, "info", {"event": f"e{i}", "level": "info"})
        assert [e["event"] for e in buffer.events()] == ["e1", "e2"]

    def test_level_filter(self):
        buffer = RecentEventBuffer()
        buffer(None, "info", {"event": "a", "level": "info"})
        buffer(None, "warning", {"event": "b", "level": "warning"})
        assert [e["event"] for e in buffer.events(level="WARNING")] == ["b"]


class TestConfigureLogging:
    def test_unknown_level_falls_back_to_info(self):
        configure_logging("chatty")
        configure_logging("INFO")

    def test_rate_limit_refusal_is_recorded(self, rate_limiter):
        from property_reconciler.config import RateLimits

        EVENT_BUFFER.clear()
        limits = RateLimits(requests_per_minute=1, burst_limit=1)
        rate_limiter.check_rate_limit("doris", "c1", limits)
        rate_limiter.check_rate_limit("doris", "c1", limits)

        warnings = recent_events(level="warning")
        assert any(e["event"] == "rate_limit_exceeded" and e["key"] == "doris:c1" for e in warnings)

    def test_bound_context_is_kept(self):
        EVENT_BUFFER.clear()
        structlog.get_logger("test").bind(request_id="req_1").info("probe")
        assert recent_events()[-1]["request_id"] == "req_1"
