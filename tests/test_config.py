"""Tests for the source registry and settings."""

import pytest

from property_reconciler.config import (
    SOURCE_ORDER,
    SourceName,
    build_source_config,
    load_settings,
)


class TestSourceName:
    """SourceName parsing."""

    def test_parse_is_case_insensitive(self):
        assert SourceName.parse("DORIS") is SourceName.DORIS
        assert SourceName.parse(" Mca21 ") is SourceName.MCA21
        assert SourceName.parse(SourceName.DLR) is SourceName.DLR

    def test_parse_rejects_unknown(self):
        with pytest.raises(ValueError):
            SourceName.parse("dors")

    def test_label_is_upper_case(self):
        assert SourceName.CERSAI.label == "CERSAI"

    def test_fixed_order(self):
        assert [s.value for s in SOURCE_ORDER] == ["doris", "dlr", "cersai", "mca21"]


class TestSourceDefaults:
    """Per-portal defaults."""

    @pytest.mark.parametrize(
        "source,rpm,burst,timeout_ms,latency",
        [
            (SourceName.DORIS, 50, 8, 8000, (300, 800)),
            (SourceName.DLR, 40, 6, 12000, (500, 1000)),
            (SourceName.CERSAI, 30, 5, 15000, (700, 1500)),
            (SourceName.MCA21, 20, 4, 20000, (800, 2000)),
        ],
    )
    def test_defaults(self, source, rpm, burst, timeout_ms, latency):
        cfg = build_source_config(source)
        assert cfg.rate_limits.requests_per_minute == rpm
        assert cfg.rate_limits.burst_limit == burst
        assert cfg.timeout_ms == timeout_ms
        assert (cfg.response_time.min_ms, cfg.response_time.max_ms) == latency
        assert cfg.cache_ttl_seconds == 300
        assert cfg.retries == 3

    def test_parameter_declaration_order(self):
        cfg = build_source_config(SourceName.CERSAI)
        assert cfg.all_params == ["assetId", "propertyId", "borrowerName", "lenderName", "securityType"]


class TestLoadSettings:
    """Environment overrides."""

    def test_base_settings(self):
        settings = load_settings()
        assert settings.unified.cache_ttl_seconds == 600
        assert settings.unified.timeout_ms == 30_000
        assert settings.cache_sweep_interval_seconds == 300
        assert settings.rate_limit_sweep_interval_seconds == 60
        assert settings.cache_max_entries is None

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("RATE_DORIS_RPM", "5")
        monkeypatch.setenv("RATE_DORIS_BURST", "2")
        monkeypatch.setenv("TIMEOUT_MCA21_MS", "100")
        monkeypatch.setenv("CACHE_MAX_ENTRIES", "10")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.source("doris").rate_limits.requests_per_minute == 5
        assert settings.source("doris").rate_limits.burst_limit == 2
        assert settings.source(SourceName.MCA21).timeout_ms == 100
        assert settings.cache_max_entries == 10
        assert settings.log_level == "DEBUG"

    def test_malformed_env_falls_back(self, monkeypatch):
        monkeypatch.setenv("RATE_DLR_RPM", "lots")
        settings = load_settings()
        assert settings.source("dlr").rate_limits.requests_per_minute == 40
