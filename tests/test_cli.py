from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from property_reconciler.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def keep_logging_config(monkeypatch):
    """The CLI reconfigures logging onto the runner's temporary stderr."""
    monkeypatch.setattr("property_reconciler.logging.configure_logging", lambda level="INFO": None)


def test_search_json_merges_sources() -> None:
    result = runner.invoke(
        app,
        ["search", "--property-id", "MH1234567", "--json", "--no-latency"],
        env={},
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["success"] is True
    assert payload["data"][0]["source"] == "MERGED"
    assert payload["metadata"]["successfulSources"] == 3


def test_search_table_output() -> None:
    result = runner.invoke(
        app,
        ["search", "-p", "MH1234567", "-s", "doris", "--no-latency"],
        env={},
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "Unified Search" in result.stdout
    assert "DORIS" in result.stdout
    assert "MH1234567" in result.stdout


def test_search_failure_exits_nonzero() -> None:
    result = runner.invoke(app, ["search", "-p", "abc", "--no-latency"], env={}, catch_exceptions=False)
    assert result.exit_code == 1
    assert "VALIDATION_ERROR" in result.stdout


def test_portal_command() -> None:
    result = runner.invoke(
        app,
        ["portal", "mca21", "--param", "cinNumber=U12345MH2010PLC123456", "--no-latency"],
        env={},
        catch_exceptions=False,
    )
    assert result.exit_code == 0
    assert "ABC Properties Private Limited" in result.stdout


def test_portal_rejects_malformed_param() -> None:
    result = runner.invoke(app, ["portal", "doris", "-p", "propertyId"], env={}, catch_exceptions=False)
    assert result.exit_code == 2
    assert "expected key=value" in result.stdout


def test_resolve_prints_every_source() -> None:
    result = runner.invoke(app, ["resolve", "CERSAI345678"], env={}, catch_exceptions=False)
    assert result.exit_code == 0
    for expected in ("DORIS", "DLR", "CERSAI", "MCA21", "DL8765432", "U98765DL2012PLC987654"):
        assert expected in result.stdout


def test_resolve_unmapped_identifier() -> None:
    result = runner.invoke(app, ["resolve", "ZZ0000000"], env={}, catch_exceptions=False)
    assert result.exit_code == 0
    assert "No mapping known" in result.stdout


def test_merge_command() -> None:
    result = runner.invoke(app, ["merge", "MH7654321"], env={}, catch_exceptions=False)
    assert result.exit_code == 0
    assert "Contributing sources:" in result.stdout
    assert "MCA21" in result.stdout


def test_merge_unknown_identifier() -> None:
    result = runner.invoke(app, ["merge", "ZZ0000000"], env={}, catch_exceptions=False)
    assert result.exit_code == 1


def test_merge_unknown_source() -> None:
    result = runner.invoke(app, ["merge", "MH1234567", "-s", "land"], env={}, catch_exceptions=False)
    assert result.exit_code == 2
    assert "Unknown source" in result.stdout


def test_health() -> None:
    result = runner.invoke(app, ["health"], env={}, catch_exceptions=False)
    assert result.exit_code == 0
    assert "healthy" in result.stdout
    assert "DORIS rate limit" in result.stdout
