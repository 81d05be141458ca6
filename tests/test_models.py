"""Tests for envelopes, parameters and the error taxonomy."""

import re

import pytest

from property_reconciler.errors import ErrorCode, PortalError, internal_error, status_for
from property_reconciler.models import (
    PortalSearchParams,
    SourceResponse,
    StandardPropertyRecord,
    UnifiedSearchParams,
    generate_request_id,
)


class TestRequestId:
    def test_format(self):
        assert re.fullmatch(r"req_[0-9a-z]+_[0-9a-z]{8}", generate_request_id())

    def test_unique(self):
        assert len({generate_request_id() for _ in range(50)}) == 50


class TestSearchParams:
    def test_blank_values_become_none(self):
        params = PortalSearchParams.model_validate({"propertyId": "  ", "ownerName": " Kumar "})
        assert params.property_id is None
        assert params.owner_name == "Kumar"
        assert params.provided() == {"ownerName": "Kumar"}

    def test_lookup_by_wire_name(self):
        params = PortalSearchParams(sub_registrar_office="Bandra")
        assert params.get("subRegistrarOffice") == "Bandra"
        assert params.get("district") is None

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("doris, dlr", ["doris", "dlr"]),
            (["cersai", " "], ["cersai"]),
            ("", None),
            (None, None),
        ],
    )
    def test_unified_sources(self, raw, expected):
        assert UnifiedSearchParams(sources=raw).sources == expected


class TestEnvelopes:
    def test_status_code_not_serialised(self):
        response = SourceResponse(success=True, source="DORIS", request_id="req_1", status_code=201)
        wire = response.to_wire()
        assert "statusCode" not in wire
        assert wire["requestId"] == "req_1"
        assert wire["timestamp"].endswith("Z")

    def test_record_round_trips_camel_case(self):
        record = StandardPropertyRecord.model_validate({"propertyId": "MH1234567", "dataSource": "DORIS"})
        assert record.to_wire() == {"propertyId": "MH1234567", "dataSource": "DORIS"}


class TestErrors:
    @pytest.mark.parametrize(
        "code,status",
        [
            (ErrorCode.MISSING_PARAMETERS, 400),
            (ErrorCode.VALIDATION_ERROR, 400),
            (ErrorCode.RATE_LIMIT_EXCEEDED, 400),
            (ErrorCode.NOT_FOUND, 404),
            (ErrorCode.PORTAL_UNAVAILABLE, 502),
            (ErrorCode.PORTAL_ERROR, 502),
            (ErrorCode.PORTAL_TIMEOUT, 504),
            (ErrorCode.TRANSFORMATION_ERROR, 500),
            (ErrorCode.INTERNAL_SERVER_ERROR, 500),
        ],
    )
    def test_status_mapping(self, code, status):
        assert status_for(code) == status
        assert status_for(code.value) == status

    def test_transient_codes(self):
        assert PortalError(ErrorCode.PORTAL_TIMEOUT, "slow").is_transient
        assert not PortalError(ErrorCode.NOT_FOUND, "gone").is_transient

    def test_api_error_omits_empty_fields(self):
        error = PortalError(ErrorCode.NOT_FOUND, "gone").to_api_error()
        assert error.model_dump(exclude_none=True) == {"code": "NOT_FOUND", "message": "gone"}

    def test_internal_error_wraps_exception(self):
        try:
            raise KeyError("boom")
        except KeyError as exc:
            err = internal_error(exc, source="DLR")
        assert err.code is ErrorCode.INTERNAL_SERVER_ERROR
        assert err.details["exceptionType"] == "KeyError"
        assert "Traceback" in err.details["stack"]
        assert err.source == "DLR"
