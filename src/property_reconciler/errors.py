"""Error taxonomy shared by every adapter and the orchestrator."""
from __future__ import annotations

import traceback
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

logger = structlog.get_logger(__name__)


class ErrorCode(str, Enum):
    """Fixed error codes surfaced in response envelopes."""

    MISSING_PARAMETERS = "MISSING_PARAMETERS"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"
    # Upstream categories, only raised when a portal integration is real
    PORTAL_UNAVAILABLE = "PORTAL_UNAVAILABLE"
    PORTAL_TIMEOUT = "PORTAL_TIMEOUT"
    PORTAL_ERROR = "PORTAL_ERROR"
    TRANSFORMATION_ERROR = "TRANSFORMATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.PORTAL_UNAVAILABLE: 502,
    ErrorCode.PORTAL_ERROR: 502,
    ErrorCode.PORTAL_TIMEOUT: 504,
    ErrorCode.TRANSFORMATION_ERROR: 500,
    ErrorCode.INTERNAL_SERVER_ERROR: 500,
}

TRANSIENT_CODES = frozenset({ErrorCode.PORTAL_TIMEOUT, ErrorCode.PORTAL_UNAVAILABLE})


def status_for(code: ErrorCode | str) -> int:
    """HTTP-equivalent status for an error code (400 unless listed)."""
    return _STATUS_BY_CODE.get(ErrorCode(code), 400)


class ApiError(BaseModel):
    """Serialisable error object: ``{code, message, details?, source?}``."""

    model_config = ConfigDict(use_enum_values=True)

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = None
    source: str | None = None


@dataclass
class PortalError(Exception):
    """Raised inside adapters, validators and normalisers.

    Converted to an ApiError at the envelope boundary; never escapes the
    orchestrator.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] | None = field(default=None)
    source: str | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)
        logger.error(
            "api_error",
            code=self.code.value,
            message=self.message,
            source=self.source,
        )

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def status_code(self) -> int:
        return status_for(self.code)

    @property
    def is_transient(self) -> bool:
        return self.code in TRANSIENT_CODES

    def to_api_error(self) -> ApiError:
        return ApiError(code=self.code, message=self.message, details=self.details, source=self.source)


def internal_error(exc: BaseException, source: str | None = None) -> PortalError:
    """Wrap an unexpected exception as INTERNAL_SERVER_ERROR."""
    return PortalError(
        ErrorCode.INTERNAL_SERVER_ERROR,
        str(exc) or "An unexpected error occurred",
        details={
            "exceptionType": type(exc).__name__,
            "stack": "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        },
        source=source,
    )
