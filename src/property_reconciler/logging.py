"""Structlog-based logging for Property Reconciler.

Library code logs through structlog only; no print() outside the CLI.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Literal

import logging
import sys

import structlog

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

MAX_BUFFERED_EVENTS = 1000


class RecentEventBuffer:
    """Structlog processor keeping the most recent events in memory."""

    def __init__(self, maxlen: int = MAX_BUFFERED_EVENTS) -> None:
        self._events: deque[dict[str, Any]] = deque(maxlen=maxlen)

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        self._events.append(dict(event_dict))
        return event_dict

    def events(self, level: str | None = None, limit: int = 100) -> list[dict[str, Any]]:
        items = list(self._events)
        if level:
            items = [e for e in items if e.get("level") == level.lower()]
        return items[-limit:]

    def clear(self) -> None:
        self._events.clear()


EVENT_BUFFER = RecentEventBuffer()


def configure_logging(level: LogLevel | str = "INFO") -> None:
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(format="%(message)s", level=numeric)
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="ISO"),
            structlog.processors.format_exc_info,
            EVENT_BUFFER,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "property_reconciler"):
    return structlog.get_logger(name)


def recent_events(level: str | None = None, limit: int = 100) -> list[dict[str, Any]]:
    """Return the last buffered log events, optionally filtered by level."""
    return EVENT_BUFFER.events(level=level, limit=limit)


# Initialize default config
configure_logging()
