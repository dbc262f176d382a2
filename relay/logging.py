"""Structured logging setup built on structlog."""

from __future__ import annotations

import sys
from collections.abc import MutableMapping
from typing import Any, cast

import structlog
from structlog.typing import EventDict, FilteringBoundLogger, WrappedLogger

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "secret",
        "token",
        "authorization",
        "signature",
        "public_key",
        "bearer",
    }
)

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class SecretRedactor:
    """Processor that masks credential-looking keys in log events."""

    def __call__(
        self,
        _logger: WrappedLogger,
        _method_name: str,
        event_dict: EventDict,
    ) -> EventDict:
        return cast(EventDict, self._redact(event_dict))

    def _redact(self, data: MutableMapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key.lower() in SENSITIVE_KEYS:
                result[key] = "[REDACTED]"
            elif isinstance(value, dict):
                result[key] = self._redact(value)
            else:
                result[key] = value
        return result


def setup_logging(level: str = "INFO", format: str = "console") -> None:
    """Configure structlog.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        format: "json" for production, "console" for development
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        SecretRedactor(),
    ]
    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            LEVELS.get(level.upper(), 20)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Logger bound to ``name`` (usually ``__name__``)."""
    return cast(FilteringBoundLogger, structlog.get_logger(name))
