"""Tests for structlog configuration."""

import structlog

from relay.logging import SecretRedactor, get_logger, setup_logging


def test_configured_logger_is_filtering_bound_logger() -> None:
    setup_logging("WARNING", "json")
    try:
        logger = get_logger("relay.tests").bind()
        assert type(logger).__name__.startswith("BoundLoggerFilteringAt")
        assert not isinstance(logger, structlog.stdlib.BoundLogger)
        logger.info("suppressed_below_warning")
    finally:
        structlog.reset_defaults()


def test_secret_keys_are_redacted() -> None:
    event = SecretRedactor()(None, "info", {"event": "x", "token": "abc", "nested": {"secret": "s"}})
    assert event == {"event": "x", "token": "[REDACTED]", "nested": {"secret": "[REDACTED]"}}
