"""Error taxonomy for inbound request handling and outbound delivery."""

from __future__ import annotations


class RelayError(Exception):
    """Base error; ``status_code`` is the HTTP status it maps to at the boundary."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class AuthenticationFailure(RelayError):
    """Missing or invalid request signature."""

    status_code = 401


class UnsupportedEvent(RelayError):
    """Unknown command name or unrecognised payload shape."""

    status_code = 400


class MissingRequiredOption(RelayError):
    """A command was invoked without one of its named options."""

    status_code = 400

    def __init__(self, option: str) -> None:
        super().__init__(f"missing required option: {option}")
        self.option = option


class DeliveryError(RelayError):
    """Outbound send to Discord failed. Logged, never surfaced to callers."""

    status_code = 502
