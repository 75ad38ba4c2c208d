"""Where: src/spotimeta/platform/spotify/errors.py
What: Exception hierarchy raised by the Spotify Metadata client.
Why: Let callers distinguish bad input, rate limiting and broken payloads.
"""

from __future__ import annotations


class SpotimetaError(Exception):
    """Base class for every error raised by spotimeta."""


class ConfigurationError(SpotimetaError):
    """Raised when the response format (or another setting) is missing or invalid."""


class InvalidArgumentError(SpotimetaError, ValueError):
    """Raised before any request when a page number or detail level is invalid."""


class RequestError(SpotimetaError):
    """Raised when the service answers with an unexpected HTTP status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code: int = status_code


class RateLimitError(RequestError):
    """Raised when the service refuses the request because of rate limiting (HTTP 403)."""

    def __init__(self, message: str = "Spotify rate limiting has kicked in") -> None:
        super().__init__(message, status_code=403)


class DecodeError(SpotimetaError, ValueError):
    """Raised when a response body cannot be parsed in the configured format."""

    def __init__(self, message: str, response_format: str) -> None:
        super().__init__(message)
        self.response_format: str = response_format


__all__ = [
    "ConfigurationError",
    "DecodeError",
    "InvalidArgumentError",
    "RateLimitError",
    "RequestError",
    "SpotimetaError",
]
