"""
Network Configuration Constants

This module contains all constants related to HTTP fetching, retry
behaviour and request throttling.
"""

from typing import ClassVar

from .system import BASE_SECOND


class NetworkConfig:
    """Network configuration constants."""

    # Timeout settings
    DEFAULT_TIMEOUT = 30 * BASE_SECOND

    # Retry settings (additional attempts after the first one)
    DEFAULT_RETRIES = 2
    RETRY_DELAY = 0.5 * BASE_SECOND
    MAX_RETRY_DELAY = 60 * BASE_SECOND

    # Statuses retried on every host
    RETRY_STATUS_CODES: ClassVar[frozenset[int]] = frozenset(
        {408, 429, 500, 502, 503, 504},
    )
    # Statuses retried only on the metadata API
    METADATA_EXTRA_RETRY_STATUS_CODES: ClassVar[frozenset[int]] = frozenset({413})
    # Transient statuses reported as timeouts once retries are exhausted
    TIMEOUT_STATUS_CODES: ClassVar[frozenset[int]] = frozenset({408, 504})

    # Throttle: one outbound call in flight at a time
    DEFAULT_CONCURRENT_REQUESTS = 1


class HTTPStatusCodes:
    """HTTP status code constants."""

    OK = 200
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429

    @staticmethod
    def is_success(code: int) -> bool:
        """Check if status code indicates success (2xx)."""
        return 200 <= code < 300

    @staticmethod
    def is_server_error(code: int) -> bool:
        """Check if status code indicates server error (5xx)."""
        return 500 <= code < 600


__all__ = ["HTTPStatusCodes", "NetworkConfig"]
