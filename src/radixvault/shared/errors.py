"""RadixVault Error Handling Module

This module defines the error handling system for RadixVault, providing
structured error classes with context information and user-friendly messages.

The error hierarchy follows these principles:
- One Source of Truth: All error codes are defined in ErrorCode enum
- Structured Context: ErrorContext provides additional information
- Normalized Network Failures: every HTTP/transport failure leaves the
  fetch layer as one of the RadixVaultNetworkError subclasses
- Proper Exception Chaining: Original exceptions are preserved
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Type alias for primitive context values (str, int, float, bool only)
PrimitiveContextValue = Union[str, int, float, bool]

# Default keys to mask in safe_dict
SAFE_DICT_MASK_KEYS: tuple[str, ...] = ("token",)


class ErrorCode(str, Enum):
    """Error codes for RadixVault.

    This enum serves as the single source of truth for all error codes
    used throughout the application.
    """

    # Network and API Errors
    NETWORK_ERROR = "NETWORK_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"
    API_RATE_LIMIT = "API_RATE_LIMIT"
    API_AUTHENTICATION_FAILED = "API_AUTHENTICATION_FAILED"
    API_REQUEST_FAILED = "API_REQUEST_FAILED"
    API_TIMEOUT = "API_TIMEOUT"
    API_SERVER_ERROR = "API_SERVER_ERROR"
    API_INVALID_RESPONSE = "API_INVALID_RESPONSE"

    # Validation Errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNSUPPORTED_LIBRARY = "UNSUPPORTED_LIBRARY"

    # Cache Errors
    CACHE_ERROR = "CACHE_ERROR"

    # Configuration Errors
    CONFIG_ERROR = "CONFIG_ERROR"

    # CLI Errors
    CLI_UNEXPECTED_ERROR = "CLI_UNEXPECTED_ERROR"


def _coerce_primitives(value: Any | None) -> dict[str, PrimitiveContextValue] | None:
    """Coerce additional_data values to primitives.

    Converts Path and Enum to primitive types.

    Args:
        value: Input dictionary or None

    Returns:
        Dictionary with primitive values only, or None

    Raises:
        TypeError: If value is not a dict or contains unconvertible types
    """
    if value is None:
        return None

    if not isinstance(value, dict):
        error_msg = f"additional_data must be dict, got {type(value).__name__}"
        raise TypeError(error_msg)

    coerced: dict[str, PrimitiveContextValue] = {}
    for key, val in value.items():
        if isinstance(val, Enum):
            coerced[key] = val.value
        elif isinstance(val, (str, int, float, bool)):
            coerced[key] = val
        elif isinstance(val, Path):
            coerced[key] = str(val)
        elif val is None:
            continue
        else:
            error_msg = (
                f"Cannot coerce {type(val).__name__} to primitive type. "
                f"Only str, int, float, bool, Path, Enum are allowed."
            )
            raise TypeError(error_msg)

    return coerced


@dataclass(frozen=True)
class ErrorContext:
    """Context information for errors.

    Only primitive types (str, int, float, bool) are allowed in
    additional_data to keep log records serializable.

    Attributes:
        operation: Optional operation name that caused the error
        identifier: Optional resource identifier (component or scale name)
        url: Optional remote URL involved in the failure
        additional_data: Optional dict with primitive values only
    """

    operation: str | None = None
    identifier: str | None = None
    url: str | None = None
    additional_data: dict[str, PrimitiveContextValue] | None = None

    def __post_init__(self) -> None:
        """Post-initialization validation and coercion."""
        if self.additional_data is not None:
            coerced = _coerce_primitives(self.additional_data)
            object.__setattr__(self, "additional_data", coerced)

    def safe_dict(self, *, mask_keys: tuple[str, ...] | None = None) -> dict[str, Any]:
        """Export context as dict with sensitive keys masked.

        Args:
            mask_keys: Keys to drop from additional_data. Defaults to SAFE_DICT_MASK_KEYS.

        Returns:
            Dictionary with a guaranteed ``additional_data`` key.
        """
        if mask_keys is None:
            mask_keys = SAFE_DICT_MASK_KEYS

        data: dict[str, Any] = {}
        if self.operation is not None:
            data["operation"] = self.operation
        if self.identifier is not None:
            data["identifier"] = self.identifier
        if self.url is not None:
            data["url"] = self.url

        extra = self.additional_data or {}
        data["additional_data"] = {k: v for k, v in extra.items() if k not in mask_keys}
        return data


class RadixVaultError(Exception):
    """Base exception class for all RadixVault errors."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        """Initialize RadixVaultError.

        Args:
            code: Error code from ErrorCode enum
            message: Human-readable error message
            context: Additional context information
            original_error: Original exception that caused this error
        """
        self.code = code
        self.message = message
        self.context = context or ErrorContext()
        self.original_error = original_error

        super().__init__(f"{code.value}: {message}")

    def __str__(self) -> str:
        """Return string representation of the error."""
        return f"{self.code.value}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging and JSON output."""
        return {
            "code": self.code.value,
            "message": self.message,
            "context": self.context.safe_dict(),
            "original_error": str(self.original_error) if self.original_error else None,
        }


class DomainError(RadixVaultError):
    """Domain-specific errors.

    Raised when a request violates a rule of the resolution domain,
    e.g. an unknown library or an invalid component name.
    """


class InfrastructureError(RadixVaultError):
    """Infrastructure-related errors.

    Raised when interacting with external systems (GitHub API,
    raw file host, file system).
    """


class ApplicationError(RadixVaultError):
    """Application-level errors.

    Configuration problems, programming errors and CLI flow errors.
    """


class RadixVaultNetworkError(InfrastructureError):
    """Base class for normalized network failures.

    Attributes:
        status_code: HTTP status that triggered the failure, if any
    """

    default_code: ErrorCode = ErrorCode.NETWORK_ERROR

    def __init__(
        self,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        status_code: int | None = None,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(code or self.default_code, message, context, original_error)
        self.status_code = status_code


class NotFoundError(RadixVaultNetworkError):
    """Identifier absent after exhausting all candidates or files (404)."""

    default_code = ErrorCode.RESOURCE_NOT_FOUND


class RateLimitError(RadixVaultNetworkError):
    """Host refused the request with 403 (GitHub rate limit)."""

    default_code = ErrorCode.API_RATE_LIMIT


class AuthenticationError(RadixVaultNetworkError):
    """Host rejected the credentials (401)."""

    default_code = ErrorCode.API_AUTHENTICATION_FAILED


class NetworkTimeoutError(RadixVaultNetworkError):
    """Transport failure or exhausted transient-status retries."""

    default_code = ErrorCode.API_TIMEOUT


class UpstreamError(RadixVaultNetworkError):
    """Any other non-2xx answer from the remote host."""

    default_code = ErrorCode.API_SERVER_ERROR


class MalformedResponseError(RadixVaultNetworkError):
    """Listing endpoint returned something other than a JSON array."""

    default_code = ErrorCode.API_INVALID_RESPONSE


# Errors on which directory listing degrades to the static catalog
LISTING_FALLBACK_ERRORS: tuple[type[RadixVaultNetworkError], ...] = (
    RateLimitError,
    AuthenticationError,
    NetworkTimeoutError,
    NotFoundError,
    MalformedResponseError,
)


def create_not_found_error(
    identifier: str,
    message: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> NotFoundError:
    """Create a not found error naming the identifier."""
    context = ErrorContext(operation=operation, identifier=identifier)
    return NotFoundError(
        message or f'"{identifier}" not found in repository',
        context,
        original_error,
    )


def create_validation_error(
    message: str,
    field: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> DomainError:
    """Create a validation error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"field": field} if field else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return DomainError(
        ErrorCode.VALIDATION_ERROR,
        message,
        context,
        original_error,
    )


def create_config_error(
    message: str,
    config_key: str | None = None,
    operation: str | None = None,
    original_error: Exception | None = None,
) -> ApplicationError:
    """Create a configuration error with context."""
    additional_data: dict[str, PrimitiveContextValue] | None = (
        {"config_key": config_key} if config_key else None
    )
    context = ErrorContext(
        operation=operation,
        additional_data=additional_data,
    )
    return ApplicationError(
        ErrorCode.CONFIG_ERROR,
        message,
        context,
        original_error,
    )


class CliError(ApplicationError):
    """CLI-specific error with enhanced context for command-line operations."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
        command: str | None = None,
        exit_code: int = 1,
    ):
        super().__init__(code, message, context, original_error)
        self.command = command
        self.exit_code = exit_code
