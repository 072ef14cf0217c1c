"""Centralized error definitions for booking calendar application."""

from dataclasses import dataclass
from typing import Any

from axemacal.error_codes import ErrorCode


@dataclass
class AxemaCalError(Exception):
    """Base exception for all booking calendar errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Describe the error including its code and details."""
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class ConfigError(AxemaCalError):
    """Configuration error."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)

class APIError(AxemaCalError):
    """Base class for API-related errors."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.REQUEST_FAILED,
        endpoint: str | None = None,
        details: dict[str, Any] | None = None
    ):
        details = details or {}
        if endpoint:
            details["endpoint"] = endpoint
        super().__init__(message, code, details or None)
        self.endpoint = endpoint

class APIConnectionError(APIError):
    """Network level failure, message is the transport error verbatim."""
    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message, ErrorCode.CONNECTION_ERROR, endpoint)

class APITimeoutError(APIError):
    """API timeout error."""
    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message, ErrorCode.TIMEOUT, endpoint)

class APIResponseError(APIError):
    """Non-success HTTP status, carries the raw response body."""
    def __init__(self, endpoint: str, body: str, status_code: int | None = None):
        super().__init__(
            f"{endpoint}: {body}",
            ErrorCode.INVALID_RESPONSE,
            endpoint,
            {"status_code": status_code}
        )
        self.body = body
        self.status_code = status_code

class APIValidationError(APIError):
    """Response body could not be decoded into the expected entity."""
    def __init__(self, message: str, endpoint: str | None = None):
        super().__init__(message, ErrorCode.VALIDATION_FAILED, endpoint)

class AuthError(AxemaCalError):
    """Authentication error."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.AUTH_FAILED,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)

class ResolutionError(AxemaCalError):
    """A reservation could not be mapped to a calendar interval."""
    def __init__(
        self,
        message: str,
        booking_id: int | None = None,
        code: ErrorCode = ErrorCode.RESOLUTION_FAILED
    ):
        details = {"booking_id": booking_id} if booking_id is not None else None
        super().__init__(message, code, details)
        self.booking_id = booking_id

class CalendarError(AxemaCalError):
    """Calendar service error."""
    def __init__(self, message: str, code: ErrorCode = ErrorCode.SERVICE_ERROR, details: dict[str, Any] | None = None):
        super().__init__(message, code, details)

class CacheError(AxemaCalError):
    """Response cache storage error."""
    def __init__(self, message: str, path: str | None = None):
        super().__init__(message, ErrorCode.CACHE_ERROR, {"path": path} if path else None)
