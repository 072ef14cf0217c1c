"""Error codes for the booking calendar application."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Authentication Errors
    AUTH_FAILED = "auth_failed"
    NOT_AUTHENTICATED = "not_authenticated"

    # API Errors
    REQUEST_FAILED = "request_failed"
    CONNECTION_ERROR = "connection_error"
    TIMEOUT = "timeout"

    # Data Errors
    INVALID_RESPONSE = "invalid_response"
    VALIDATION_FAILED = "validation_failed"

    # Resolution Errors
    RESOLUTION_FAILED = "resolution_failed"
    UNKNOWN_OBJECT = "unknown_object"

    # Configuration Errors
    CONFIG_INVALID = "config_invalid"
    CONFIG_MISSING = "config_missing"

    # Service Errors
    CACHE_ERROR = "cache_error"
    SERVICE_ERROR = "service_error"
