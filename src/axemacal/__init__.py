"""
Laundry booking calendar application.
"""

__version__ = '0.1.0'

from .exceptions import (
    APIConnectionError,
    APIError,
    APIResponseError,
    APITimeoutError,
    APIValidationError,
    AuthError,
    AxemaCalError,
    CacheError,
    CalendarError,
    ConfigError,
    ResolutionError,
)

__all__ = [
    'APIConnectionError',
    'APIError',
    'APIResponseError',
    'APITimeoutError',
    'APIValidationError',
    'AuthError',
    'AxemaCalError',
    'CacheError',
    'CalendarError',
    'ConfigError',
    'ResolutionError',
]
