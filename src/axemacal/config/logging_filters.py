"""Logging filters and utilities."""

import logging
from typing import Any


class SensitiveDataFilter(logging.Filter):
    """Filter to mask sensitive data in logs."""

    def __init__(self, sensitive_fields: set[str] | None = None):
        """Initialize filter.

        Args:
            sensitive_fields: Set of field names to mask
        """
        super().__init__()
        self.sensitive_fields = sensitive_fields or {
            'pass', 'password', 'secret', 'user', 'cookie', 'nonce1', 'nonce2'
        }

    def _mask_sensitive_data(self, obj: Any) -> Any:
        """Recursively mask sensitive data in object."""
        if isinstance(obj, dict):
            return {
                k: '***MASKED***' if k.lower() in self.sensitive_fields else self._mask_sensitive_data(v)
                for k, v in obj.items()
            }
        if isinstance(obj, list):
            return [self._mask_sensitive_data(item) for item in obj]
        return obj

    def filter(self, record: logging.LogRecord) -> bool:
        """Mask sensitive data in log record."""
        if hasattr(record, 'extra_fields'):
            record.extra_fields = self._mask_sensitive_data(record.extra_fields)
        return True
