"""Type definitions for configuration."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Credentials:
    """Login credentials for the booking service."""
    user: str
    secret: str = field(repr=False)

@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""
    level: str = 'WARNING'
    file: str | None = None

@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""
    endpoint: str
    credentials: Credentials
    timezone: str
    cache_dir: Path
    logging: LoggingConfig = field(default_factory=LoggingConfig)
