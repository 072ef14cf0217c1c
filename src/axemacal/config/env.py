"""Environment variable handling for configuration."""

import os
from pathlib import Path
from typing import Any

from axemacal.config.types import AppConfig
from axemacal.config.types import Credentials
from axemacal.config.types import LoggingConfig
from axemacal.error_codes import ErrorCode
from axemacal.exceptions import ConfigError
from axemacal.utils.timezone_utils import DEFAULT_TIMEZONE
from axemacal.utils.timezone_utils import TimezoneManager


APP_NAME = 'axema-booking'

class EnvConfig:
    """Environment variable configuration."""

    ENDPOINT = 'AXEMA_ENDPOINT'
    USER = 'AXEMA_USER'
    PASS = 'AXEMA_PASS'

    # Checked in this order, the first missing one is reported
    REQUIRED = (ENDPOINT, USER, PASS)

    TIMEZONE = 'AXEMA_TIMEZONE'
    CACHE_DIR = 'AXEMA_CACHE_DIR'
    LOG_LEVEL = 'AXEMA_LOG_LEVEL'
    LOG_FILE = 'AXEMA_LOG_FILE'

    @staticmethod
    def get_env_value(env_var: str, default: Any | None = None) -> Any | None:
        """Get value from environment variable with default."""
        return os.getenv(env_var, default)

    @classmethod
    def require(cls, env_var: str) -> str:
        """Get a required variable, empty counts as missing."""
        value = cls.get_env_value(env_var)
        if not value:
            raise ConfigError(f"{env_var} not set", ErrorCode.CONFIG_MISSING, {"variable": env_var})
        return str(value)

    @classmethod
    def get_cache_dir(cls) -> Path:
        """Resolve the application scoped cache directory."""
        explicit = cls.get_env_value(cls.CACHE_DIR)
        if explicit:
            return Path(explicit)
        xdg_cache = cls.get_env_value('XDG_CACHE_HOME')
        base = Path(xdg_cache) if xdg_cache else Path.home() / '.cache'
        return base / APP_NAME / 'cache'

    @classmethod
    def get_timezone(cls) -> str:
        """Get the facility timezone, validated."""
        timezone = str(cls.get_env_value(cls.TIMEZONE, DEFAULT_TIMEZONE))
        if not TimezoneManager.is_valid_timezone(timezone):
            raise ConfigError(f"{cls.TIMEZONE} is not a valid timezone: {timezone}", details={"variable": cls.TIMEZONE})
        return timezone

    @classmethod
    def get_logging_config(cls) -> LoggingConfig:
        """Get logging configuration from environment."""
        return LoggingConfig(
            level=str(cls.get_env_value(cls.LOG_LEVEL, 'WARNING')).upper(),
            file=cls.get_env_value(cls.LOG_FILE)
        )

    @classmethod
    def load(cls) -> AppConfig:
        """Build the application configuration.

        Raises:
            ConfigError: If a required variable is missing or a value is invalid
        """
        endpoint, user, secret = (cls.require(name) for name in cls.REQUIRED)
        return AppConfig(
            endpoint=endpoint,
            credentials=Credentials(user=user, secret=secret),
            timezone=cls.get_timezone(),
            cache_dir=cls.get_cache_dir(),
            logging=cls.get_logging_config()
        )
