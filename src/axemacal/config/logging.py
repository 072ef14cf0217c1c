"""Logging configuration utilities."""

import logging
import sys
from datetime import datetime

from axemacal.config.logging_filters import SensitiveDataFilter
from axemacal.exceptions import ConfigError


class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_color: bool = True):
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color.

        Args:
            record: Log record to format

        Returns:
            Colored string
        """
        color = self.COLORS.get(record.levelname, self.RESET) if self.use_color else ''
        reset = self.RESET if self.use_color else ''

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]
        msg = record.getMessage()

        context = ""
        if hasattr(record, 'extra_fields'):
            fields = []
            for key, value in record.extra_fields.items():
                fields.append(f"\n    {key}: {value}")
            if fields:
                context = " |" + "".join(fields)

        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"

        return f"{color}{timestamp} - {record.name} - {record.levelname} - {msg}{context}{reset}"

def get_console_handler(formatter: logging.Formatter) -> logging.StreamHandler:
    """Create console handler.

    Logs go to stderr, stdout is reserved for the calendar document.
    """
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    return console_handler

def setup_logging(level: str = 'WARNING', verbose: bool = False, log_file: str | None = None) -> None:
    """Set up logging configuration.

    Raises:
        ConfigError: If the log file cannot be opened
    """
    root_logger = logging.getLogger()
    console_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(logging.DEBUG if log_file else console_level)

    # Clear any existing handlers
    root_logger.handlers.clear()

    sensitive_filter = SensitiveDataFilter()

    console_handler = get_console_handler(ColoredFormatter(use_color=sys.stderr.isatty()))
    console_handler.setLevel(console_level)
    console_handler.addFilter(sensitive_filter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
        except OSError as e:
            raise ConfigError(f"Cannot open log file {log_file}: {e!s}", details={"file": log_file}) from e
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))
        file_handler.addFilter(sensitive_filter)
        root_logger.addHandler(file_handler)

    # Quiet chatty libraries unless explicitly debugging
    if not verbose:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
