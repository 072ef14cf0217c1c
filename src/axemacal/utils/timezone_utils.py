"""Timezone utilities for the application."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

DEFAULT_TIMEZONE = "Europe/Stockholm"

class TimezoneManager:
    """Manages the fixed civil timezone all schedule times are read in."""

    def __init__(self, local_timezone: str = DEFAULT_TIMEZONE):
        """Initialize timezone manager.

        Args:
            local_timezone: The facility timezone. Defaults to Europe/Stockholm.

        Raises:
            ValueError: If the timezone is invalid
        """
        self.set_timezone(local_timezone)

    def set_timezone(self, timezone: str) -> None:
        """Set the local timezone.

        Args:
            timezone: IANA timezone name

        Raises:
            ValueError: If the timezone is invalid
        """
        try:
            self.local_tz = ZoneInfo(timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Invalid timezone {timezone}: {e!s}")

    def from_minutes(self, year: int, month: int, day: int, minutes: int) -> datetime:
        """Build a local datetime from a date and a minute-of-day offset.

        Offsets of 24h or more roll over into the following day.
        """
        midnight = datetime(year, month, day, tzinfo=self.local_tz)
        return midnight + timedelta(hours=minutes // 60, minutes=minutes % 60)

    @property
    def timezone_name(self) -> str:
        """Get the name of the local timezone."""
        return str(self.local_tz)

    @staticmethod
    def is_valid_timezone(timezone: str) -> bool:
        """Check if a timezone name is valid.

        Args:
            timezone: IANA timezone name to check

        Returns:
            True if timezone is valid, False otherwise
        """
        try:
            ZoneInfo(timezone)
            return True
        except (ZoneInfoNotFoundError, ValueError):
            return False
