"""
Calendar service for booking calendar application.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import BinaryIO
from zoneinfo import ZoneInfo

from icalendar import Calendar

from axemacal.exceptions import CalendarError
from axemacal.models.event import ResolvedEvent
from axemacal.services.calendar.builders import CalendarBuilder
from axemacal.services.calendar.builders import ReservationEventBuilder
from axemacal.utils.logging_utils import EnhancedLoggerMixin
from axemacal.utils.timezone_utils import DEFAULT_TIMEZONE


class CalendarService(EnhancedLoggerMixin):
    """Turns resolved reservations into an iCalendar document."""

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        """Initialize service."""
        super().__init__()
        self.local_tz = ZoneInfo(timezone)
        self.calendar_builder = CalendarBuilder(local_tz=self.local_tz)
        self.reservation_builder = ReservationEventBuilder()
        self.set_log_context(service="calendar")

    def build_calendar(self, events: Iterable[ResolvedEvent]) -> Calendar:
        """Create a calendar holding one event per reservation."""
        calendar = self.calendar_builder.build_base_calendar()
        seen_uids: set[str] = set()
        for resolved in events:
            if resolved.uid in seen_uids:
                self.warning("Skipping duplicate event", uid=resolved.uid)
                continue
            seen_uids.add(resolved.uid)
            calendar.add_component(self.reservation_builder.build(resolved))
        self.debug(f"Built calendar with {len(seen_uids)} events")
        return calendar

    @staticmethod
    def serialize(calendar: Calendar) -> bytes:
        return calendar.to_ical()

    def write_calendar(self, calendar: Calendar, stream: BinaryIO) -> None:
        """Write the serialized calendar to a binary stream."""
        data = self.serialize(calendar)
        try:
            stream.write(data)
            stream.flush()
        except OSError as e:
            raise CalendarError(f"Failed to write calendar: {e!s}")
        self.debug(f"Wrote {len(data)} bytes of calendar data")

    def write_calendar_file(self, calendar: Calendar, file_path: Path) -> None:
        """Write calendar to file."""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'wb') as f:
                self.write_calendar(calendar, f)
        except OSError as e:
            raise CalendarError(f"Failed to write calendar file {file_path}: {e!s}", details={"file_path": str(file_path)})
        self.logger.info(f"Created calendar file: {file_path}")
