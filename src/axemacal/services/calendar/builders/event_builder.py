"""Event builder for calendar events."""

from datetime import UTC, datetime

from icalendar import Event, vText

from axemacal.models.event import ResolvedEvent
from axemacal.utils.logging_utils import LoggerMixin


class ReservationEventBuilder(LoggerMixin):
    """Event builder for resolved reservations."""

    def build(self, resolved: ResolvedEvent, stamp: datetime | None = None) -> Event:
        """Build an event from a resolved reservation."""
        event = Event()
        event.add('uid', vText(resolved.uid))
        event.add('summary', resolved.summary)
        event.add('dtstart', resolved.start)
        event.add('dtend', resolved.end)
        event.add('dtstamp', stamp or datetime.now(UTC))
        return event
