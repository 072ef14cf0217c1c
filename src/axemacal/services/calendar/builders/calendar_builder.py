"""
Calendar builder for booking calendar application.
"""

from zoneinfo import ZoneInfo

from icalendar import Calendar
from icalendar import vText

from axemacal.utils.logging_utils import LoggerMixin


class CalendarBuilder(LoggerMixin):
    """Builder for calendar objects."""

    PRODID = '-//Axema Booking Calendar//EN'

    def __init__(self, local_tz: ZoneInfo):
        """Initialize calendar builder."""
        super().__init__()
        self.local_tz = local_tz

    def build_base_calendar(self, name: str = 'Laundry Reservations') -> Calendar:
        """Create base calendar with metadata."""
        calendar = Calendar()
        calendar.add('prodid', vText(self.PRODID))
        calendar.add('version', vText('2.0'))
        calendar.add('calscale', vText('GREGORIAN'))
        calendar.add('method', vText('PUBLISH'))
        calendar.add('x-wr-calname', vText(name))
        calendar.add('x-wr-timezone', vText(str(self.local_tz)))
        return calendar
