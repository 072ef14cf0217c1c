"""
Calendar builders package.
"""

from axemacal.services.calendar.builders.calendar_builder import CalendarBuilder
from axemacal.services.calendar.builders.event_builder import ReservationEventBuilder

__all__ = [
    'CalendarBuilder',
    'ReservationEventBuilder'
]
