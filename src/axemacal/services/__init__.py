"""Service implementations."""

from .calendar_service import CalendarService
from .reservation_service import ReservationService
from .schedule_resolver import ScheduleResolver


__all__ = [
    'CalendarService',
    'ReservationService',
    'ScheduleResolver',
]
