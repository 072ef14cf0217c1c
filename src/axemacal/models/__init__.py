"""
Models package for booking calendar application.
Contains data models for the booking service documents and resolved events.
"""

from .booking import (
    Booking,
    BookingView,
    LaundryUnit,
    NoncePair,
    OwnedReservations,
    ReservationObject,
    SchedulePeriod,
    Week,
)
from .event import ResolvedEvent, ResolvedInterval

__all__ = [
    'Booking',
    'BookingView',
    'LaundryUnit',
    'NoncePair',
    'OwnedReservations',
    'ReservationObject',
    'ResolvedEvent',
    'ResolvedInterval',
    'SchedulePeriod',
    'Week',
]
