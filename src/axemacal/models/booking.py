"""
Booking service data models.

Field names follow the JSON documents returned by the booking service; each
model has a ``from_dict`` that raises ``KeyError``/``TypeError``/``ValueError``
on malformed input, which the API layer turns into a validation error.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class NoncePair:
    """Server issued challenge for one login attempt."""
    nonce1: str
    nonce2: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'NoncePair':
        return cls(nonce1=str(data['nonce1']), nonce2=str(data['nonce2']))

@dataclass(frozen=True)
class ReservationObject:
    """A bookable facility unit as listed by the booking view."""
    id: int
    name: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ReservationObject':
        return cls(id=int(data['id']), name=str(data['name']))

@dataclass(frozen=True)
class SchedulePeriod:
    """Time-of-day interval, start and stop in minutes since midnight."""
    id: int
    start_time: int
    stop_time: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'SchedulePeriod':
        return cls(
            id=int(data['Id']),
            start_time=int(data['StartTime']),
            stop_time=int(data['StopTime'])
        )

@dataclass(frozen=True)
class Week:
    """Week number with its positional weekday to date mapping."""
    week_number: int
    week_days: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Week':
        return cls(
            week_number=int(data['WeekNumber']),
            week_days=[str(day['Date']) for day in data.get('WeekDays') or []]
        )

@dataclass(frozen=True)
class LaundryUnit:
    """Schedule container for one facility unit.

    ``schedule_periods`` is indexed by weekday position first; period ids
    are only unique within one unit.
    """
    id: int
    name: str
    weeks: list[Week] = field(default_factory=list)
    schedule_periods: list[list[SchedulePeriod]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LaundryUnit':
        return cls(
            id=int(data['Id']),
            name=str(data['Name']),
            weeks=[Week.from_dict(week) for week in data.get('WeekList') or []],
            schedule_periods=[
                [SchedulePeriod.from_dict(period) for period in day or []]
                for day in data.get('SchedulePeriodList') or []
            ]
        )

@dataclass(frozen=True)
class BookingView:
    """Schedule document for one reservation object."""
    timestamp: str
    laundry_units: list[LaundryUnit] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'BookingView':
        return cls(
            timestamp=str(data.get('TimeStamp', '')),
            laundry_units=[LaundryUnit.from_dict(unit) for unit in data.get('LaundryUnits') or []]
        )

@dataclass(frozen=True)
class Booking:
    """Coordinates of one owned reservation."""
    id: int
    object_id: int
    week_number: int
    schedule_period_id: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Booking':
        return cls(
            id=int(data['Id']),
            object_id=int(data['ObjectId']),
            week_number=int(data['WeekNumber']),
            schedule_period_id=int(data['SchedulePeriodId'])
        )

@dataclass(frozen=True)
class OwnedReservations:
    bookings: list[Booking] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'OwnedReservations':
        return cls(bookings=[Booking.from_dict(b) for b in data.get('Bookings') or []])
