"""
Schedule resolution for booking calendar application.
"""

from datetime import datetime

from axemacal.exceptions import ResolutionError
from axemacal.models.booking import Booking
from axemacal.models.booking import BookingView
from axemacal.models.booking import LaundryUnit
from axemacal.models.booking import SchedulePeriod
from axemacal.models.event import ResolvedInterval
from axemacal.utils.logging_utils import LoggerMixin
from axemacal.utils.timezone_utils import DEFAULT_TIMEZONE
from axemacal.utils.timezone_utils import TimezoneManager


class ScheduleResolver(LoggerMixin):
    """Maps a booking's week number and schedule period to absolute times.

    Lookups are plain linear scans in list order. Period ids are neither
    sorted nor contiguous, and a unit holds at most a few dozen periods.
    """

    def __init__(self, timezone: str = DEFAULT_TIMEZONE):
        super().__init__()
        self.tz_manager = TimezoneManager(timezone)

    @staticmethod
    def date_for(unit: LaundryUnit, week_number: int, day_index: int) -> str | None:
        """Get the calendar date of a weekday slot.

        Args:
            unit: Unit whose week list is searched
            week_number: External week identifier
            day_index: Weekday position, 0 based

        Returns:
            Date string as sent by the service, or None if not found
        """
        for week in unit.weeks:
            if week.week_number == week_number:
                if 0 <= day_index < len(week.week_days):
                    return week.week_days[day_index]
        return None

    @staticmethod
    def period_for(unit: LaundryUnit, period_id: int) -> tuple[int, SchedulePeriod] | None:
        """Find a schedule period and the weekday slot owning it.

        Scans day index ascending, then list order within the day; the first
        match wins.
        """
        for day_index, periods in enumerate(unit.schedule_periods):
            for period in periods:
                if period.id == period_id:
                    return day_index, period
        return None

    def find_period(
        self,
        view: BookingView,
        period_id: int
    ) -> tuple[int, SchedulePeriod, LaundryUnit] | None:
        """Find a schedule period across the units of a booking view."""
        for unit in view.laundry_units:
            found = self.period_for(unit, period_id)
            if found is not None:
                day_index, period = found
                return day_index, period, unit
        return None

    def to_datetime(self, date: str, minutes: int) -> datetime:
        """Convert a YYYY-MM-DD date and minute-of-day into a local datetime."""
        fields = date.split('-')
        if len(fields) != 3:
            raise ResolutionError(f'bad date "{date}"')
        try:
            year, month, day = (int(f) for f in fields)
            return self.tz_manager.from_minutes(year, month, day, minutes)
        except ValueError as e:
            raise ResolutionError(f'bad date "{date}": {e!s}')

    def resolve(self, booking: Booking, view: BookingView) -> ResolvedInterval:
        """Resolve a booking against its object's booking view.

        Raises:
            ResolutionError: If the period or the date cannot be found
        """
        found = self.find_period(view, booking.schedule_period_id)
        if found is None:
            raise ResolutionError(
                f"failed to find schedule period {booking.schedule_period_id} for reservation {booking.id}",
                booking.id
            )
        day_index, period, unit = found

        date = self.date_for(unit, booking.week_number, day_index)
        if date is None:
            raise ResolutionError(f"failed to get date for reservation {booking.id}", booking.id)

        try:
            start = self.to_datetime(date, period.start_time)
            end = self.to_datetime(date, period.stop_time)
        except ResolutionError as e:
            raise ResolutionError(f"reservation {booking.id}: {e.message}", booking.id) from e
        self.debug(
            "Resolved reservation",
            booking_id=booking.id,
            start=start.isoformat(),
            end=end.isoformat()
        )
        return ResolvedInterval(start=start, end=end, unit_name=unit.name)
