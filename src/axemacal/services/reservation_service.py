"""
Reservation service for booking calendar application.
"""

from typing import TYPE_CHECKING

from axemacal.error_codes import ErrorCode
from axemacal.exceptions import ResolutionError
from axemacal.models.booking import BookingView
from axemacal.models.booking import OwnedReservations
from axemacal.models.event import ResolvedEvent
from axemacal.services.schedule_resolver import ScheduleResolver
from axemacal.utils.logging_utils import EnhancedLoggerMixin
from axemacal.utils.logging_utils import log_execution

if TYPE_CHECKING:
    from axemacal.api.axema import AxemaAPI


class ReservationService(EnhancedLoggerMixin):
    """Collects the user's reservations as resolved calendar events.

    Steps run strictly in sequence and the first error aborts the run;
    nothing is skipped or retried.
    """

    def __init__(self, api: 'AxemaAPI', resolver: ScheduleResolver, cached_reservations: bool = False):
        """Initialize service.

        Args:
            api: Booking service client
            resolver: Schedule resolver in the facility timezone
            cached_reservations: Read owned reservations through the cache
        """
        super().__init__()
        self.api = api
        self.resolver = resolver
        self.cached_reservations = cached_reservations
        self.set_log_context(service="reservations")

    @log_execution()
    def fetch_booking_views(self) -> dict[int, BookingView]:
        """Fetch the schedule of every bookable object, keyed by object id."""
        objects = self.api.get_objects()
        self.info(f"Found {len(objects)} bookable objects")

        views: dict[int, BookingView] = {}
        for obj in objects:
            self.debug("Fetching booking view", object_id=obj.id, name=obj.name)
            views[obj.id] = self.api.get_booking_view(obj.id)
        return views

    def fetch_reservations(self) -> OwnedReservations:
        if self.cached_reservations:
            return self.api.get_cached_owned_reservations()
        return self.api.get_owned_reservations()

    def resolve_reservations(
        self,
        reservations: OwnedReservations,
        views: dict[int, BookingView]
    ) -> list[ResolvedEvent]:
        """Resolve every booking, failing on the first one that cannot be."""
        events = []
        for booking in reservations.bookings:
            view = views.get(booking.object_id)
            if view is None:
                raise ResolutionError(
                    f"bad object {booking.object_id} for reservation {booking.id}",
                    booking.id,
                    ErrorCode.UNKNOWN_OBJECT
                )
            interval = self.resolver.resolve(booking, view)
            events.append(ResolvedEvent(
                uid=ResolvedEvent.build_uid(
                    self.api.base_url,
                    booking.id,
                    booking.week_number,
                    booking.schedule_period_id
                ),
                start=interval.start,
                end=interval.end,
                summary=interval.unit_name
            ))
        return events

    @log_execution(level='INFO')
    def collect_events(self) -> list[ResolvedEvent]:
        """Log in, fetch schedules and reservations, and resolve them."""
        self.api.login()
        views = self.fetch_booking_views()
        reservations = self.fetch_reservations()
        self.info(f"Found {len(reservations.bookings)} reservations")
        return self.resolve_reservations(reservations, views)
