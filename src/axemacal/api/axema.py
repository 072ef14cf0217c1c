"""
Axema booking service API client for booking calendar application.
"""

from collections.abc import Callable
from enum import Enum
from typing import Any
from typing import TypeVar

from axemacal.api.base_api import BaseAPI
from axemacal.config.types import Credentials
from axemacal.error_codes import ErrorCode
from axemacal.exceptions import APIValidationError
from axemacal.exceptions import AuthError
from axemacal.models.booking import BookingView
from axemacal.models.booking import NoncePair
from axemacal.models.booking import OwnedReservations
from axemacal.models.booking import ReservationObject
from axemacal.services.cache.response_cache import ResponseCache
from axemacal.utils.digest import fingerprint


__all__ = ['AuthState', 'AxemaAPI']

T = TypeVar('T')

class AuthState(Enum):
    """Session authentication state."""
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"

class AxemaAPI(BaseAPI):
    """Client for the reservation endpoints of the booking service."""

    NONCE_ENDPOINT = "/fcgi_reservation/get_nonce"
    LOGIN_ENDPOINT = "/fcgi_reservation/login"
    BOOKING_VIEW_ENDPOINT = "/fcgi_reservation/request_booking_view"
    OWNED_RESERVATIONS_ENDPOINT = "/fcgi_reservation/request_owned_reservations"

    # Present in the login response body when the digests are rejected
    LOGIN_FAILURE_MARKER = "wrong_login"

    def __init__(
        self,
        base_url: str,
        credentials: Credentials,
        cache: ResponseCache,
        timeout: tuple[int, int] | None = None
    ):
        """Initialize the client.

        Args:
            base_url: Service base URL
            credentials: User id and secret, only digests leave the process
            cache: Response cache for the schedule endpoints
            timeout: Optional (connection, read) timeout override
        """
        super().__init__(base_url, timeout)
        self.credentials = credentials
        self.cache = cache
        self.state = AuthState.UNAUTHENTICATED
        self.set_log_context(service="axema_api")

    @property
    def is_authenticated(self) -> bool:
        return self.state is AuthState.AUTHENTICATED

    def _decode(self, endpoint: str, body: bytes, factory: Callable[[Any], T]) -> T:
        """Decode a JSON body into an entity."""
        data = self._decode_json(endpoint, body)
        try:
            return factory(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise APIValidationError(f"{endpoint}: unexpected response: {e!r}", endpoint) from e

    def _require_auth(self) -> None:
        if not self.is_authenticated:
            raise AuthError("not logged in", ErrorCode.NOT_AUTHENTICATED)

    def get_nonce(self) -> NoncePair:
        """Request a fresh nonce pair."""
        body = self._post(self.NONCE_ENDPOINT)
        return self._decode(self.NONCE_ENDPOINT, body, NoncePair.from_dict)

    def build_login_payload(self, nonce: NoncePair) -> dict[str, str]:
        """Build the challenge response for a nonce pair."""
        user = self.credentials.user
        return {
            "nonce1": nonce.nonce1,
            "nonce2": nonce.nonce2,
            "pass": fingerprint(nonce.nonce2 + user + self.credentials.secret),
            "user": fingerprint(nonce.nonce1 + user),
        }

    def login(self) -> None:
        """Authenticate the session.

        On success the session cookie jar holds the server session and the
        state becomes authenticated. Any failure leaves it unauthenticated.

        Raises:
            AuthError: If the server rejects the credentials
            APIError: If the nonce or login request fails
        """
        self.state = AuthState.UNAUTHENTICATED
        nonce = self.get_nonce()
        payload = self.build_login_payload(nonce)
        self.logger.debug("Submitting login", extra={"extra_fields": payload})

        body = self._post(self.LOGIN_ENDPOINT, payload)
        text = body.decode('utf-8', errors='replace')
        if self.LOGIN_FAILURE_MARKER in text:
            raise AuthError(f"login: {text}")

        self.state = AuthState.AUTHENTICATED
        self.info("Logged in", cookies=len(self.session.cookies))

    def request_booking_view(self) -> bytes:
        self._require_auth()
        return self._post(self.BOOKING_VIEW_ENDPOINT)

    def request_booking_view_by_object_id(self, object_id: int) -> bytes:
        self._require_auth()
        return self._post(self.BOOKING_VIEW_ENDPOINT, {"reservation_object_id": object_id})

    def request_owned_reservations(self) -> bytes:
        self._require_auth()
        return self._post(self.OWNED_RESERVATIONS_ENDPOINT)

    def get_objects(self) -> list[ReservationObject]:
        """Get the bookable objects, cached."""
        self._require_auth()
        body = self.cache.fetch_cached("request_booking_view.json", self.request_booking_view)
        return self._decode(
            self.BOOKING_VIEW_ENDPOINT,
            body,
            lambda data: [ReservationObject.from_dict(item) for item in data]
        )

    def get_booking_view(self, object_id: int) -> BookingView:
        """Get the schedule of one object, cached per object id."""
        self._require_auth()
        body = self.cache.fetch_cached(
            f"request_booking_view_{object_id}.json",
            lambda: self.request_booking_view_by_object_id(object_id)
        )
        return self._decode(self.BOOKING_VIEW_ENDPOINT, body, BookingView.from_dict)

    def get_owned_reservations(self) -> OwnedReservations:
        """Get the user's reservations, always live."""
        body = self.request_owned_reservations()
        return self._decode(self.OWNED_RESERVATIONS_ENDPOINT, body, OwnedReservations.from_dict)

    def get_cached_owned_reservations(self) -> OwnedReservations:
        """Get the user's reservations through the cache, for offline debugging."""
        self._require_auth()
        body = self.cache.fetch_cached("request_owned_reservations.json", self.request_owned_reservations)
        return self._decode(self.OWNED_RESERVATIONS_ENDPOINT, body, OwnedReservations.from_dict)
