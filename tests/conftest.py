"""Pytest configuration and shared fixtures."""

import json
import logging
from unittest.mock import Mock

import pytest

from axemacal.api.axema import AxemaAPI
from axemacal.config.logging_filters import SensitiveDataFilter
from axemacal.config.types import Credentials
from axemacal.models.booking import BookingView
from axemacal.services.cache.response_cache import ResponseCache

BASE_URL = "https://booking.test"

@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and cache."""
    for name in (
        "AXEMA_ENDPOINT", "AXEMA_USER", "AXEMA_PASS", "AXEMA_TIMEZONE",
        "AXEMA_CACHE_DIR", "AXEMA_LOG_LEVEL", "AXEMA_LOG_FILE", "XDG_CACHE_HOME",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    yield

@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if any(isinstance(f, SensitiveDataFilter) for f in handler.filters):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"

@pytest.fixture
def cache(cache_dir):
    return ResponseCache(cache_dir)

@pytest.fixture
def unit_data():
    """Laundry unit document with one week and two weekday slots."""
    return {
        "Id": 1,
        "Name": "Laundry room 1",
        "WeekList": [
            {
                "WeekNumber": 3,
                "WeekDays": [{"Date": "2024-01-15"}, {"Date": "2024-01-16"}]
            },
            {
                "WeekNumber": 4,
                "WeekDays": [{"Date": "2024-01-22"}, {"Date": "2024-01-23"}]
            }
        ],
        "SchedulePeriodList": [
            [
                {"Id": 7, "StartTime": 480, "StopTime": 540},
                {"Id": 8, "StartTime": 540, "StopTime": 600}
            ],
            [
                {"Id": 9, "StartTime": 1080, "StopTime": 1320}
            ]
        ]
    }

@pytest.fixture
def booking_view_data(unit_data):
    return {"TimeStamp": "2024-01-14 12:00:00", "LaundryUnits": [unit_data]}

@pytest.fixture
def booking_view(booking_view_data):
    return BookingView.from_dict(booking_view_data)

def make_response(body, status_code=200):
    """Create a mock requests response from a JSON-able object or raw text."""
    if not isinstance(body, (str, bytes)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = Mock()
    response.status_code = status_code
    response.content = body
    response.text = body.decode("utf-8")
    return response

class FakeService:
    """Routes mocked session POSTs by endpoint and records every call."""

    def __init__(self, routes):
        self.routes = routes
        self.calls = []

    def __call__(self, url, data=None, headers=None, timeout=None):
        endpoint = url[len(BASE_URL):]
        payload = json.loads(data) if data else None
        self.calls.append((endpoint, payload))
        route = self.routes[endpoint]
        if callable(route) and not isinstance(route, Mock):
            route = route(payload)
        return route

    def endpoints(self):
        return [endpoint for endpoint, _ in self.calls]

@pytest.fixture
def service_routes(booking_view_data):
    """Default responses of a healthy booking service."""
    return {
        AxemaAPI.NONCE_ENDPOINT: make_response({"nonce1": "a", "nonce2": "b"}),
        AxemaAPI.LOGIN_ENDPOINT: make_response('{"result": "ok"}'),
        AxemaAPI.BOOKING_VIEW_ENDPOINT: lambda payload: make_response(
            booking_view_data if payload else [{"id": 42, "name": "Laundry"}]
        ),
        AxemaAPI.OWNED_RESERVATIONS_ENDPOINT: make_response({
            "Bookings": [
                {"Id": 100, "ObjectId": 42, "WeekNumber": 3, "SchedulePeriodId": 7}
            ]
        }),
    }

@pytest.fixture
def fake_service(service_routes):
    return FakeService(service_routes)

@pytest.fixture
def api(cache, fake_service):
    """API client whose session is routed to the fake service."""
    client = AxemaAPI(BASE_URL, Credentials(user="u", secret="p"), cache)
    client.session = Mock()
    client.session.post.side_effect = fake_service
    client.session.cookies = {}
    return client

@pytest.fixture
def response_factory():
    return make_response
