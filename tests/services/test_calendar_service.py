"""Tests for calendar output."""

import io
from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from icalendar import Calendar

from axemacal.models.event import ResolvedEvent
from axemacal.services.calendar_service import CalendarService

STOCKHOLM = ZoneInfo("Europe/Stockholm")

@pytest.fixture
def events():
    return [
        ResolvedEvent(
            uid="https://booking.test/100/3/7",
            start=datetime(2024, 1, 15, 8, 0, tzinfo=STOCKHOLM),
            end=datetime(2024, 1, 15, 9, 0, tzinfo=STOCKHOLM),
            summary="Laundry room 1"
        ),
        ResolvedEvent(
            uid="https://booking.test/101/4/9",
            start=datetime(2024, 1, 23, 18, 0, tzinfo=STOCKHOLM),
            end=datetime(2024, 1, 23, 22, 0, tzinfo=STOCKHOLM),
            summary="Laundry room 1"
        ),
    ]

def test_build_calendar(events):
    calendar = CalendarService("Europe/Stockholm").build_calendar(events)

    assert str(calendar['prodid']) == '-//Axema Booking Calendar//EN'
    assert str(calendar['x-wr-timezone']) == 'Europe/Stockholm'
    vevents = calendar.walk('vevent')
    assert [str(e['uid']) for e in vevents] == [event.uid for event in events]
    assert vevents[0]['dtstart'].dt == events[0].start
    assert vevents[0]['dtend'].dt == events[0].end
    assert str(vevents[0]['summary']) == "Laundry room 1"

def test_duplicate_uids_written_once(events):
    calendar = CalendarService().build_calendar(events + [events[0]])
    assert len(calendar.walk('vevent')) == 2

def test_serialized_round_trip(events):
    service = CalendarService()
    stream = io.BytesIO()

    service.write_calendar(service.build_calendar(events), stream)

    data = stream.getvalue()
    assert data.startswith(b"BEGIN:VCALENDAR")
    assert b"TZID=Europe/Stockholm:20240115T080000" in data
    parsed = Calendar.from_ical(data)
    assert len(parsed.walk('vevent')) == 2

def test_empty_calendar():
    data = CalendarService().serialize(CalendarService().build_calendar([]))
    assert b"BEGIN:VEVENT" not in data
    assert b"END:VCALENDAR" in data

def test_write_calendar_file(events, tmp_path):
    path = tmp_path / "out" / "laundry.ics"

    CalendarService().write_calendar_file(CalendarService().build_calendar(events), path)

    assert path.read_bytes().count(b"BEGIN:VEVENT") == 2
