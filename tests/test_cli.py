"""Unit tests for CLI argument parsing and command execution."""

import json
from datetime import datetime
from unittest.mock import Mock, patch
from zoneinfo import ZoneInfo

import pytest

from axemacal.cli import create_parser, main
from axemacal.exceptions import AuthError
from axemacal.models.event import ResolvedEvent

STOCKHOLM = ZoneInfo("Europe/Stockholm")

@pytest.fixture
def env(monkeypatch, cache_dir):
    monkeypatch.setenv("AXEMA_ENDPOINT", "https://booking.test")
    monkeypatch.setenv("AXEMA_USER", "u")
    monkeypatch.setenv("AXEMA_PASS", "p")
    monkeypatch.setenv("AXEMA_CACHE_DIR", str(cache_dir))

@pytest.fixture
def events():
    return [ResolvedEvent(
        uid="https://booking.test/100/3/7",
        start=datetime(2024, 1, 15, 8, 0, tzinfo=STOCKHOLM),
        end=datetime(2024, 1, 15, 9, 0, tzinfo=STOCKHOLM),
        summary="Laundry room 1"
    )]

@pytest.fixture
def reservation_service(events):
    service = Mock()
    service.collect_events.return_value = events
    with patch("axemacal.cli.build_reservation_service", return_value=service):
        yield service

@pytest.fixture
def stdout(capsysbinary):
    return capsysbinary

def test_global_options():
    parser = create_parser()

    args = parser.parse_args(['-v', '--log-file', 'test.log'])
    assert args.verbose is True
    assert args.log_file == 'test.log'

def test_default_command():
    args = create_parser().parse_args([])
    assert args.command == 'calendar'
    assert args.output is None
    assert args.cached_reservations is False

def test_calendar_command():
    args = create_parser().parse_args(['calendar', '-o', 'out.ics', '--cached-reservations'])
    assert args.command == 'calendar'
    assert args.output == 'out.ics'
    assert args.cached_reservations is True

def test_list_and_cache_commands():
    parser = create_parser()

    args = parser.parse_args(['list', '--format', 'json'])
    assert args.command == 'list'
    assert args.format == 'json'

    args = parser.parse_args(['cache', '--clear'])
    assert args.command == 'cache'
    assert args.clear is True

def test_missing_configuration(capsys):
    assert main([]) == 1
    assert capsys.readouterr().err.strip() == "AXEMA_ENDPOINT not set"

def test_calendar_to_stdout(env, reservation_service, stdout):
    assert main([]) == 0

    data = stdout.readouterr().out
    assert data.startswith(b"BEGIN:VCALENDAR")
    assert b"UID:https://booking.test/100/3/7" in data
    assert b"SUMMARY:Laundry room 1" in data

def test_calendar_to_file(env, reservation_service, tmp_path):
    output = tmp_path / "laundry.ics"

    assert main(['calendar', '--output', str(output)]) == 0

    assert b"BEGIN:VEVENT" in output.read_bytes()

def test_fatal_error_exit_code(env, reservation_service, capsys):
    reservation_service.collect_events.side_effect = AuthError('login: {"result": "wrong_login"}')

    assert main([]) == 1
    assert capsys.readouterr().err.strip() == 'login: {"result": "wrong_login"}'

def test_list_json(env, reservation_service, capsys):
    assert main(['list', '--format', 'json']) == 0

    output = json.loads(capsys.readouterr().out)
    assert output == [{
        'uid': 'https://booking.test/100/3/7',
        'start': '2024-01-15T08:00:00+01:00',
        'end': '2024-01-15T09:00:00+01:00',
        'summary': 'Laundry room 1',
    }]

def test_list_table(env, reservation_service, capsys):
    assert main(['list']) == 0

    output = capsys.readouterr().out
    assert "2024-01-15 08:00" in output
    assert "Laundry room 1" in output

def test_cache_command(env, cache_dir, capsys):
    cache_dir.mkdir()
    (cache_dir / "request_booking_view.json").write_bytes(b"[]")

    assert main(['cache']) == 0
    assert "request_booking_view.json" in capsys.readouterr().out

    assert main(['cache', '--clear']) == 0
    assert "Removed 1 cache entries" in capsys.readouterr().out
    assert not (cache_dir / "request_booking_view.json").exists()

def test_build_reservation_service_wiring(env):
    from axemacal.cli import CLIContext, build_reservation_service
    from axemacal.config.env import EnvConfig

    args = create_parser().parse_args(['calendar', '--cached-reservations'])
    service = build_reservation_service(CLIContext(args=args, logger=Mock(), config=EnvConfig.load()))

    assert service.cached_reservations is True
    assert service.api.base_url == "https://booking.test"
    assert service.resolver.tz_manager.timezone_name == "Europe/Stockholm"

def test_unwritable_log_file(env, tmp_path, capsys):
    log_file = tmp_path / "missing" / "axema.log"

    assert main(['--log-file', str(log_file), 'cache']) == 1
    assert "Cannot open log file" in capsys.readouterr().err
