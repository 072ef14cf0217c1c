"""
Command line interface for booking calendar application.
"""

import argparse
import json
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from tabulate import tabulate

from axemacal.api.axema import AxemaAPI
from axemacal.config.env import EnvConfig
from axemacal.config.logging import setup_logging
from axemacal.config.types import AppConfig
from axemacal.exceptions import AxemaCalError
from axemacal.services.cache.response_cache import ResponseCache
from axemacal.services.calendar_service import CalendarService
from axemacal.services.reservation_service import ReservationService
from axemacal.services.schedule_resolver import ScheduleResolver
from axemacal.utils.logging_utils import get_logger


@dataclass
class CLIContext:
    """Context object for CLI command execution."""
    args: argparse.Namespace
    logger: logging.Logger
    config: AppConfig

def build_reservation_service(ctx: CLIContext) -> ReservationService:
    """Wire the client, cache and resolver from configuration."""
    config = ctx.config
    api = AxemaAPI(
        base_url=config.endpoint,
        credentials=config.credentials,
        cache=ResponseCache(config.cache_dir)
    )
    return ReservationService(
        api,
        ScheduleResolver(config.timezone),
        cached_reservations=getattr(ctx.args, 'cached_reservations', False)
    )

def process_calendar(ctx: CLIContext) -> int:
    """Fetch and resolve reservations, then write the calendar."""
    events = build_reservation_service(ctx).collect_events()

    calendar_service = CalendarService(ctx.config.timezone)
    calendar = calendar_service.build_calendar(events)
    if ctx.args.output:
        calendar_service.write_calendar_file(calendar, Path(ctx.args.output))
    else:
        calendar_service.write_calendar(calendar, sys.stdout.buffer)
    return 0

def list_reservations(ctx: CLIContext) -> int:
    """Print resolved reservations as a table or JSON."""
    events = sorted(build_reservation_service(ctx).collect_events(), key=lambda e: e.start)

    if ctx.args.format == 'json':
        print(json.dumps([event.to_dict() for event in events], indent=2))
        return 0

    if not events:
        print("No reservations found")
        return 0

    table = [
        [
            event.start.strftime("%Y-%m-%d %H:%M"),
            event.end.strftime("%H:%M"),
            event.summary,
            event.uid
        ]
        for event in events
    ]
    print(tabulate(table, headers=["Start", "End", "Unit", "UID"], tablefmt="psql"))
    return 0

def manage_cache(ctx: CLIContext) -> int:
    """List or clear the response cache."""
    cache = ResponseCache(ctx.config.cache_dir)

    if ctx.args.clear:
        removed = cache.clear()
        print(f"Removed {removed} cache entries from {cache.cache_dir}")
        return 0

    entries = cache.entries()
    if not entries:
        print(f"Cache {cache.cache_dir} is empty")
        return 0

    table = [
        [entry.key, entry.size, entry.modified.strftime("%Y-%m-%d %H:%M:%S")]
        for entry in entries
    ]
    print(tabulate(table, headers=["Key", "Bytes", "Modified"], tablefmt="psql"))
    return 0

COMMANDS: dict[str, Callable[[CLIContext], int]] = {
    'calendar': process_calendar,
    'list': list_reservations,
    'cache': manage_cache,
}

def add_common_options(parser: argparse.ArgumentParser) -> None:
    """Add common global options to a parser."""
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging output'
    )
    parser.add_argument(
        '--log-file',
        help='Path to write log output (default: AXEMA_LOG_FILE, logs go to stderr)'
    )

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='axemacal',
        description='Export laundry room reservations from an Axema booking service as iCalendar'
    )
    add_common_options(parser)
    subparsers = parser.add_subparsers(dest='command')

    calendar_parser = subparsers.add_parser(
        'calendar',
        help='Write reservations as an iCalendar document (default command)'
    )
    calendar_parser.add_argument(
        '-o', '--output',
        help='Write the calendar to this file instead of stdout'
    )
    calendar_parser.add_argument(
        '--cached-reservations',
        action='store_true',
        help='Read owned reservations through the response cache'
    )

    list_parser = subparsers.add_parser('list', help='List resolved reservations')
    list_parser.add_argument(
        '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format: human-readable text or machine-readable JSON (default: text)'
    )
    list_parser.add_argument(
        '--cached-reservations',
        action='store_true',
        help='Read owned reservations through the response cache'
    )

    cache_parser = subparsers.add_parser('cache', help='List or clear cached responses')
    cache_parser.add_argument(
        '--clear',
        action='store_true',
        help='Delete all cached responses'
    )

    parser.set_defaults(command='calendar', output=None, cached_reservations=False)
    return parser

def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = EnvConfig.load()
        setup_logging(
            config.logging.level,
            verbose=args.verbose,
            log_file=args.log_file or config.logging.file
        )
    except AxemaCalError as e:
        print(e, file=sys.stderr)
        return 1

    logger = get_logger(__name__)

    ctx = CLIContext(args=args, logger=logger, config=config)
    try:
        return COMMANDS[args.command](ctx)
    except AxemaCalError as e:
        logger.debug(e.describe())
        print(e, file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Unhandled exception")
        print(e, file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
