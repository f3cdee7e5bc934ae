"""Command-line interface for the sunrise report."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from sunrise_report import __version__
from sunrise_report.astronomy.calculator import AstronomyCalculator, EventCalculator
from sunrise_report.config import Settings, get_settings
from sunrise_report.errors import ConfigurationError, SunriseReportError
from sunrise_report.report.pipeline import run_report
from sunrise_report.report.request import (
    UTC_OFFSET_PATTERN,
    DateProvider,
    build_request,
)
from sunrise_report.report.sink import write_report

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIGURATION = 2

VERBOSITY_LEVELS = {0: logging.WARNING, 1: logging.INFO}

TIME_ZONE_FLAGS = ("-z", "--time-zone")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="sunrise-report",
        description=(
            "Report today's sunrise and sunset as JSON, "
            "optionally narrowed by a time offset"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Verbose mode (-v, -vv, -vvv, etc.)",
    )
    parser.add_argument(
        "-u",
        "--out",
        help=(
            "Set the output file name, e.g. /tmp/sunrise_sunset.json, "
            "if not set, output to stdout"
        ),
    )
    parser.add_argument(
        "-s",
        "--time-offset",
        type=int,
        default=None,
        help="Time offset in minutes, added to sunrise and subtracted from sunset (default: 0)",
    )
    parser.add_argument(
        "-l",
        "--latitude",
        type=float,
        default=None,
        help="Set the latitude in decimal degrees (default: 40.7128)",
    )
    parser.add_argument(
        "-o",
        "--longitude",
        type=float,
        default=None,
        help="Set the longitude in decimal degrees (default: -74.0060)",
    )
    parser.add_argument(
        "-d",
        "--date",
        help="Date to report on, YYYY-MM-DD (default: today)",
    )
    parser.add_argument(
        "-z",
        "--time-zone",
        help="UTC offset of the reported times, e.g. -05:00 (default: local)",
    )
    return parser


def join_time_zone_values(argv: list[str]) -> list[str]:
    """Attach a "-05:00"-style value to the -z/--time-zone flag before it.

    argparse only accepts a value starting with "-" when it looks like a
    number, so "-z -05:00" would otherwise be rejected.
    """
    joined: list[str] = []
    i = 0
    while i < len(argv):
        token = argv[i]
        if (
            token in TIME_ZONE_FLAGS
            and i + 1 < len(argv)
            and UTC_OFFSET_PATTERN.match(argv[i + 1])
        ):
            joined.append(f"--time-zone={argv[i + 1]}")
            i += 2
            continue
        joined.append(token)
        i += 1
    return joined


def configure_logging(verbosity: int, settings: Settings | None = None) -> None:
    """Send diagnostics to stderr; each -v lowers the threshold."""
    if verbosity:
        level = VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)
    elif settings is not None:
        level = getattr(logging, settings.log_level)
    else:
        level = logging.WARNING

    log_format = settings.log_format if settings is not None else "%(levelname)s: %(message)s"
    logging.basicConfig(level=level, format=log_format, stream=sys.stderr, force=True)


def main(
    argv: list[str] | None = None,
    calculator: EventCalculator | None = None,
    date_provider: DateProvider | None = None,
) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(join_time_zone_values(argv))

    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging(args.verbose)
        logger.error(f"Invalid configuration: {e}")
        return EXIT_CONFIGURATION

    configure_logging(args.verbose, settings)
    if args.verbose > 2:
        logger.debug(f"Options: {args}")
        logger.debug(f"time_offset {args.time_offset}")

    try:
        request = build_request(
            args.latitude,
            args.longitude,
            date=args.date,
            time_offset=args.time_offset,
            utc_offset=args.time_zone,
            date_provider=date_provider,
        )
        result = run_report(request, calculator or AstronomyCalculator())
        write_report(result.to_json(), out=args.out)
    except ConfigurationError as e:
        logger.error(str(e))
        return EXIT_CONFIGURATION
    except SunriseReportError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
