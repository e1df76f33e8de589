"""Command line entry point for readable-time."""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Sequence

import structlog

from readable_time import __version__
from readable_time.config import load_options
from readable_time.exceptions import ReadableTimeError
from readable_time.labels import DEFAULT_LOCALE, SUPPORTED_LOCALES
from readable_time.options import merge_options
from readable_time.readable import DEFAULT_FORMAT, FORMATS, to_readable_time
from readable_time.timeago import Instant


def setup_logging(debug: bool = False) -> None:
    """Configure structured logging.

    Routes structlog and stdlib output through the same processor chain:
    JSON normally, coloured console in debug. Logs go to stderr so they
    never mix with the formatted result on stdout.
    """
    level = logging.DEBUG if debug else logging.WARNING

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    renderer: Any = (
        structlog.dev.ConsoleRenderer()
        if debug
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
            foreign_pre_chain=shared_processors,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def parse_instant(value: str) -> Instant:
    """Parse a millisecond epoch timestamp or an ISO-8601 string."""
    text = value.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"expected milliseconds since epoch or ISO-8601 time, got {value!r}"
        ) from None


def non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="readable-time",
        description="Convert a point in time to a human readable string",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--version", action="version", version=f"readable-time {__version__}"
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    parser.add_argument(
        "time", type=parse_instant, help="Milliseconds since epoch or ISO-8601 time"
    )
    parser.add_argument(
        "--format", choices=FORMATS, default=DEFAULT_FORMAT, help="Output format"
    )
    parser.add_argument(
        "--locale", choices=SUPPORTED_LOCALES, default=DEFAULT_LOCALE, help="Locale"
    )
    parser.add_argument(
        "--now", type=parse_instant, help="Reference time (defaults to the current time)"
    )
    parser.add_argument(
        "--config-file", type=Path, help="JSON file with timeago options"
    )

    # Option overrides; None means "keep the configured value"
    timeago = parser.add_argument_group("timeago options")
    timeago.add_argument(
        "--verbose", dest="verbose", action="store_const", const=True,
        help="Use 'X units ago' phrasing",
    )
    timeago.add_argument(
        "--no-words", dest="convert_to_words", action="store_const", const=False,
        help="Do not spell out small counts or day names",
    )
    timeago.add_argument(
        "--no-ago", dest="include_ago_suffix", action="store_const", const=False,
        help="Drop the 'ago' suffix",
    )
    timeago.add_argument(
        "--today", dest="include_today", action="store_const", const=True,
        help="Say 'Today' for earlier times on the same day",
    )
    timeago.add_argument(
        "--no-just-now", dest="include_just_now", action="store_const", const=False,
        help="Do not collapse the last minute to 'Just now'",
    )
    timeago.add_argument(
        "--days-of-week", dest="days_of_week", action="store_const", const=True,
        help="Show 'Day, Month date' beyond a week",
    )
    timeago.add_argument(
        "--longform", dest="longform", action="store_const", const=True,
        help="Show 'Month day, year' beyond a day",
    )
    timeago.add_argument(
        "--long-time-ago-days", dest="long_time_ago_threshold_days", type=int,
        help="Say 'A long time ago' at or beyond this many days (verbose only)",
    )
    timeago.add_argument(
        "--abbreviate-days", dest="abbreviate_days", type=non_negative_int,
        help="Truncate day names to N characters",
    )
    timeago.add_argument(
        "--abbreviate-months", dest="abbreviate_months", type=non_negative_int,
        help="Truncate month names to N characters",
    )
    timeago.add_argument(
        "--abbreviate-period", dest="abbreviate_period",
        help="Text appended to abbreviated names (default '.')",
    )

    return parser.parse_args(argv)


OPTION_FIELDS = (
    "verbose",
    "convert_to_words",
    "include_ago_suffix",
    "include_today",
    "include_just_now",
    "days_of_week",
    "longform",
    "long_time_ago_threshold_days",
    "abbreviate_days",
    "abbreviate_months",
    "abbreviate_period",
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Format the requested time and print it. Returns the exit code."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)

    logger = structlog.get_logger()

    try:
        options = merge_options(
            load_options(args.config_file),
            {name: getattr(args, name) for name in OPTION_FIELDS},
        )
        logger.debug(
            "Formatting time",
            format=args.format,
            locale=args.locale,
            options=options.to_dict(),
        )
        result = to_readable_time(
            args.time,
            format=args.format,
            locale=args.locale,
            options=options,
            now=args.now,
        )
    except ReadableTimeError as e:
        logger.error("Formatting failed", error=str(e), error_type=type(e).__name__)
        return 1

    print(result)
    return 0


def run() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    run()
