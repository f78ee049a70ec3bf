from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from typing import Optional, Sequence

import yaml
from dotenv import load_dotenv

from .config import load_settings
from .formatting import format_result
from .models import Boundary, Direction, NavigationRequest, Weekday
from .navigator import navigate

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    lvl = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="daynav",
        description="Find the previous or next occurrence of a weekday",
    )
    parser.add_argument(
        "direction",
        choices=[d.value for d in Direction],
        help="Which way to move from the reference date",
    )
    parser.add_argument(
        "weekday",
        help="Target weekday: name (monday, fri, ...) or number 0..6 (Mon..Sun)",
    )
    parser.add_argument(
        "--date",
        default=None,
        help="Reference date/time in ISO 8601 (default: now). UTC when --tz is used.",
    )
    parser.add_argument(
        "--boundary",
        choices=[b.value for b in Boundary],
        default=Boundary.NONE.value,
        help="Normalize the result to the start or end of its day",
    )
    parser.add_argument(
        "--tz",
        default=None,
        help="Timezone in which weekdays and day boundaries are evaluated",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to configuration.yaml",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def _parse_weekday(raw: str) -> Weekday:
    if raw.strip().isdigit():
        return Weekday.coerce(int(raw))
    return Weekday.coerce(raw)


def build_request(args: argparse.Namespace, default_timezone: Optional[str] = None) -> NavigationRequest:
    tz = args.tz or default_timezone

    if args.date:
        reference = datetime.fromisoformat(args.date)
    elif tz:
        reference = datetime.now(timezone.utc)
    else:
        reference = datetime.now()

    return NavigationRequest(
        reference=reference,
        weekday=_parse_weekday(args.weekday),
        direction=Direction(args.direction),
        boundary=Boundary(args.boundary),
        timezone=tz,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    load_dotenv()

    args = _build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (ValueError, yaml.YAMLError) as e:
        _setup_logging(args.log_level or "INFO")
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    _setup_logging(args.log_level or settings.log_level)

    try:
        settings.validate_runtime()
        request = build_request(args, default_timezone=settings.default_timezone)
        result = navigate(request)
    except ValueError as e:
        logger.error("%s", e)
        sys.exit(2)

    print(
        format_result(
            result,
            show_weekday_label=settings.output.show_weekday_label,
            timespec=settings.output.timespec,
        )
    )


if __name__ == "__main__":
    main()
