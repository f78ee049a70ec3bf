from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .models import TimezoneLike
from .timezones import resolve_alias

logger = logging.getLogger(__name__)


class TimezoneConversionError(ValueError):
    """Raised when timezone conversion cannot be performed (invalid timezone, etc.)."""


def get_zoneinfo(tz: TimezoneLike) -> tzinfo:
    """
    Resolve a timezone descriptor into a tzinfo.

    Accepts a tzinfo (returned unchanged), an alias from timezones.py or an IANA name.
    Raises a clear error if the name does not resolve.
    """
    if isinstance(tz, tzinfo):
        return tz

    if not isinstance(tz, str) or not tz.strip():
        raise TimezoneConversionError(f"Invalid timezone descriptor: {tz!r}")

    name = resolve_alias(tz)
    try:
        zone = ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneConversionError(f"Invalid IANA timezone: {tz}") from e

    logger.debug("Resolved timezone %r -> %s", tz, name)
    return zone


def to_local(dt_utc: datetime, tz: TimezoneLike) -> datetime:
    """
    Convert a UTC instant to wall-clock time in tz.
    A naive datetime is taken to be UTC.
    """
    zone = get_zoneinfo(tz)
    if dt_utc.tzinfo is None:
        dt_utc = dt_utc.replace(tzinfo=timezone.utc)
    return dt_utc.astimezone(zone)


def to_utc(dt_local: datetime, tz: TimezoneLike) -> datetime:
    """
    Convert wall-clock time in tz back to an aware UTC datetime.
    A naive datetime is read as wall-clock time in tz.
    """
    zone = get_zoneinfo(tz)
    if dt_local.tzinfo is None:
        dt_local = dt_local.replace(tzinfo=zone)
    return dt_local.astimezone(timezone.utc)


@dataclass(frozen=True)
class ZoneConverter:
    """
    The pair of conversions the tz-aware navigator depends on.

    Swap in a fake for tests:
        ZoneConverter(to_local=lambda dt, tz: dt, to_utc=lambda dt, tz: dt)
    """
    to_local: Callable[[datetime, TimezoneLike], datetime]
    to_utc: Callable[[datetime, TimezoneLike], datetime]


ZONEINFO_CONVERTER = ZoneConverter(to_local=to_local, to_utc=to_utc)
