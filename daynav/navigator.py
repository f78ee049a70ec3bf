"""
Day-of-week navigation.

Definitions:
- reference.weekday(): Mon=0 ... Sun=6
- previous: most recent occurrence strictly before reference (1..7 days back)
- next: first occurrence strictly after reference (1..7 days ahead)
- if reference already falls on the weekday, both directions move a full week

Every other function here is a composition of to_previous_day_of_week /
to_next_day_of_week with a day boundary and/or a timezone round-trip.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, TypeVar, Union

from .conversion import ZONEINFO_CONVERTER, ZoneConverter
from .day_bounds import end_of_day, start_of_day
from .models import Boundary, Direction, NavigationRequest, TimezoneLike, Weekday

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=date)
WeekdayLike = Union[Weekday, int, str]


def to_previous_day_of_week(reference: D, weekday: WeekdayLike) -> D:
    target = Weekday.coerce(weekday)
    days_back = (reference.weekday() - target + 7) % 7
    if days_back == 0:
        days_back = 7
    return reference - timedelta(days=days_back)


def to_next_day_of_week(reference: D, weekday: WeekdayLike) -> D:
    target = Weekday.coerce(weekday)
    days_ahead = (target - reference.weekday() + 7) % 7
    if days_ahead == 0:
        days_ahead = 7
    return reference + timedelta(days=days_ahead)


def to_start_of_previous_day_of_week(reference: date, weekday: WeekdayLike) -> datetime:
    return start_of_day(to_previous_day_of_week(reference, weekday))


def to_start_of_next_day_of_week(reference: date, weekday: WeekdayLike) -> datetime:
    return start_of_day(to_next_day_of_week(reference, weekday))


def to_end_of_previous_day_of_week(reference: date, weekday: WeekdayLike) -> datetime:
    return end_of_day(to_previous_day_of_week(reference, weekday))


def to_end_of_next_day_of_week(reference: date, weekday: WeekdayLike) -> datetime:
    return end_of_day(to_next_day_of_week(reference, weekday))


def _in_local_time(
    local_fn: Callable[[datetime, WeekdayLike], datetime],
    utc_instant: datetime,
    weekday: WeekdayLike,
    tz: TimezoneLike,
    converter: ZoneConverter,
) -> datetime:
    """
    UTC -> local wall-clock in tz -> local_fn -> UTC.
    Weekday and day boundaries are therefore taken from the local date.
    """
    local = converter.to_local(utc_instant, tz)
    return converter.to_utc(local_fn(local, weekday), tz)


def to_start_of_previous_tz_day_of_week(
    utc_instant: datetime,
    weekday: WeekdayLike,
    tz: TimezoneLike,
    converter: ZoneConverter = ZONEINFO_CONVERTER,
) -> datetime:
    """
    Start (00:00 local) of the previous weekday as seen in tz, returned in UTC.
    """
    return _in_local_time(to_start_of_previous_day_of_week, utc_instant, weekday, tz, converter)


def to_start_of_next_tz_day_of_week(
    utc_instant: datetime,
    weekday: WeekdayLike,
    tz: TimezoneLike,
    converter: ZoneConverter = ZONEINFO_CONVERTER,
) -> datetime:
    """
    Start (00:00 local) of the next weekday as seen in tz, returned in UTC.
    """
    return _in_local_time(to_start_of_next_day_of_week, utc_instant, weekday, tz, converter)


def to_end_of_previous_tz_day_of_week(
    utc_instant: datetime,
    weekday: WeekdayLike,
    tz: TimezoneLike,
    converter: ZoneConverter = ZONEINFO_CONVERTER,
) -> datetime:
    """
    End (23:59:59.999999 local) of the previous weekday as seen in tz, returned in UTC.
    """
    return _in_local_time(to_end_of_previous_day_of_week, utc_instant, weekday, tz, converter)


def to_end_of_next_tz_day_of_week(
    utc_instant: datetime,
    weekday: WeekdayLike,
    tz: TimezoneLike,
    converter: ZoneConverter = ZONEINFO_CONVERTER,
) -> datetime:
    """
    End (23:59:59.999999 local) of the next weekday as seen in tz, returned in UTC.
    """
    return _in_local_time(to_end_of_next_day_of_week, utc_instant, weekday, tz, converter)


_LOCAL_OPS = {
    (Direction.PREVIOUS, Boundary.NONE): to_previous_day_of_week,
    (Direction.NEXT, Boundary.NONE): to_next_day_of_week,
    (Direction.PREVIOUS, Boundary.START): to_start_of_previous_day_of_week,
    (Direction.NEXT, Boundary.START): to_start_of_next_day_of_week,
    (Direction.PREVIOUS, Boundary.END): to_end_of_previous_day_of_week,
    (Direction.NEXT, Boundary.END): to_end_of_next_day_of_week,
}


def navigate(request: NavigationRequest, converter: ZoneConverter = ZONEINFO_CONVERTER) -> date:
    """
    Run the operation described by a NavigationRequest.

    Without a timezone the reference is navigated as given.
    With a timezone the reference is a UTC instant; the matching operation runs
    in local time and the result comes back as UTC.
    """
    direction = Direction(request.direction)
    boundary = Boundary(request.boundary)
    weekday = Weekday.coerce(request.weekday)
    op = _LOCAL_OPS[(direction, boundary)]
    logger.debug(
        "navigate %s %s boundary=%s tz=%s",
        direction.value,
        weekday.label,
        boundary.value,
        request.timezone,
    )

    if request.timezone is None:
        return op(request.reference, weekday)

    if not isinstance(request.reference, datetime):
        raise ValueError("A timezone-aware navigation needs a datetime reference, not a date")

    return _in_local_time(op, request.reference, weekday, request.timezone, converter)
