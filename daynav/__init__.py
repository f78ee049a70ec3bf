"""
daynav - previous/next weekday navigation with day-boundary and timezone variants.
"""
from .conversion import ZONEINFO_CONVERTER, TimezoneConversionError, ZoneConverter
from .day_bounds import end_of_day, start_of_day
from .models import Boundary, Direction, NavigationRequest, Weekday
from .navigator import (
    navigate,
    to_end_of_next_day_of_week,
    to_end_of_next_tz_day_of_week,
    to_end_of_previous_day_of_week,
    to_end_of_previous_tz_day_of_week,
    to_next_day_of_week,
    to_previous_day_of_week,
    to_start_of_next_day_of_week,
    to_start_of_next_tz_day_of_week,
    to_start_of_previous_day_of_week,
    to_start_of_previous_tz_day_of_week,
)

__all__ = [
    "Boundary",
    "Direction",
    "NavigationRequest",
    "TimezoneConversionError",
    "Weekday",
    "ZONEINFO_CONVERTER",
    "ZoneConverter",
    "end_of_day",
    "navigate",
    "start_of_day",
    "to_end_of_next_day_of_week",
    "to_end_of_next_tz_day_of_week",
    "to_end_of_previous_day_of_week",
    "to_end_of_previous_tz_day_of_week",
    "to_next_day_of_week",
    "to_previous_day_of_week",
    "to_start_of_next_day_of_week",
    "to_start_of_next_tz_day_of_week",
    "to_start_of_previous_day_of_week",
    "to_start_of_previous_tz_day_of_week",
]
