"""
Start-of-day / end-of-day normalization.

End of day is 23:59:59.999999, the last instant datetime can represent
before the following midnight. Both functions keep tzinfo as-is, so an aware
local datetime stays in its zone (wall-clock time, not a fixed offset).
"""
from __future__ import annotations

from datetime import date, datetime, time


def _as_datetime(value: date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: date) -> datetime:
    return _as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0, fold=0)


def end_of_day(value: date) -> datetime:
    return _as_datetime(value).replace(hour=23, minute=59, second=59, microsecond=999999, fold=0)
