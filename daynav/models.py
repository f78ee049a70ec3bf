from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from enum import Enum
from typing import Optional, Union


class Weekday(int, Enum):
    """
    Day of the week, numbered like date.weekday(): Mon=0 ... Sun=6.
    """
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def short_label(self) -> str:
        return self.label[:3]

    @classmethod
    def of(cls, value: date) -> "Weekday":
        return cls(value.weekday())

    @classmethod
    def coerce(cls, value: Union["Weekday", int, str]) -> "Weekday":
        """
        Accepts a Weekday, an int 0..6 or an English day name.
        Names are case-insensitive; full names and 3-letter abbreviations both work.
        """
        if isinstance(value, cls):
            return value

        if isinstance(value, bool):
            raise ValueError(f"Not a weekday: {value!r}")

        if isinstance(value, int):
            if value < 0 or value > 6:
                raise ValueError("weekday must be 0..6 (Mon..Sun)")
            return cls(value)

        if isinstance(value, str):
            key = value.strip().lower()
            if key in WEEKDAY_NAMES:
                return WEEKDAY_NAMES[key]
            raise ValueError(f"Unknown weekday name: {value!r}")

        raise ValueError(f"Not a weekday: {value!r}")


# "monday" / "mon" -> Weekday.MONDAY, etc.
WEEKDAY_NAMES = {}
for _wd in Weekday:
    WEEKDAY_NAMES[_wd.name.lower()] = _wd
    WEEKDAY_NAMES[_wd.name.lower()[:3]] = _wd
del _wd


class Direction(str, Enum):
    PREVIOUS = "previous"
    NEXT = "next"


class Boundary(str, Enum):
    """
    Which time-of-day the result should carry.
    NONE keeps the reference's own time-of-day.
    """
    NONE = "none"
    START = "start"
    END = "end"


TimezoneLike = Union[str, tzinfo]


@dataclass(frozen=True)
class NavigationRequest:
    """
    One navigation call, as built by the CLI.

    If timezone is None => reference is navigated as-is.
    If timezone is set => reference is treated as a UTC instant and the result is UTC.
    """
    reference: date
    weekday: Weekday
    direction: Direction = Direction.NEXT
    boundary: Boundary = Boundary.NONE
    timezone: Optional[TimezoneLike] = None
