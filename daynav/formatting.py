from __future__ import annotations

from datetime import date, datetime

from .models import Weekday


def format_result(result: date, show_weekday_label: bool = True, timespec: str = "auto") -> str:
    """
    Render a navigation result as one line.

    Examples:
      2024-04-12 (Fri)
      2024-04-14T23:59:59.999999 (Sun)
      2024-04-15T05:00:00+00:00 (Mon)
    """
    if isinstance(result, datetime):
        text = result.isoformat(timespec=timespec)
    else:
        text = result.isoformat()

    if not show_weekday_label:
        return text
    return f"{text} ({Weekday.of(result).short_label})"
