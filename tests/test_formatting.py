from datetime import date, datetime, timezone

from daynav.formatting import format_result


def test_plain_date():
    assert format_result(date(2024, 4, 12)) == "2024-04-12 (Fri)"


def test_end_of_day_keeps_microseconds():
    assert format_result(datetime(2024, 4, 14, 23, 59, 59, 999999)) == "2024-04-14T23:59:59.999999 (Sun)"


def test_aware_utc_with_timespec():
    result = datetime(2024, 4, 15, 5, 0, tzinfo=timezone.utc)

    assert format_result(result, timespec="minutes") == "2024-04-15T05:00+00:00 (Mon)"


def test_label_can_be_hidden():
    assert format_result(date(2024, 4, 12), show_weekday_label=False) == "2024-04-12"
