"""
Test fixtures shared across all test modules.

Provides:
1. monday_ref - Monday 2024-04-15 00:00 (naive), the reference used throughout
2. identity_converter - ZoneConverter that leaves datetimes untouched
3. recording_converter - ZoneConverter that records every call it receives
4. clean_env - isolates Settings from the repo's configuration.yaml, .env and env vars

Usage in tests:
    def test_something(monday_ref, identity_converter):
        ...
"""

from __future__ import annotations

from datetime import datetime

import pytest

from daynav.conversion import ZoneConverter, to_local, to_utc


@pytest.fixture()
def monday_ref() -> datetime:
    return datetime(2024, 4, 15)


@pytest.fixture()
def identity_converter() -> ZoneConverter:
    return ZoneConverter(to_local=lambda dt, tz: dt, to_utc=lambda dt, tz: dt)


class RecordingConverter:
    """
    Wraps the real conversions and keeps (name, datetime, tz) for each call.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, datetime, object]] = []

    def _to_local(self, dt: datetime, tz) -> datetime:
        self.calls.append(("to_local", dt, tz))
        return to_local(dt, tz)

    def _to_utc(self, dt: datetime, tz) -> datetime:
        self.calls.append(("to_utc", dt, tz))
        return to_utc(dt, tz)

    @property
    def converter(self) -> ZoneConverter:
        return ZoneConverter(to_local=self._to_local, to_utc=self._to_utc)


@pytest.fixture()
def recording_converter() -> RecordingConverter:
    return RecordingConverter()


@pytest.fixture()
def clean_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for var in ("ENV", "LOG_LEVEL", "DEFAULT_TIMEZONE", "CONFIG_PATH"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path
