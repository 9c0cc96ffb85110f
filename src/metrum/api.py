from __future__ import annotations

from datetime import datetime
from typing import Optional

from .core.clock import Clock, system_clock
from .core.types import MetrumDateTime

_clock: Clock = system_clock


def set_clock(clock: Optional[Clock]) -> None:
    """Install the time source used by now(); None restores the system clock."""
    global _clock
    _clock = clock if clock is not None else system_clock


def get_clock() -> Clock:
    return _clock


def now() -> MetrumDateTime:
    return MetrumDateTime.now(_clock)


def from_utc(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> MetrumDateTime:
    return MetrumDateTime.from_utc(year, month, day, hour, minute, second, nanosecond)


def from_datetime(dt: datetime) -> MetrumDateTime:
    return MetrumDateTime.from_datetime(dt)


def from_timestamp(timestamp: int) -> MetrumDateTime:
    return MetrumDateTime.from_timestamp(timestamp)


def timestamp(dt: MetrumDateTime) -> int:
    return dt.timestamp()


def parse(text: str) -> MetrumDateTime:
    return MetrumDateTime.parse(text)
