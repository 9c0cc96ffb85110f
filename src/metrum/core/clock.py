"""
metrum.core.clock
-----------------
The wall-clock capability. A clock is any zero-argument callable returning
the current UTC civil reading as UtcFields; the conversion core never reads
system time itself.
"""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, NamedTuple, Union


class UtcFields(NamedTuple):
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int
    nanosecond: int = 0


Clock = Callable[[], UtcFields]


def fields_from_datetime(dt: datetime) -> UtcFields:
    """Naive datetimes are taken as UTC; aware ones are converted to UTC."""
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return UtcFields(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.microsecond * 1000)


def system_clock() -> UtcFields:
    secs, nanos = divmod(time.time_ns(), 1_000_000_000)
    dt = datetime.fromtimestamp(secs, tz=timezone.utc)
    return fields_from_datetime(dt)._replace(nanosecond=nanos)


def fixed_clock(reading: Union[UtcFields, datetime]) -> Clock:
    """A clock frozen at one reading."""
    fields = fields_from_datetime(reading) if isinstance(reading, datetime) else UtcFields(*reading)
    return lambda: fields
