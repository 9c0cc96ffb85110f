"""
metrum.core.time
----------------
Integer arithmetic between civil clock readings, Metrum fields and the
linear tick timestamp.

Timestamp convention:
  ticks elapsed since year 2000, day 0, minute 0, tick 0 (the epoch).
  Years before the epoch give negative timestamps. Subticks are not part
  of the timestamp.
"""

from __future__ import annotations

from typing import Tuple

from .calendar import days_between_years, year_ticks
from .constants import (
    EPOCH_YEAR,
    MICROS_PER_TICK,
    TICKS_PER_CYCLE,
    TICKS_PER_DAY,
    TICKS_PER_MINUTE,
    YEARS_PER_CYCLE,
)


def utc_day_micros(hour: int, minute: int, second: int, nanosecond: int) -> int:
    """Microseconds since civil midnight; sub-microsecond precision is dropped."""
    return (hour * 3600 + minute * 60 + second) * 1_000_000 + nanosecond // 1000


def utc_to_day_ticks(hour: int, minute: int, second: int, nanosecond: int) -> Tuple[int, int]:
    """Returns (ticks since Metrum midnight, subtick)."""
    return divmod(utc_day_micros(hour, minute, second, nanosecond), MICROS_PER_TICK)


def split_day_ticks(day_ticks: int) -> Tuple[int, int]:
    """(minute, tick) of a tick-of-day count."""
    return divmod(day_ticks, TICKS_PER_MINUTE)


def to_timestamp(year: int, day: int, minute: int, tick: int) -> int:
    """
    Ticks since the epoch. Whole years between the epoch and `year` count
    positively after 2000 and negatively before it; the in-year offset is
    always added.
    """
    ticks = days_between_years(EPOCH_YEAR, year) * TICKS_PER_DAY
    return ticks + day * TICKS_PER_DAY + minute * TICKS_PER_MINUTE + tick


def from_timestamp(timestamp: int) -> Tuple[int, int, int, int]:
    """
    Inverse of to_timestamp: returns (year, day, minute, tick).

    A negative remainder belongs to the span of the year *before* the current
    candidate and counts back from its end. Floor divmod over whole 400-year
    cycles does that borrowing in one step: the remainder left over is always
    in [0, TICKS_PER_CYCLE) and is walked forward year by year from a cycle
    start. A remainder landing exactly on a day boundary is tick 0 of that day.
    """
    cycles, remaining = divmod(timestamp, TICKS_PER_CYCLE)
    year = EPOCH_YEAR + cycles * YEARS_PER_CYCLE

    ticks = year_ticks(year)
    while remaining >= ticks:
        remaining -= ticks
        year += 1
        ticks = year_ticks(year)

    day, day_ticks = divmod(remaining, TICKS_PER_DAY)
    minute, tick = split_day_ticks(day_ticks)
    return year, day, minute, tick
