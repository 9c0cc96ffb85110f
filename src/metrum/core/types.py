from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from loguru import logger

from .calendar import days_in_month, days_in_year, year_day
from .clock import Clock, UtcFields, fields_from_datetime, system_clock
from .constants import MICROS_PER_TICK, MINUTES_PER_DAY, SUBTICKS_PER_TICK, TICKS_PER_MINUTE
from .errors import ParseError, TimeError, TimeErrorKind
from .time import from_timestamp, split_day_ticks, to_timestamp, utc_to_day_ticks

_DATE_RE = re.compile(r"^(-?[0-9]+)'([0-9]+)$")
_TIME_RE = re.compile(r"^([0-9]{3,4}):([0-9]{2,3})(?:\.([0-9]{6}|1000000))?$")


@dataclass(frozen=True, order=True)
class MetrumDate:
    """A year and its zero-based day; day < 365 (366 in leap years)."""
    year: int
    day: int

    def __post_init__(self) -> None:
        n = days_in_year(self.year)
        if not 0 <= self.day < n:
            raise TimeError(TimeErrorKind.INVALID_DAY, self.day, f"year {self.year} has {n} days")

    @classmethod
    def new(cls, year: int, day: int) -> MetrumDate:
        return cls(year, day)

    @classmethod
    def from_utc(cls, year: int, month: int, day_of_month: int) -> MetrumDate:
        if not 1 <= month <= 12:
            raise TimeError(TimeErrorKind.INVALID_UTC_MONTH, month)
        if not 1 <= day_of_month <= days_in_month(month, year):
            raise TimeError(TimeErrorKind.INVALID_UTC_DAY, day_of_month, f"{year}-{month:02d}")
        return cls(year, year_day(year, month, day_of_month))

    @classmethod
    def parse(cls, text: str) -> MetrumDate:
        m = _DATE_RE.match(text.strip())
        if m is None:
            raise ParseError(f"not a Metrum date: {text!r}")
        return cls(int(m.group(1)), int(m.group(2)))

    @property
    def days_in_year(self) -> int:
        return days_in_year(self.year)

    def __str__(self) -> str:
        return f"{self.year}'{self.day}"


@dataclass(frozen=True, order=True)
class MetrumTime:
    """
    Minute of the day, tick of the minute and subtick.

    The upper bounds are inclusive: minute == 1000, tick == 100 and
    subtick == 1_000_000 are all accepted.
    """
    minute: int
    tick: int
    subtick: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.minute <= MINUTES_PER_DAY:
            raise TimeError(TimeErrorKind.INVALID_MINUTE, self.minute)
        if not 0 <= self.tick <= TICKS_PER_MINUTE:
            raise TimeError(TimeErrorKind.INVALID_TICK, self.tick)
        if not 0 <= self.subtick <= SUBTICKS_PER_TICK:
            raise TimeError(TimeErrorKind.INVALID_SUBTICK, self.subtick)

    @classmethod
    def new(cls, minute: int, tick: int, subtick: int = 0) -> MetrumTime:
        return cls(minute, tick, subtick)

    @classmethod
    def from_utc(cls, hour: int, minute: int, second: int, nanosecond: int = 0) -> MetrumTime:
        """Proportional remap of the civil clock; truncates to whole microseconds."""
        if not 0 <= hour <= 23:
            raise TimeError(TimeErrorKind.INVALID_UTC_HOUR, hour)
        if not 0 <= minute <= 59:
            raise TimeError(TimeErrorKind.INVALID_UTC_MINUTE, minute)
        if not 0 <= second <= 59:
            raise TimeError(TimeErrorKind.INVALID_UTC_SECOND, second)
        if not 0 <= nanosecond <= 999_999_999:
            raise TimeError(TimeErrorKind.INVALID_UTC_NANO, nanosecond)

        day_ticks, subtick = utc_to_day_ticks(hour, minute, second, nanosecond)
        m, t = split_day_ticks(day_ticks)
        return cls(m, t, subtick)

    @classmethod
    def parse(cls, text: str) -> MetrumTime:
        m = _TIME_RE.match(text.strip())
        if m is None:
            raise ParseError(f"not a Metrum time: {text!r}")
        subtick = int(m.group(3)) if m.group(3) is not None else 0
        return cls(int(m.group(1)), int(m.group(2)), subtick)

    @property
    def day_ticks(self) -> int:
        return self.minute * TICKS_PER_MINUTE + self.tick

    def with_subtick(self, subtick: int) -> MetrumTime:
        return replace(self, subtick=subtick)

    def __str__(self) -> str:
        return f"{self.minute:03d}:{self.tick:02d}.{self.subtick:06d}"


@dataclass(frozen=True, order=True)
class MetrumDateTime:
    date: MetrumDate
    time: MetrumTime

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def new(cls, year: int, day: int, minute: int, tick: int, subtick: int = 0) -> MetrumDateTime:
        return cls(MetrumDate(year, day), MetrumTime(minute, tick, subtick))

    @classmethod
    def from_utc(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int,
        nanosecond: int = 0,
    ) -> MetrumDateTime:
        return cls(
            MetrumDate.from_utc(year, month, day),
            MetrumTime.from_utc(hour, minute, second, nanosecond),
        )

    @classmethod
    def from_fields(cls, fields: UtcFields) -> MetrumDateTime:
        return cls.from_utc(*fields)

    @classmethod
    def from_datetime(cls, dt: datetime) -> MetrumDateTime:
        """Naive datetimes are read as UTC."""
        return cls.from_fields(fields_from_datetime(dt))

    @classmethod
    def now(cls, clock: Optional[Clock] = None) -> MetrumDateTime:
        """
        Current Metrum date-time from `clock` (the system UTC clock by default).
        An invalid reading is a broken clock, not a user error: RuntimeError.
        """
        reading = (clock or system_clock)()
        try:
            return cls.from_fields(reading)
        except TimeError as e:
            logger.opt(exception=e).critical("clock produced an invalid UTC reading: {!r}", reading)
            raise RuntimeError(f"clock produced an invalid UTC reading: {reading!r}") from e

    @classmethod
    def from_timestamp(cls, timestamp: int) -> MetrumDateTime:
        """Subtick of the result is always 0."""
        year, day, minute, tick = from_timestamp(timestamp)
        return cls.new(year, day, minute, tick)

    @classmethod
    def parse(cls, text: str) -> MetrumDateTime:
        """Reads "Y'D MMM:TT" with an optional ".SSSSSS" subtick."""
        parts = text.split()
        if len(parts) != 2:
            raise ParseError(f"not a Metrum date-time: {text!r}")
        return cls(MetrumDate.parse(parts[0]), MetrumTime.parse(parts[1]))

    # ---------------------------------------------------------
    # Fields
    # ---------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def minute(self) -> int:
        return self.time.minute

    @property
    def tick(self) -> int:
        return self.time.tick

    @property
    def subtick(self) -> int:
        return self.time.subtick

    def with_subtick(self, subtick: int) -> MetrumDateTime:
        return replace(self, time=self.time.with_subtick(subtick))

    # ---------------------------------------------------------
    # Conversions
    # ---------------------------------------------------------

    def timestamp(self) -> int:
        """Ticks since 2000'0 000:00; the subtick is dropped."""
        return to_timestamp(self.year, self.day, self.minute, self.tick)

    def to_datetime(self) -> datetime:
        """
        UTC-aware datetime, with the subtick read as microseconds.
        Only years 1..9999 are representable.
        """
        micros = self.time.day_ticks * MICROS_PER_TICK + self.subtick
        start = datetime(self.year, 1, 1, tzinfo=timezone.utc)
        return start + timedelta(days=self.day, microseconds=micros)

    def __str__(self) -> str:
        return f"{self.date} {self.time}"
