# tests/test_timestamp.py

import random
from datetime import date, datetime, timedelta

import pytest

import metrum
from metrum import MetrumDateTime, days_in_year
from metrum.core.time import from_timestamp, to_timestamp

EPOCH = date(2000, 1, 1)


def reference_timestamp(year, day, minute, tick):
    """Year-by-year sum, the slow definition of the timestamp."""
    ticks = 0
    if year >= 2000:
        for y in range(2000, year):
            ticks += days_in_year(y) * 100_000
    else:
        for y in range(year, 2000):
            ticks -= days_in_year(y) * 100_000
    return ticks + day * 100_000 + minute * 100 + tick


def reference_from_timestamp(ts):
    """Year walk with the look-back year for negative remainders and truncating arithmetic."""
    def span(year, remaining):
        return days_in_year(year - 1 if remaining < 0 else year) * 100_000

    year, remaining = 2000, ts
    ticks = span(year, remaining)
    while abs(remaining) >= ticks:
        if remaining < 0:
            remaining += ticks
            year -= 1
        else:
            remaining -= ticks
            year += 1
        ticks = span(year, remaining)

    if remaining >= 0:
        day, day_ticks = remaining // 100_000, remaining % 100_000
    else:
        year -= 1
        q = -(-remaining // 100_000)  # truncate toward zero
        r = remaining - q * 100_000
        day = q + days_in_year(year)
        day_ticks = r + 100_000
        if day_ticks == 100_000:
            day_ticks = 0
        else:
            day -= 1
    return year, day, day_ticks // 100, day_ticks % 100


def test_epoch_is_zero():
    anchor = MetrumDateTime.new(2000, 0, 0, 0)
    assert anchor.timestamp() == 0
    assert MetrumDateTime.from_timestamp(0) == anchor
    assert metrum.from_utc(2000, 1, 1).timestamp() == 0


def test_moon_landing_round_trip(moon_landing):
    x = moon_landing.with_subtick(0)
    assert x.timestamp() == -1_112_115_440
    assert MetrumDateTime.from_timestamp(x.timestamp()) == x


def test_now_round_trip():
    x = metrum.now().with_subtick(0)
    assert MetrumDateTime.from_timestamp(x.timestamp()) == x


def test_subtick_not_in_timestamp(moon_landing):
    assert moon_landing.timestamp() == moon_landing.with_subtick(0).timestamp()
    assert MetrumDateTime.from_timestamp(moon_landing.timestamp()).subtick == 0


@pytest.mark.parametrize(
    "ts, fields",
    [
        (-1, (1999, 364, 999, 99)),
        (-100_000, (1999, 364, 0, 0)),
        (-100_001, (1999, 363, 999, 99)),
        (-36_500_000, (1999, 0, 0, 0)),
        (-36_500_001, (1998, 364, 999, 99)),
        (36_599_999, (2000, 365, 999, 99)),
        (36_600_000, (2001, 0, 0, 0)),
        (-3_652_400_000, (1900, 0, 0, 0)),
        (-3_652_400_001, (1899, 364, 999, 99)),
    ],
)
def test_boundaries_around_epoch_and_century(ts, fields):
    assert from_timestamp(ts) == fields
    assert to_timestamp(*fields) == ts


def test_every_day_boundary_around_epoch():
    for days in range(-800, 800):
        for offset in (-1, 0, 1):
            ts = days * 100_000 + offset
            assert to_timestamp(*from_timestamp(ts)) == ts
            assert from_timestamp(ts) == reference_from_timestamp(ts)


def test_century_year_boundaries():
    # Jan 1 and Dec 31 around non-leap centuries and the 400-year leap.
    for year in (1700, 1800, 1900, 2100, 1600, 2400, -100, 0):
        for y in (year - 1, year, year + 1):
            first = to_timestamp(y, 0, 0, 0)
            last = to_timestamp(y, days_in_year(y) - 1, 999, 99)
            assert from_timestamp(first) == (y, 0, 0, 0)
            assert from_timestamp(last) == (y, days_in_year(y) - 1, 999, 99)
            assert from_timestamp(last + 1) == (y + 1, 0, 0, 0)
            assert from_timestamp(first - 1)[0] == y - 1


def test_timestamp_matches_date_arithmetic():
    random.seed(42)
    start = datetime(1, 1, 1)
    for _ in range(5000):
        dt = start + timedelta(microseconds=random.randrange(9998 * 365 * 86_400_000_000))
        x = MetrumDateTime.from_datetime(dt)
        expected = (dt.date() - EPOCH).days * 100_000 + x.minute * 100 + x.tick
        assert x.timestamp() == expected
        assert MetrumDateTime.from_timestamp(expected) == x.with_subtick(0)


def test_matches_reference_far_from_epoch():
    random.seed(3)
    span = 3000 * 366 * 100_000
    for _ in range(300):
        ts = random.randint(-span, span)
        fields = from_timestamp(ts)
        assert fields == reference_from_timestamp(ts)
        assert reference_timestamp(*fields) == ts


def test_round_trip_unbounded_years():
    random.seed(5)
    for _ in range(2000):
        ts = random.randint(-10**15, 10**15)
        year, day, minute, tick = from_timestamp(ts)
        assert 0 <= day < days_in_year(year)
        assert 0 <= minute < 1000 and 0 <= tick < 100
        assert to_timestamp(year, day, minute, tick) == ts


def test_fields_round_trip():
    random.seed(9)
    for _ in range(2000):
        year = random.randint(-5000, 5000)
        x = MetrumDateTime.new(year, random.randrange(days_in_year(year)), random.randrange(1000), random.randrange(100))
        assert MetrumDateTime.from_timestamp(x.timestamp()) == x
