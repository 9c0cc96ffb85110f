from __future__ import annotations

import argparse
import random
from datetime import date, datetime, timedelta

from loguru import logger

import metrum
from metrum.core.constants import TICKS_PER_DAY

EPOCH_DATE = date(2000, 1, 1)


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_datetime(start: date, end: date) -> datetime:
    span = (end - start).days
    d = start + timedelta(days=random.randint(0, span))
    return datetime(d.year, d.month, d.day) + timedelta(microseconds=random.randrange(86_400_000_000))


def civil_test(N: int, start: date, end: date, *, max_failures: int) -> int:
    """UTC -> Metrum -> timestamp -> Metrum, checked against datetime day arithmetic."""
    failures = 0
    for _ in range(N):
        dt = random_datetime(start, end)
        x = metrum.from_datetime(dt).with_subtick(0)
        ts = x.timestamp()
        expected = (dt.date() - EPOCH_DATE).days * TICKS_PER_DAY + x.time.day_ticks
        back = metrum.from_timestamp(ts)

        if ts != expected or back != x:
            failures += 1
            print("\nFAIL (civil)")
            print("dt:", dt.isoformat())
            print("metrum:", x)
            print("timestamp:", ts, "expected:", expected)
            print("back:", back)
            logger.warning("civil round-trip failed for {}", dt.isoformat())
            if failures >= max_failures:
                return failures
    return failures


def ticks_test(N: int, span: int, *, max_failures: int) -> int:
    """timestamp -> Metrum -> timestamp over [-span, span]."""
    failures = 0
    for _ in range(N):
        ts = random.randint(-span, span)
        x = metrum.from_timestamp(ts)
        if x.timestamp() != ts:
            failures += 1
            print("\nFAIL (ticks)")
            print("timestamp:", ts)
            print("metrum:", x)
            print("back:", x.timestamp())
            logger.warning("tick round-trip failed for {}", ts)
            if failures >= max_failures:
                return failures
    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: UTC -> Metrum -> timestamp -> Metrum.")
    p.add_argument("--N", type=int, default=5000, help="Trials per check.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--years", type=int, default=100_000, help="Timestamp span in years either side of the epoch.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop a check after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    random.seed(args.seed)
    print(f"Civil dates {start} .. {end} ...")
    total_fail = civil_test(args.N, start, end, max_failures=args.max_failures)
    print(f"Timestamps within {args.years} years of the epoch ...")
    total_fail += ticks_test(args.N, args.years * 366 * TICKS_PER_DAY, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
