"""
polycal.diagnostics.round_trip
------------------------------
Randomized round trips through every conversion path of named calendars.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import List

import polycal
from polycal.core.errors import CalendarError

logger = logging.getLogger(__name__)


def parse_calendars(s: str) -> List[str]:
    # "gregorian,epoch" -> ["gregorian", "epoch"]
    return [x.strip() for x in s.split(",") if x.strip()]


def _report(kind: str, name: str, day: int, detail: str) -> None:
    print(f"\nFAIL ({kind})")
    print("calendar:", name)
    print("day:", day)
    print(detail)


def roundtrip_test(
    name: str,
    N: int,
    start: int,
    end: int,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Checks day -> year-day -> day, day -> date -> day (calendars with months),
    and day -> default format -> parse -> day for N random epoch days.
    """
    cal = polycal.get_calendar(name)
    random.seed(seed)
    failures = 0

    for _ in range(N):
        day = random.randint(start, end)

        year_day = cal.day_to_year_day(day)
        back = cal.year_day_to_day(year_day)
        if back != day:
            failures += 1
            _report("year-day", name, day, f"year_day: {year_day}\nback: {back}")

        if cal.has_months():
            date = cal.day_to_date(day)
            back = cal.date_to_day(date)
            if back != day:
                failures += 1
                _report("date", name, day, f"date: {date}\nback: {back}")

        text = cal.format(day)
        try:
            back = cal.parse(text)
        except CalendarError as e:
            failures += 1
            _report("parse", name, day, f"text: {text!r}\nerror: {e}")
        else:
            if back != day:
                failures += 1
                _report("format", name, day, f"text: {text!r}\nback: {back}")

        if failures >= max_failures:
            return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: epoch day -> calendar -> epoch day.")
    p.add_argument("--calendars", type=str, default=",".join(polycal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=500, help="Trials per calendar.")
    p.add_argument("--start", type=int, default=-200_000, help="First epoch day.")
    p.add_argument("--end", type=int, default=200_000, help="Last epoch day.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    names = parse_calendars(args.calendars)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for name in names:
        print(f"Testing {name} ...")
        logger.debug("round trip %s: N=%d days=[%d, %d] seed=%d", name, args.N, args.start, args.end, args.seed)
        f = roundtrip_test(name, N=args.N, start=args.start, end=args.end, seed=args.seed,
                           max_failures=args.max_failures)
        total_fail += f

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
