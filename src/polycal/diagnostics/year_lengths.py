#!/usr/bin/env python3
"""
polycal.diagnostics.year_lengths
--------------------------------
Year-length statistics over a span of years (numpy).
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

import polycal
from polycal.engines.calendar import Calendar

logger = logging.getLogger(__name__)


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "polycal[diagnostics]"') from e


def year_range(start: int, end: int) -> List[int]:
    """Years start..end inclusive; there is no year 0."""
    if end < start:
        raise ValueError("end must be >= start")
    return [y for y in range(start, end + 1) if y != 0]


def year_length_stats(
    cal: Calendar,
    start: int,
    end: int,
    reference: Optional[float] = None,
) -> dict:
    """
    Year-length statistics over years start..end.

    Returns the number of years, total days, mean/min/max length, the count
    of each distinct length and, when a reference year length is given, the
    accumulated drift in days (calendar minus reference).
    """
    np = _need_numpy()

    years = year_range(start, end)
    lengths = np.array([cal.days_in_year(y) for y in years], dtype=np.int64)
    values, counts = np.unique(lengths, return_counts=True)

    total = int(lengths.sum())
    out = {
        "years": len(years),
        "total_days": total,
        "mean": float(lengths.mean()),
        "min": int(lengths.min()),
        "max": int(lengths.max()),
        "lengths": {int(v): int(c) for v, c in zip(values, counts)},
        "drift": None,
    }
    if reference is not None:
        out["drift"] = float(total - reference * len(years))
    return out


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Year-length statistics for registered calendars.")
    p.add_argument("--calendars", type=str, default=",".join(polycal.list_calendars()),
                   help="Comma-separated calendar list.")
    p.add_argument("--start", type=int, default=1, help="First year.")
    p.add_argument("--end", type=int, default=400, help="Last year.")
    p.add_argument("--reference", type=float, default=None,
                   help="Reference year length in days (e.g. 365.2425) for drift.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    names = [x.strip() for x in args.calendars.split(",") if x.strip()]
    for name in names:
        cal = polycal.get_calendar(name)
        logger.debug("year lengths %s: years [%d, %d]", name, args.start, args.end)
        stats = year_length_stats(cal, args.start, args.end, reference=args.reference)

        print(f"{name}: {stats['years']} years, {stats['total_days']} days")
        print(f"  mean = {stats['mean']:.6f}  min = {stats['min']}  max = {stats['max']}")
        for length, count in stats["lengths"].items():
            print(f"  {length:>5} days: {count}")
        if stats["drift"] is not None:
            print(f"  drift vs {args.reference:g} = {stats['drift']:+.4f} days")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
