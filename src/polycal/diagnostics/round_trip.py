from __future__ import annotations

import argparse
import logging
import random
from typing import Dict, List, Sequence, Tuple

import polycal
from polycal.core.errors import CalendarError
from polycal.core.time import gregorian_to_jdn
from polycal.core.types import CalendarId

logger = logging.getLogger(__name__)


def sample_jdns(start: int, end: int, samples: int, seed: int = 42) -> List[int]:
    """Sorted random JDNs in [start, end], always including both ends."""
    rng = random.Random(seed)
    picks = {start, end}
    picks.update(rng.randint(start, end) for _ in range(max(0, samples - 2)))
    return sorted(picks)


def check_calendar(calendar: CalendarId | str, jdns: Sequence[int]) -> Tuple[int, List[Tuple[int, str]]]:
    """
    Run to_jdn(from_jdn(j)) == j over `jdns`.

    Returns (number checked, failures); JDNs outside the calendar's window are skipped.
    """
    conv = polycal.get_converter(calendar)
    lo, hi = conv.descriptor.min_jdn, conv.descriptor.max_jdn
    checked = 0
    failures: List[Tuple[int, str]] = []
    for j in jdns:
        if not lo <= j <= hi:
            continue
        checked += 1
        try:
            d = conv.from_jdn(j)
            back = conv.to_jdn(d)
        except CalendarError as e:
            failures.append((j, f"{type(e).__name__}: {e}"))
            continue
        if back != j:
            failures.append((j, f"{d} -> {back}"))
    logger.debug("%s: %d checked, %d failures", conv.descriptor.id.value, checked, len(failures))
    return checked, failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip every calendar through the JDN over random days.")
    p.add_argument("--from-year", type=int, default=1800)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--samples", type=int, default=200, help="Random days per calendar (default: 200).")
    p.add_argument("--seed", type=int, default=42)
    p.add_argument("--calendar", action="append", default=[], help="calendar id (repeatable; default: all)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    jdns = sample_jdns(
        gregorian_to_jdn(args.from_year, 1, 1),
        gregorian_to_jdn(args.to_year, 12, 31),
        args.samples,
        args.seed,
    )
    calendars = args.calendar or [d.id.value for d in polycal.list_calendars()]

    results: Dict[str, Tuple[int, List[Tuple[int, str]]]] = {}
    for cal in calendars:
        results[cal] = check_calendar(cal, jdns)

    width = max(len(c) for c in calendars)
    bad = 0
    for cal, (checked, failures) in results.items():
        status = "ok" if not failures else f"{len(failures)} FAILED"
        print(f"{cal.ljust(width)}  {checked:5d} days  {status}")
        for j, msg in failures[:5]:
            print(f"    JDN {j}: {msg}")
        bad += len(failures)

    return 1 if bad else 0


if __name__ == "__main__":
    raise SystemExit(main())
