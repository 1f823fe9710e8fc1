from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

import polycal
from polycal.core.errors import InvalidDateError
from polycal.core.time import day_of_week
from polycal.core.types import CalendarDate, CalendarId, GregorianDate
from polycal.labels.format import DAY_NAMES_SHORT


def dow_header(week_starts_on: int = 0) -> str:
    names = [DAY_NAMES_SHORT[(week_starts_on + i) % 7][:2] for i in range(7)]
    return "     ".join(names)


def cell(top: str, bot: str, w: int = 6) -> Tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: List[List[Tuple[str, str]]], week_starts_on: int = 0) -> None:
    print(title)
    print(dow_header(week_starts_on))
    print("-" * len(dow_header(week_starts_on)))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_cells(calendar: CalendarId | str, year: int, month: int, *, leap_month: bool = False) -> Tuple[int, List[Tuple[str, str]]]:
    """(first JDN, one (calendar day, Gregorian MM-DD) cell per day) for a calendar month."""
    conv = polycal.get_converter(calendar)
    if conv.descriptor.id in (CalendarId.MAYAN_TZOLKIN, CalendarId.MAYAN_LONGCOUNT):
        raise InvalidDateError(f"{conv.descriptor.name} has no months to lay out", calendar=conv.descriptor.id.value)
    extra = {"leap_month": True} if leap_month else None
    lo, hi = conv.day_range(year, month, **(extra or {}))
    first = conv.to_jdn(CalendarDate(conv.descriptor.id, year, month, lo, extra))
    cells = []
    for i in range(hi - lo + 1):
        g = GregorianDate.from_jdn(first + i)
        cells.append(cell(f"{lo + i:2d}", f"{g.month:02d}-{g.day:02d}"))
    return first, cells


def month_calendar(calendar: CalendarId | str, year: int, month: int, *, leap_month: bool = False, week_starts_on: int = 0) -> None:
    first, cells = month_cells(calendar, year, month, leap_month=leap_month)
    conv = polycal.get_converter(calendar)
    name = conv.month_name(CalendarDate(conv.descriptor.id, year, month, 1, {"leap_month": leap_month}))

    weeks: List[List[Tuple[str, str]]] = []
    wk: List[Tuple[str, str]] = [cell("", "")] * ((day_of_week(first) - week_starts_on) % 7)
    for c in cells:
        wk.append(c)
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        weeks.append(wk + [cell("", "")] * (7 - len(wk)))

    last = GregorianDate.from_jdn(first + len(cells) - 1)
    title = f"{conv.descriptor.name}  {name} {year}   ({GregorianDate.from_jdn(first)} .. {last})"
    print_grid(title, weeks, week_starts_on)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print a calendar month as a week grid with Gregorian dates.")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--leap", action="store_true", help="leap month (Chinese)")
    p.add_argument("--week-starts-on", type=int, default=0, choices=range(7), metavar="0..6", help="0 = Sunday ... 6 = Saturday")
    args = p.parse_args(argv)

    month_calendar(args.calendar, args.year, args.month, leap_month=args.leap, week_starts_on=args.week_starts_on)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
