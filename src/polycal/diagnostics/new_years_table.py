from __future__ import annotations

import argparse
from typing import Dict, List, Tuple

import polycal
from polycal.core.errors import CalendarError
from polycal.core.time import gregorian_to_jdn
from polycal.core.types import CalendarDate, CalendarId, GregorianDate


# (column title, calendar, first month of the year)
DEFAULT_CALENDARS: List[Tuple[str, CalendarId, int]] = [
    ("Chinese", CalendarId.CHINESE, 1),
    ("Persian", CalendarId.PERSIAN, 1),
    ("Hebrew", CalendarId.HEBREW, 7),
    ("Islamic", CalendarId.ISLAMIC, 1),
    ("Ethiopian", CalendarId.ETHIOPIAN, 1),
    ("Saka", CalendarId.INDIAN_SAKA, 1),
    ("Bahai", CalendarId.BAHAI, 1),
]

FIRST_MONTH: Dict[CalendarId, int] = {cid: m for _, cid, m in DEFAULT_CALENDARS}


def mmdd(g: GregorianDate) -> str:
    return f"{g.month:02d}-{g.day:02d}"


def new_years_in(calendar: CalendarId, gregorian_year: int, first_month: int = 1) -> List[GregorianDate]:
    """Gregorian dates of every new year of `calendar` that falls in `gregorian_year`.

    Usually one; a lunar calendar occasionally has two.
    """
    conv = polycal.get_converter(calendar)
    lo = gregorian_to_jdn(gregorian_year, 1, 1)
    hi = gregorian_to_jdn(gregorian_year, 12, 31)
    year = conv.from_jdn(lo).year
    out: List[GregorianDate] = []
    for y in (year, year + 1, year + 2):
        try:
            jdn = conv.to_jdn(CalendarDate(conv.descriptor.id, y, first_month, 1))
        except CalendarError:
            continue
        if lo <= jdn <= hi:
            out.append(GregorianDate.from_jdn(jdn))
    return out


def parse_calendars(arg: str) -> List[Tuple[str, CalendarId, int]]:
    """
    Parse a calendar list from the CLI.
    Example:
      --calendars "chinese,hebrew,persian"
    """
    out: List[Tuple[str, CalendarId, int]] = []
    for it in (x.strip() for x in arg.split(",")):
        if not it:
            continue
        cid = CalendarId.parse(it)
        out.append((cid.value.capitalize(), cid, FIRST_MONTH.get(cid, 1)))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a table of new-year dates for several calendars.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--calendars", type=str, default="", help='Comma list like "chinese,hebrew" (default: 7 calendars).')
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else DEFAULT_CALENDARS

    def fmt(g: GregorianDate) -> str:
        return mmdd(g) if args.dates == "mmdd" else g.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _, _ in calendars]
    colw = [5] + [max(11, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (_, cid, first), w in zip(calendars, colw[1:]):
            try:
                cell = ",".join(fmt(g) for g in new_years_in(cid, Y, first)) or "-"
            except CalendarError:
                cell = "n/a"
            row.append(cell.ljust(w))
        print("  ".join(row))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
