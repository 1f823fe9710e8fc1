from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys
from typing import Optional

from .core.errors import PolycalError

logger = logging.getLogger(__name__)


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fields(d) -> str:
    parts = [str(d.year)]
    if d.month is not None:
        parts.append(str(d.month))
    if d.day is not None:
        parts.append(str(d.day))
    s = "-".join(parts)
    if d.extra:
        s += "  " + " ".join(f"{k}={v}" for k, v in d.extra.items())
    return s


# ============================================================
# Conversion commands
# ============================================================

def cmd_convert(argv: list[str], week_starts_on: int = 0) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal convert", description="Gregorian date -> date in another calendar")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--to", required=True, dest="calendar", help="target calendar id")
    args = p.parse_args(argv)

    res = polycal.convert(args.date, args.calendar)
    if isinstance(res, PolycalError):
        raise res
    label = polycal.label_time_range(args.date, "day", res.calendar, week_starts_on=week_starts_on)
    print(f"{res.calendar.value}: {_fields(res)}")
    print(f"  {label}")
    return 0


def cmd_label(argv: list[str], week_starts_on: int = 0) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal label", description="Label the time range containing a Gregorian date")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--range", default="day", choices=[r.value for r in polycal.TimeRange])
    p.add_argument("--calendar", default="gregorian")
    p.add_argument("--week-starts-on", type=int, default=week_starts_on, choices=range(7), metavar="0..6", help="0 = Sunday ... 6 = Saturday")
    p.add_argument("--bounds", action="store_true", help="also print the Gregorian span")
    args = p.parse_args(argv)

    lab = polycal.time_range_label(args.date, args.range, args.calendar, week_starts_on=args.week_starts_on)
    print(lab.text)
    if args.bounds:
        print(f"  {lab.start} .. {lab.end}" + ("  (gregorian fallback)" if lab.fallback else ""))
    return 0


def cmd_list(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal list", description="List supported calendars")
    p.add_argument("--verbose", "-v", action="store_true", help="include descriptions and validity windows")
    args = p.parse_args(argv)

    descs = polycal.list_calendars()
    w = max(len(d.id.value) for d in descs)
    for d in descs:
        print(f"{d.id.value.ljust(w)}  {d.kind:<9}  {d.name}")
        if args.verbose:
            lo = polycal.GregorianDate.from_jdn(d.min_jdn)
            hi = polycal.GregorianDate.from_jdn(d.max_jdn)
            print(f"{'':{w}}  {d.native_name}; valid {lo} .. {hi}")
            if d.description:
                print(f"{'':{w}}  {d.description}")
    return 0


def cmd_jdn(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal jdn", description="Gregorian date -> Julian Day Number")
    p.add_argument("date", help="YYYY-MM-DD")
    args = p.parse_args(argv)

    print(polycal.GregorianDate.parse(args.date).jdn)
    return 0


def cmd_from_jdn(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal from-jdn", description="Julian Day Number -> calendar date")
    p.add_argument("jdn", type=int)
    p.add_argument("--calendar", default="gregorian")
    args = p.parse_args(argv)

    d = polycal.from_jdn(args.jdn, args.calendar)
    print(f"{d.calendar.value}: {_fields(d)}")
    return 0


# ============================================================
# Astronomy tools
# ============================================================

def cmd_seasons(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal seasons", description="Equinox and solstice days of a Gregorian year")
    p.add_argument("year", type=int)
    p.add_argument("--offset-hours", type=float, default=0.0, help="local civil offset from UT (default: 0)")
    args = p.parse_args(argv)

    s = polycal.seasons(args.year, args.offset_hours)
    for name, jdn in (
        ("March equinox", s.march_equinox),
        ("June solstice", s.june_solstice),
        ("September equinox", s.september_equinox),
        ("December solstice", s.december_solstice),
    ):
        print(f"{name:<18} {polycal.GregorianDate.from_jdn(jdn)}  (JDN {jdn})")
    return 0


def cmd_astro_args(argv: list[str]) -> int:
    from polycal.reference import astro_args as aa

    p = argparse.ArgumentParser(prog="polycal astro-args", description="Print astronomical fundamental arguments at a given JD(TT).")
    p.add_argument("--jd-tt", type=float, default=2451545.0, help="Julian Date in TT (default: J2000.0 = 2451545.0)")
    p.add_argument("--k", type=float, default=0.0, help="Lunation index for mean new moon (Meeus), default 0")
    args = p.parse_args(argv)

    jd = float(args.jd_tt)
    T = aa.T_centuries(jd)

    fa = aa.fundamental_args(T)
    sm = aa.solar_mean_elements(T)

    print(f"JD_TT = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Fundamental arguments (degrees, wrapped to [0,360))")
    print(f"  L'     = {fa.Lp_deg:.10f}")
    print(f"  D      = {fa.D_deg:.10f}")
    print(f"  M      = {fa.M_deg:.10f}")
    print(f"  M'     = {fa.Mp_deg:.10f}")
    print(f"  F      = {fa.F_deg:.10f}")
    print(f"  Omega  = {fa.Omega_deg:.10f}")
    print()
    print("Sun mean elements")
    print(f"  L0     = {sm.L0_deg:.10f}")
    print(f"  M      = {sm.M_deg:.10f}")
    print(f"  eps0   = {aa.mean_obliquity_deg(T):.10f}")
    print()
    print(f"Tropical year = {aa.tropical_year_days(T):.9f} d")
    print(f"Synodic month = {aa.synodic_month_days(T):.9f} d")
    print(f"Mean new moon (k={args.k:g}) JDE = {aa.jde_mean_new_moon(args.k):.6f}")
    return 0


def cmd_solar(argv: list[str]) -> int:
    from polycal.reference import solar
    from polycal.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="polycal solar", description="True/apparent solar longitude and equation of time.")
    p.add_argument("--jd-ut", type=float, default=2451545.0, help="Julian Date in UT (default: 2451545.0)")
    p.add_argument("--longitude", type=float, default=None, help="east longitude for apparent noon (degrees)")
    args = p.parse_args(argv)

    jd_tt = ts.jd_ut_to_jd_tt(args.jd_ut)
    sc = solar.solar_longitude(jd_tt)

    print(f"JD_UT = {args.jd_ut:.6f}")
    print(f"JD_TT = {jd_tt:.6f}")
    print(f"  true longitude     = {sc.L_true_deg:.6f} deg")
    print(f"  apparent longitude = {sc.L_app_deg:.6f} deg")
    print(f"  equation of time   = {solar.equation_of_time_minutes(jd_tt):+.3f} min")
    if args.longitude is not None:
        noon = solar.apparent_noon_ut(ts.jd_to_jdn(args.jd_ut), args.longitude)
        print(f"  apparent noon (UT) = JD {noon:.6f}")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    from polycal.reference import lunar
    from polycal.reference import time_scales as ts

    p = argparse.ArgumentParser(prog="polycal lunar", description="True/apparent lunar longitude and the next new moon.")
    p.add_argument("--jd-ut", type=float, default=2451545.0, help="Julian Date in UT (default: 2451545.0)")
    args = p.parse_args(argv)

    jd_tt = ts.jd_ut_to_jd_tt(args.jd_ut)
    lc = lunar.lunar_position(jd_tt)
    nm = lunar.new_moon_at_or_after(args.jd_ut)

    print(f"JD_UT = {args.jd_ut:.6f}")
    print(f"JD_TT = {jd_tt:.6f}")
    print(f"  true longitude     = {lc.L_true_deg:.6f} deg")
    print(f"  apparent longitude = {lc.L_app_deg:.6f} deg")
    print(f"  elongation         = {lunar.elongation_deg(jd_tt):.6f} deg")
    print(f"  next new moon (UT) = JD {nm:.6f}")
    return 0


# ============================================================
# Dispatch
# ============================================================

DIAG_TOOLS = {
    "round-trip": "polycal.diagnostics.round_trip",
    "new-years": "polycal.diagnostics.new_years_table",
}


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="polycal", description="Convert and label dates across 17 calendars.")
    p.add_argument("--log-level", default=None, help="console log level (default: $POLYCAL_LOG_LEVEL or WARNING)")
    p.add_argument("--debug", action="store_true", help="debug logging with logger names and timestamps")
    p.add_argument("--no-color", action="store_true", help="disable colored log output")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Gregorian date -> date in another calendar")
    sub.add_parser("label", help="Label the time range containing a date")
    sub.add_parser("list", help="List supported calendars")
    sub.add_parser("jdn", help="Gregorian date -> Julian Day Number")
    sub.add_parser("from-jdn", help="Julian Day Number -> calendar date")
    sub.add_parser("month", help="Print a calendar month as a week grid (diagnostics)")
    sub.add_parser("seasons", help="Equinox and solstice days of a year")

    sub.add_parser("astro-args", help="Print astronomical fundamental arguments at a given JD(TT).")
    sub.add_parser("solar", help="Calculate true/apparent solar longitude and EOT.")
    sub.add_parser("lunar", help="Calculate true/apparent lunar longitude and the next new moon.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=sorted(DIAG_TOOLS), help="Which diagnostic to run")
    return p


def main(argv: Optional[list[str]] = None) -> int:
    from . import api
    from .bootstrap import build_registry
    from .config import EngineConfig, load_config
    from .logging import setup_logging

    if argv is None:
        argv = sys.argv[1:]

    p = build_parser()
    args, rest = p.parse_known_args(argv)

    try:
        cfg = load_config()
        if args.log_level:
            cfg = EngineConfig(cfg.max_search_steps, cfg.week_starts_on, args.log_level)
    except PolycalError as e:
        print(f"polycal: {e}", file=sys.stderr)
        return 1
    api.set_registry(build_registry(cfg))
    setup_logging(cfg.log_level_number, debug_mode=args.debug, color=not args.no_color)
    logger.debug("command %s %s (config %s)", args.cmd, rest, cfg)

    try:
        if args.cmd == "convert":
            return cmd_convert(rest, cfg.week_starts_on)
        if args.cmd == "label":
            return cmd_label(rest, cfg.week_starts_on)
        if args.cmd == "list":
            return cmd_list(rest)
        if args.cmd == "jdn":
            return cmd_jdn(rest)
        if args.cmd == "from-jdn":
            return cmd_from_jdn(rest)
        if args.cmd == "month":
            return _run_module_main("polycal.diagnostics.pretty_month", rest)
        if args.cmd == "seasons":
            return cmd_seasons(rest)
        if args.cmd == "astro-args":
            return cmd_astro_args(rest)
        if args.cmd == "solar":
            return cmd_solar(rest)
        if args.cmd == "lunar":
            return cmd_lunar(rest)
        if args.cmd == "diag":
            return _run_module_main(DIAG_TOOLS[args.tool], rest)
    except PolycalError as e:
        logger.debug("command failed", exc_info=True)
        print(f"polycal: {e}", file=sys.stderr)
        return 1

    raise SystemExit(f"Unknown cmd: {args.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
