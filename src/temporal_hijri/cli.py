from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from datetime import date

from .core.errors import TemporalHijriError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

CALENDAR_ENV = "TEMPORAL_HIJRI_CALENDAR"


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _default_calendar() -> str:
    return os.environ.get(CALENDAR_ENV, "").strip() or "hijri-uaq"


def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", default=_default_calendar(),
                   help=f"calendar id (default: ${CALENDAR_ENV} or hijri-uaq)")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import temporal_hijri

    p = argparse.ArgumentParser(prog="temporal-hijri day", description="Gregorian -> Hijri fields")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    info = temporal_hijri.day_info(_parse_ymd(args.date), calendar=args.calendar)
    for k, v in info.items():
        print(f"{k:15s} {v}")
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import temporal_hijri

    p = argparse.ArgumentParser(prog="temporal-hijri to-gregorian", description="Hijri -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    print(temporal_hijri.to_gregorian(args.year, args.month, args.day, calendar=args.calendar).isoformat())
    return 0


def cmd_add(argv: list[str]) -> int:
    import temporal_hijri

    p = argparse.ArgumentParser(prog="temporal-hijri add", description="Add a duration in Hijri terms")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--years", type=int, default=0)
    p.add_argument("--months", type=int, default=0)
    p.add_argument("--weeks", type=int, default=0)
    p.add_argument("--days", type=int, default=0)
    p.add_argument("--overflow", choices=["constrain", "reject"], default="constrain")
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    dur = temporal_hijri.Duration(args.years, args.months, args.weeks, args.days)
    out = temporal_hijri.add(_parse_ymd(args.date), dur, calendar=args.calendar, overflow=args.overflow)
    h = temporal_hijri.to_hijri(out, calendar=args.calendar)
    print(f"{out.isoformat()}  ({h})")
    return 0


def cmd_until(argv: list[str]) -> int:
    import temporal_hijri

    p = argparse.ArgumentParser(prog="temporal-hijri until", description="Difference between two dates")
    p.add_argument("start", help="YYYY-MM-DD")
    p.add_argument("end", help="YYYY-MM-DD")
    p.add_argument("--largest-unit", default="days",
                   choices=["years", "months", "weeks", "days", "auto"])
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    dur = temporal_hijri.until(
        _parse_ymd(args.start), _parse_ymd(args.end),
        calendar=args.calendar, largest_unit=args.largest_unit,
    )
    print(f"years={dur.years} months={dur.months} weeks={dur.weeks} days={dur.days}")
    return 0


def cmd_month(argv: list[str]) -> int:
    import temporal_hijri

    p = argparse.ArgumentParser(prog="temporal-hijri month", description="List the days of a Hijri month")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    _add_common(p)
    args = p.parse_args(argv)
    _setup_logging(args.verbose)

    for i, d in enumerate(temporal_hijri.month_days(args.year, args.month, calendar=args.calendar), start=1):
        print(f"{args.year:04d}-{args.month:02d}-{i:02d}  {d.isoformat()}  {d:%a}")
    return 0


def cmd_list(argv: list[str]) -> int:
    import temporal_hijri

    argparse.ArgumentParser(prog="temporal-hijri list", description="Known calendar ids").parse_args(argv)
    for name in temporal_hijri.list_calendars():
        print(name)
    return 0


COMMANDS = {
    "day": cmd_day,
    "to-gregorian": cmd_to_gregorian,
    "add": cmd_add,
    "until": cmd_until,
    "month": cmd_month,
    "list": cmd_list,
}


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `temporal-hijri YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day", *argv]

    p = argparse.ArgumentParser(prog="temporal-hijri", description="Hijri calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)
    sub.add_parser("day", help="Gregorian -> Hijri fields")
    sub.add_parser("to-gregorian", help="Hijri -> Gregorian date")
    sub.add_parser("add", help="Add years/months/weeks/days to a date")
    sub.add_parser("until", help="Difference between two dates")
    sub.add_parser("month", help="List the Gregorian dates of a Hijri month")
    sub.add_parser("list", help="List calendar ids")

    args, rest = p.parse_known_args(argv[:1])
    try:
        return COMMANDS[args.cmd](argv[1:] + rest)
    except (TemporalHijriError, KeyError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
