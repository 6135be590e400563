"""
polycal.cli
-----------
Command line front end: polycal list | info | day | parse | convert | diag.
"""

from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.errors import CalendarError

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


def _error_text(e: Exception) -> str:
    # KeyError quotes its message
    if isinstance(e, KeyError) and e.args:
        return str(e.args[0])
    return str(e)


def cmd_list(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal list", description="List registered calendars")
    p.parse_args(argv)

    for name in polycal.list_calendars():
        print(name)
    return 0


def cmd_info(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal info", description="Describe a registered calendar")
    p.add_argument("name")
    args = p.parse_args(argv)

    info = polycal.calendar_info(args.name)
    for key, value in info.items():
        if isinstance(value, list):
            value = ", ".join(str(v) for v in value)
        print(f"{key:<13}{value}")
    return 0


def cmd_day(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal day", description="Epoch day -> calendar date")
    p.add_argument("day", type=int, help="epoch day (may be negative)")
    p.add_argument("--calendar", default=polycal.DEFAULT_CALENDAR)
    p.add_argument("--format", dest="fmt", default=None, help="date format, e.g. \"WWWW', 'MMMM' 'd', 'y' 'E\"")
    p.add_argument("--info", action="store_true", help="print every field of the day")
    args = p.parse_args(argv)

    if args.info:
        print(polycal.day_info(args.day, calendar=args.calendar))
    else:
        print(polycal.format_day(args.day, calendar=args.calendar, fmt=args.fmt))
    return 0


def cmd_parse(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal parse", description="Calendar date -> epoch day")
    p.add_argument("text")
    p.add_argument("--calendar", default=polycal.DEFAULT_CALENDAR)
    p.add_argument("--format", dest="fmt", default=None)
    args = p.parse_args(argv)

    print(polycal.parse_date(args.text, calendar=args.calendar, fmt=args.fmt))
    return 0


def cmd_convert(argv: list[str]) -> int:
    import polycal

    p = argparse.ArgumentParser(prog="polycal convert", description="Convert a date between two calendars")
    p.add_argument("text")
    p.add_argument("--from", dest="source", required=True, help="source calendar")
    p.add_argument("--to", dest="target", required=True, help="target calendar")
    p.add_argument("--in-format", default=None)
    p.add_argument("--out-format", default=None)
    args = p.parse_args(argv)

    print(polycal.convert(
        args.text,
        source=args.source,
        target=args.target,
        in_format=args.in_format,
        out_format=args.out_format,
    ))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="polycal", description="Calendar conversion toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    # Subcommands parse their own arguments
    sub.add_parser("list", help="List registered calendars", add_help=False)
    sub.add_parser("info", help="Describe a calendar", add_help=False)
    sub.add_parser("day", help="Epoch day -> calendar date", add_help=False)
    sub.add_parser("parse", help="Calendar date -> epoch day", add_help=False)
    sub.add_parser("convert", help="Convert a date between calendars", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "year-lengths"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "list": cmd_list,
        "info": cmd_info,
        "day": cmd_day,
        "parse": cmd_parse,
        "convert": cmd_convert,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "polycal.diagnostics.round_trip",
                "year-lengths": "polycal.diagnostics.year_lengths",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (CalendarError, KeyError) as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        print(f"polycal: error: {_error_text(e)}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
