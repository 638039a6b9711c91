from __future__ import annotations

import argparse
from datetime import date, datetime
import importlib
import inspect
import logging
import os
import re
import sys


_YEAR_RE = re.compile(r"^-?\d+$")

LOG_LEVEL_ENV = "LUNARYEAR_LOG_LEVEL"


def _parse_ymd(s: str) -> date:
    y, m, d = map(int, s.split("-"))
    return date(y, m, d)


def _configure_logging(level: str | None) -> None:
    name = (level or os.environ.get(LOG_LEVEL_ENV) or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


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


def cmd_equinox(argv: list[str]) -> int:
    from lunaryear.reference import equinox

    p = argparse.ArgumentParser(prog="lunaryear equinox", description="Date and time of the vernal equinox.")
    p.add_argument("year", nargs="?", type=int, default=date.today().year, help="year (default: this year)")
    p.add_argument("--low-accuracy", action="store_true", help="skip the refinement against the solar longitude")
    p.add_argument("--tt", action="store_true", help="print Terrestrial Time instead of UT")
    args = p.parse_args(argv)

    if args.low_accuracy:
        inst = equinox.date_of_vernal_equinox_low_accuracy(args.year)
    else:
        inst = equinox.date_of_vernal_equinox(args.year)
    if not args.tt:
        inst = inst.to_ut()

    print(inst.timestamp())
    return 0


def cmd_moon(argv: list[str]) -> int:
    from lunaryear.core.types import Phase
    from lunaryear.reference import lunar

    p = argparse.ArgumentParser(prog="lunaryear moon", description="Date and time of a Moon phase.")
    p.add_argument("k", type=int, help="lunation number (0 = first New Moon of 2000)")
    p.add_argument("--phase", choices=["new", "first", "full", "last"], default="new")
    p.add_argument("--ut", action="store_true", help="print UT instead of Terrestrial Time")
    args = p.parse_args(argv)

    inst = lunar.date_of_moon(args.k, Phase.parse(args.phase))
    if args.ut:
        inst = inst.to_ut()

    print(inst)
    return 0


def cmd_date(argv: list[str]) -> int:
    from lunaryear.engines.calendar import lunar_date

    p = argparse.ArgumentParser(prog="lunaryear date", description="Gregorian -> lunar date (year'moonth'day)")
    p.add_argument("date", nargs="?", default=None, help="YYYY-MM-DD (default: today)")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date) if args.date else date.today()
    print(lunar_date(d))
    return 0


def cmd_moons(argv: list[str]) -> int:
    from lunaryear.engines.calendar import date_of_moons

    p = argparse.ArgumentParser(prog="lunaryear moons", description="New and Full Moons around a moment (UT).")
    p.add_argument("--at", default=None, help="ISO datetime, read as UT unless it carries an offset (default: now)")
    args = p.parse_args(argv)

    when = datetime.fromisoformat(args.at) if args.at else datetime.now().astimezone()
    prev_new, next_new, prev_full, next_full = date_of_moons(when)

    print(f"Previous New Moon : {prev_new.timestamp()} UT")
    print(f"Next New Moon     : {next_new.timestamp()} UT")
    print(f"Previous Full Moon: {prev_full.timestamp()} UT")
    print(f"Next Full Moon    : {next_full.timestamp()} UT")
    return 0


def cmd_delta_t(argv: list[str]) -> int:
    from lunaryear.reference import deltat

    p = argparse.ArgumentParser(prog="lunaryear delta-t", description="Delta T = TT - UT in seconds.")
    p.add_argument("year", type=int)
    p.add_argument("--month", type=int, default=1, choices=range(1, 13), metavar="M")
    args = p.parse_args(argv)

    print(f"{deltat.delta_t_seconds(args.year, args.month):.6f}")
    return 0


def cmd_clock(argv: list[str]) -> int:
    from lunaryear.engines import clock

    p = argparse.ArgumentParser(prog="lunaryear clock", description="Terminal moon clock.")
    p.add_argument("--count", type=int, default=None, help="number of readings (default: run until interrupted)")
    p.add_argument("--interval", type=float, default=1.0, help="seconds between readings")
    args = p.parse_args(argv)

    try:
        clock.run(count=args.count, interval=args.interval)
    except KeyboardInterrupt:
        pass
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Bare form: `lunaryear [YEAR]` prints the vernal equinox
    if not argv or _YEAR_RE.match(argv[0]):
        _configure_logging(None)
        return cmd_equinox(argv)

    log_help = f"logging level (default: ${LOG_LEVEL_ENV} or WARNING)"
    p = argparse.ArgumentParser(prog="lunaryear", description="Moon phases, vernal equinox and lunar calendar.")
    p.add_argument("--log-level", default=None, help=log_help)

    # accepted after the sub-command too; SUPPRESS keeps a top-level value
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=argparse.SUPPRESS, help=log_help)

    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("equinox", parents=[common], help="Vernal equinox of a year")
    sub.add_parser("moon", parents=[common], help="Moon phase of a lunation")
    sub.add_parser("date", parents=[common], help="Gregorian -> lunar date")
    sub.add_parser("moons", parents=[common], help="Previous/next New and Full Moons")
    sub.add_parser("delta-t", parents=[common], help="Delta T for a year and month")
    sub.add_parser("clock", parents=[common], help="Terminal moon clock")

    # diagnostics
    p_diag = sub.add_parser("diag", parents=[common], help="Diagnostic plots (needs the diagnostics extras)")
    p_diag.add_argument("tool", choices=["plot-deltat", "synodic-months"], help="Which diagnostic to run")

    # ephemeris checks
    p_ephem = sub.add_parser("ephem", parents=[common], help="Ephemeris-based checks (needs the ephemeris extras)")
    p_ephem.add_argument("tool", choices=["validate"], help="Which ephemeris check to run")

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.log_level)

    commands = {
        "equinox": cmd_equinox,
        "moon": cmd_moon,
        "date": cmd_date,
        "moons": cmd_moons,
        "delta-t": cmd_delta_t,
        "clock": cmd_clock,
    }
    if args.cmd in commands:
        return commands[args.cmd](rest)

    if args.cmd == "diag":
        tool_map = {
            "plot-deltat": "lunaryear.diagnostics.plot_deltat",
            "synodic-months": "lunaryear.diagnostics.synodic_months",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if args.cmd == "ephem":
        tool_map = {
            "validate": "lunaryear.ephemeris.validate",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
