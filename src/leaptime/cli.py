from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.errors import LeaptimeError


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


def cmd_offset(argv: list[str]) -> int:
    import leaptime

    p = argparse.ArgumentParser(prog="leaptime offset", description="TAI - UTC at a UTC date/time")
    p.add_argument("date", help="YYYY-MM-DD[THH:MM:SS[.f]]")
    args = p.parse_args(argv)

    utc = leaptime.get_utc()
    date = leaptime.AbsoluteDate.from_string(args.date, utc)
    print(f"TAI - UTC = {-utc.offset_from_tai(date):.9f} s")
    print(f"minute    = {utc.minute_duration(date)} s" + ("  (inside leap)" if utc.inside_leap(date) else ""))
    return 0


def cmd_components(argv: list[str]) -> int:
    import leaptime

    p = argparse.ArgumentParser(prog="leaptime components", description="Read a date on another scale's clock")
    p.add_argument("date", help="YYYY-MM-DDTHH:MM:SS[.f]")
    p.add_argument("--from", dest="source", default="UTC", help="scale the date is written in (default: UTC)")
    p.add_argument("--scale", default="TAI", help="target scale (default: TAI)")
    p.add_argument("--digits", type=int, default=9, help="fraction digits")
    args = p.parse_args(argv)

    source = leaptime.get_scale(args.source)
    target = leaptime.get_scale(args.scale)
    date = leaptime.AbsoluteDate.from_string(args.date, source)
    print(f"{date.to_string(target, args.digits)} {target.name}")
    return 0


def cmd_leaps(argv: list[str]) -> int:
    import leaptime

    p = argparse.ArgumentParser(prog="leaptime leaps", description="Print the TAI - UTC table")
    p.parse_args(argv)

    utc = leaptime.get_utc()
    tai = leaptime.get_tai()
    print(f"{'start (TAI)':<24} {'MJD':>6} {'leap':>10} {'offset':>10} {'MJD ref':>8} {'slope (s/day)':>14}")
    for o in utc.utctai_offsets:
        print(f"{o.date.to_string(tai):<24} {o.mjd:>6d} {o.leap:>10.6f} {o.offset:>10.6f} "
              f"{o.mjd_ref:>8d} {o.slope_utc * 86400.0:>14.7f}")
    return 0


def cmd_fields(argv: list[str]) -> int:
    import leaptime

    p = argparse.ArgumentParser(prog="leaptime fields", description="UTC field values of an instant")
    p.add_argument("date", help="UTC YYYY-MM-DDTHH:MM:SS[.f]")
    p.add_argument("--tai", action="store_true", help="read the date as TAI instead of UTC")
    args = p.parse_args(argv)

    utc = leaptime.get_utc()
    scale = leaptime.get_tai() if args.tai else utc
    date = leaptime.AbsoluteDate.from_string(args.date, scale)
    accessor = utc.date_to_temporal(date)
    print(utc.default_formatter().format(accessor))
    for field in (leaptime.UTCSecondOfMinute(utc), leaptime.UTCSecondOfDay(utc), leaptime.UTCMilliOfDay(utc),
                  leaptime.UTCMicroOfDay(utc), leaptime.UTCNanoOfDay(utc)):
        r = field.range_refined_by(accessor)
        print(f"  {str(field):<18} = {accessor.get_long(field):>16d}   (max {r.maximum})")
    print(f"  {'ModifiedJulianDay':<18} = {accessor.get_long(leaptime.JulianField.MODIFIED_JULIAN_DAY):>16d}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="leaptime", description="Time scales and leap seconds toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("offset", help="TAI - UTC at a UTC date/time")
    sub.add_parser("components", help="Read a date on another scale's clock")
    sub.add_parser("leaps", help="Print the TAI - UTC table")
    sub.add_parser("fields", help="UTC field values of an instant")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (need the diagnostics extra)")
    p_diag.add_argument(
        "tool",
        choices=["offsets-plot"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.cmd == "offset":
            return cmd_offset(rest)
        if args.cmd == "components":
            return cmd_components(rest)
        if args.cmd == "leaps":
            return cmd_leaps(rest)
        if args.cmd == "fields":
            return cmd_fields(rest)
        if args.cmd == "diag":
            tool_map = {
                "offsets-plot": "leaptime.diagnostics.offsets_plot",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (LeaptimeError, KeyError) as e:
        print(f"leaptime: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
