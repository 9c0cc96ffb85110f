from __future__ import annotations

import argparse
import importlib
import inspect
import sys
from datetime import datetime

from loguru import logger
from rich.console import Console

import metrum
from metrum.display.render import Palette, clock_text


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


_METRUM_HELP = "e.g. 1969'200 845:13; quote years before 0 (\"-12'300 000:00\")"


def _configure_logging(verbose: bool) -> None:
    logger.enable("metrum")
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
    )


def _parse_iso_utc(s: str) -> datetime:
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)


def cmd_now(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    console.print(clock_text(metrum.now(), palette, subticks=args.subticks))
    return 0


def cmd_utc(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    dt = metrum.from_datetime(_parse_iso_utc(args.datetime))
    console.print(clock_text(dt, palette, subticks=args.subticks))
    return 0


def cmd_timestamp(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    dt = metrum.parse(" ".join(args.metrum)) if args.metrum else metrum.now()
    console.print(str(dt.timestamp()))
    return 0


def cmd_from_timestamp(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    console.print(clock_text(metrum.from_timestamp(args.ticks), palette))
    return 0


def cmd_to_utc(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    dt = metrum.parse(" ".join(args.metrum))
    console.print(dt.to_datetime().isoformat())
    return 0


def cmd_watch(args: argparse.Namespace, console: Console, palette: Palette) -> int:
    from metrum.display import live

    live.run(metrum.get_clock(), interval=args.interval, frames=args.frames, palette=palette, console=console)
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="metrum", description="Metrum decimal time toolkit CLI.")
    p.add_argument("--verbose", action="store_true", help="debug logging on stderr")
    p.add_argument("--no-color", action="store_true", help="disable styling")
    # --no-color also goes after the subcommand; when absent there the top-level value stands.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--no-color", action="store_true", default=argparse.SUPPRESS, help="disable styling")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_now = sub.add_parser("now", parents=[common], help="Current Metrum date-time")
    p_now.add_argument("--subticks", action="store_true")

    p_utc = sub.add_parser("utc", parents=[common], help="ISO-8601 UTC datetime -> Metrum")
    p_utc.add_argument("datetime", help="e.g. 1969-07-20T20:17:40Z (naive means UTC)")
    p_utc.add_argument("--subticks", action="store_true")

    p_ts = sub.add_parser("timestamp", parents=[common], help="Metrum date-time -> ticks since 2000'0 (default: now)")
    p_ts.add_argument("metrum", nargs="*", help=_METRUM_HELP)

    p_fts = sub.add_parser("from-timestamp", parents=[common], help="Ticks since 2000'0 -> Metrum date-time")
    p_fts.add_argument("ticks", type=int)

    p_to = sub.add_parser("to-utc", parents=[common], help="Metrum date-time -> ISO-8601 UTC datetime")
    p_to.add_argument("metrum", nargs="+", help=_METRUM_HELP)

    p_watch = sub.add_parser("watch", parents=[common], help="Live Metrum clock (Ctrl-C to exit)")
    p_watch.add_argument("--interval", type=float, default=0.864, help="Seconds between redraws")
    p_watch.add_argument("--frames", type=int, default=None, help="Stop after this many frames")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)
    _configure_logging(args.verbose)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "metrum.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    if rest:
        p.error(f"unrecognized arguments: {' '.join(rest)}")

    commands = {
        "now": cmd_now,
        "utc": cmd_utc,
        "timestamp": cmd_timestamp,
        "from-timestamp": cmd_from_timestamp,
        "to-utc": cmd_to_utc,
        "watch": cmd_watch,
    }
    console = Console(highlight=False, no_color=args.no_color)
    palette = Palette.plain() if args.no_color else Palette()

    try:
        return commands[args.cmd](args, console, palette)
    except (ValueError, OverflowError) as e:
        # MetrumError is a ValueError; datetime range/format errors land here too.
        logger.debug("{} failed: {!r}", args.cmd, e)
        print(f"metrum {args.cmd}: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
