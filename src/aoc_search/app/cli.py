# aoc_search/app/cli.py
import argparse
import logging
import sys

from pydantic import ValidationError

from aoc_search.app.build import build
from aoc_search.app.report import format_report
from aoc_search.io.search_logging import default_json_logger
from aoc_search.puzzles.errors import NoPathError, PuzzleInputError
from aoc_search.runtime.registries import UnknownPuzzleError, available_puzzles

log = logging.getLogger("aoc_search")


def _parse_args(argv):
    ap = argparse.ArgumentParser(prog="aoc-search", description="Solve one puzzle day.")
    ap.add_argument("year", type=int, nargs="?")
    ap.add_argument("day", type=int, nargs="?")
    ap.add_argument("--input", dest="input_path", default=None, help="default: <year>_<day>.txt")
    ap.add_argument("--part", dest="parts", type=int, action="append", choices=(1, 2))
    ap.add_argument("--heuristic", choices=("amphipod", "zero"), default="amphipod")
    ap.add_argument("--log-level", default="WARNING", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    ap.add_argument(
        "--debug", action="store_true", help="sampled per-expansion logs, implies --log-level DEBUG"
    )
    ap.add_argument("--sample-every", type=int, default=1000)
    ap.add_argument("--run-id", default="local")
    ap.add_argument("--list", action="store_true", help="list registered puzzles and exit")
    args = ap.parse_args(argv)
    if not args.list and (args.year is None or args.day is None):
        ap.error("year and day are required unless --list is given")
    if args.debug:
        args.log_level = "DEBUG"
    return args


def main(argv=None) -> int:
    args = _parse_args(argv)
    if args.list:
        for year, day in available_puzzles():
            print(f"{year} {day}")
        return 0

    default_json_logger(level=args.log_level)
    cfg = {
        "run_id": args.run_id,
        "puzzle": {"year": args.year, "day": args.day, "input_path": args.input_path},
        "search": {"heuristic": {"kind": args.heuristic}},
        "log": {"level": args.log_level, "debug": args.debug, "sample_every": args.sample_every},
    }
    if args.parts:
        cfg["puzzle"]["parts"] = args.parts

    try:
        app = build(cfg)
        answers = app.solve()
    except (
        ValidationError,
        OSError,
        PuzzleInputError,
        NoPathError,
        UnknownPuzzleError,
    ) as exc:
        log.error("fatal", extra={"extra": {"error": str(exc), "type": type(exc).__name__}})
        return 1

    print(format_report(args.year, args.day, answers))
    return 0


if __name__ == "__main__":
    sys.exit(main())
