"""CLI entry point for pigsfly.

Usage::

    pigsfly solve statements.txt
    pigsfly solve --trace < statements.txt
    pigsfly parse --json statements.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from pigsfly._version import __version__
from pigsfly.relation import ABILITY, SUBJECT

_LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[min(verbosity, len(_LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ``pigsfly`` CLI."""
    parser = argparse.ArgumentParser(
        prog="pigsfly",
        description="pigsfly — decide whether pigs can fly from trait statements",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="Log progress to stderr (-v: info, -vv: debug)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- solve ---
    solve_parser = subparsers.add_parser("solve", help="Print whether all, some or no pigs can fly")
    solve_parser.add_argument("input", nargs="?", default="-", help="Statement file (default: stdin)")
    solve_parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    solve_parser.add_argument("--trace", action="store_true", help="Print the saturation trace")
    solve_parser.add_argument(
        "-q", "--quiet", action="store_true",
        help="Print nothing; exit 0 (all), 2 (some), 3 (none) or 1 (error)",
    )
    solve_parser.add_argument("--subject", default=SUBJECT, help=f"Subject label (default: {SUBJECT})")
    solve_parser.add_argument("--ability", default=ABILITY, help=f"Ability label (default: {ABILITY})")

    # --- parse ---
    parse_parser = subparsers.add_parser("parse", help="Show the relations read from the input")
    parse_parser.add_argument("input", nargs="?", default="-", help="Statement file (default: stdin)")
    parse_parser.add_argument("--json", action="store_true", help="Print the relations as JSON")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "solve":
        from pigsfly.cli.solve import run_solve
        return run_solve(args)
    elif args.command == "parse":
        from pigsfly.cli.parse import run_parse
        return run_parse(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
