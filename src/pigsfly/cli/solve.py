"""``pigsfly solve`` subcommand — decide whether pigs can fly."""

from __future__ import annotations

import argparse
import logging

from pigsfly.cli.exitcodes import EXIT_ALL, EXIT_ERROR, EXIT_NONE, EXIT_SOME, EXIT_SUCCESS
from pigsfly.cli.output import emit_error, emit_json, solve_response
from pigsfly.engine import Verdict, judge
from pigsfly.syntax import load_relations

logger = logging.getLogger(__name__)

_QUIET_CODES = {
    Verdict.ALL: EXIT_ALL,
    Verdict.SOME: EXIT_SOME,
    Verdict.NONE: EXIT_NONE,
}


def run_solve(args: argparse.Namespace) -> int:
    """Execute the ``solve`` subcommand."""
    json_mode = getattr(args, "json", False)
    quiet = getattr(args, "quiet", False)

    try:
        relations = load_relations(args.input)
    except (OSError, ValueError) as e:
        emit_error(str(e), json_mode=json_mode, quiet=quiet)
        return EXIT_ERROR

    judgement = judge(relations, subject=args.subject, ability=args.ability)
    message = judgement.verdict.message(args.subject, args.ability)
    result = judgement.result

    if quiet:
        return _QUIET_CODES[judgement.verdict]

    if json_mode:
        emit_json(solve_response(judgement, message, trace=args.trace))
        return EXIT_SUCCESS

    print(message)

    if args.trace:
        print("\nSaturation trace:")
        for line in result.trace:
            print(f"  {line}")
        print(f"\nSweeps: {result.sweeps}")
        print(f"Merges: {result.merges}")
        print(f"Cascades: {result.cascades}")

    logger.info(
        "Solved %d relations: %s (%d sweeps)",
        len(relations), message, result.sweeps,
    )
    return EXIT_SUCCESS
