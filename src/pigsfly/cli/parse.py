"""``pigsfly parse`` subcommand — show the relations read from the input."""

from __future__ import annotations

import argparse

from pigsfly.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pigsfly.cli.output import emit_error, emit_json, parse_response
from pigsfly.syntax import load_relations


def run_parse(args: argparse.Namespace) -> int:
    """Execute the ``parse`` subcommand."""
    json_mode = getattr(args, "json", False)

    try:
        relations = load_relations(args.input)
    except (OSError, ValueError) as e:
        emit_error(str(e), json_mode=json_mode)
        return EXIT_ERROR

    if json_mode:
        emit_json(parse_response(relations))
        return EXIT_SUCCESS

    print(f"Relations ({len(relations)}):")
    for i, relation in enumerate(relations, start=1):
        print(f"  {i}. {relation}")
    return EXIT_SUCCESS
