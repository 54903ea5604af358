"""Structured JSON output for the pigsfly CLI."""

from __future__ import annotations

import json
import sys

from pigsfly.engine import Judgement
from pigsfly.relation import Relation


def emit_json(data: dict) -> None:
    """Print compact single-line JSON to stdout."""
    print(json.dumps(data, separators=(",", ":")))


def solve_response(judgement: Judgement, message: str, trace: bool = False) -> dict:
    """Build a solve response dict."""
    result = judgement.result
    d: dict = {
        "verdict": judgement.verdict.value.upper(),
        "message": message,
        "sweeps": result.sweeps,
        "merges": result.merges,
        "cascades": result.cascades,
        "witness": result.witness,
        "relations": [r.to_dict() for r in judgement.relations],
    }
    if trace:
        d["trace"] = list(result.trace)
    return d


def parse_response(relations: list[Relation]) -> dict:
    """Build a parse response dict."""
    return {
        "count": len(relations),
        "relations": [r.to_dict() for r in relations],
    }


def error_response(message: str) -> dict:
    """Build an error response dict."""
    return {"error": message}


def emit_error(message: str, *, json_mode: bool = False, quiet: bool = False) -> None:
    """Print an error message to stderr, or as JSON to stdout."""
    if quiet:
        return
    if json_mode:
        emit_json(error_response(message))
    else:
        print(f"Error: {message}", file=sys.stderr)
