"""Statement parsing for the fact loader.

Turns input lines into ``Relation`` values. The input is a statement count
followed by that many statements, one per line. Each statement is a run of
whitespace-separated tokens that alternate between labels and joiners.

Grammar (informal):
    statement  ::= premise connector conclusion
    premise    ::= label ( joiner label )*
    conclusion ::= label ( joiner label )*
    joiner     ::= 'with' | 'and' | 'that' 'can'
    connector  ::= 'are' | 'have' | 'can'

The premise runs up to the first connector; the conclusion runs to the end
of the line. The generic subject noun ``things`` stands for "any object" and
carries no label of its own, so ``things with WINGS can FLY`` has the premise
``{WINGS}``. Every other label is kept exactly as written.

Examples::

    PIGS have WINGS                       {PIGS} => {WINGS}
    things with WINGS can FLY             {WINGS} => {FLY}
    PIGS that can FLY are BIRDS and PINK  {PIGS, FLY} => {BIRDS, PINK}
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import TextIO

from pigsfly.relation import Relation

logger = logging.getLogger(__name__)

JOINERS = frozenset({"with", "and"})
CONNECTORS = frozenset({"are", "have", "can"})
PLACEHOLDER = "things"


class StatementError(ValueError):
    """Raised for input that does not follow the statement grammar.

    Attributes:
        line_number: 1-based input line of the offending text, if known.
        text: The offending line.
    """

    def __init__(self, message: str, *, line_number: int | None = None, text: str = "") -> None:
        self.line_number = line_number
        self.text = text
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


def _parse_side(tokens: Iterator[str], *, premise: bool) -> set[str]:
    """Consume one side of a statement and return its labels.

    For the premise, stops after the connector. For the conclusion, stops
    at the end of the tokens.
    """
    side = "premise" if premise else "conclusion"
    labels: set[str] = set()
    named = False

    for label in tokens:
        named = True
        if label != PLACEHOLDER:
            labels.add(label)

        word = next(tokens, None)
        if word in JOINERS:
            continue
        if word == "that":
            follow = next(tokens, None)
            if follow != "can":
                raise StatementError(f"expected 'can' after 'that', got {follow!r}")
            continue
        if word is None:
            if premise:
                raise StatementError("statement ends before a connector ('are', 'have' or 'can')")
            break
        if premise and word in CONNECTORS:
            break
        raise StatementError(f"unexpected word {word!r} after {label!r} in the {side}")
    else:
        if named:
            raise StatementError(f"dangling joiner at the end of the {side}")

    if not named:
        raise StatementError(f"empty {side}")
    return labels


def parse_statement(line: str) -> Relation:
    """Parse one statement line into a ``Relation``.

    Raises:
        StatementError: If the line does not follow the grammar.
    """
    tokens = iter(line.split())
    premise = _parse_side(tokens, premise=True)
    conclusion = _parse_side(tokens, premise=False)
    return Relation(premise, conclusion)


def parse_count(line: str) -> int:
    """Parse the leading statement count.

    A single leading ``+`` is allowed.

    Raises:
        StatementError: If *line* is not a non-negative decimal integer.
    """
    text = line.strip()
    digits = text[1:] if text.startswith("+") else text
    if not digits.isdecimal():
        raise StatementError(f"expected a statement count, got {text!r}")
    return int(digits)


def parse_relations(lines: Iterable[str]) -> list[Relation]:
    """Parse a statement count and the statements that follow it.

    Blank lines before the count are skipped. The ``n`` lines after it are
    the statements; a blank statement line is an empty relation, which
    matches everything and concludes nothing. Lines after the last counted
    statement are ignored.

    Raises:
        StatementError: On a bad count, a malformed statement, or fewer
            statements than the count announces.
    """
    numbered = enumerate(lines, start=1)

    for number, line in numbered:
        if line.strip():
            break
    else:
        raise StatementError("empty input, expected a statement count")
    try:
        count = parse_count(line)
    except StatementError as e:
        raise StatementError(str(e), line_number=number, text=line) from None

    relations: list[Relation] = []
    for number, line in numbered:
        if len(relations) == count:
            logger.debug("Ignoring input after statement %d (line %d)", count, number)
            break
        if not line.strip():
            relation = Relation((), ())
            logger.debug("Line %d: blank statement, empty relation", number)
            relations.append(relation)
            continue
        try:
            relation = parse_statement(line)
        except StatementError as e:
            raise StatementError(str(e), line_number=number, text=line.rstrip("\n")) from None
        logger.debug("Line %d: %s", number, relation)
        relations.append(relation)

    if len(relations) < count:
        raise StatementError(
            f"unexpected end of input: expected {count} statements, got {len(relations)}"
        )

    logger.debug("Parsed %d relations", len(relations))
    return relations


def load_relations(source: str | Path | TextIO = "-") -> list[Relation]:
    """Read relations from a file path, an open stream, or ``-`` for stdin."""
    if isinstance(source, (str, Path)):
        if str(source) == "-":
            return parse_relations(sys.stdin.read().splitlines())
        with open(source) as f:
            lines = f.read().splitlines()
        logger.debug("Loaded %d lines from %s", len(lines), source)
        return parse_relations(lines)
    return parse_relations(source.read().splitlines())
