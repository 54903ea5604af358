"""pigsfly — can pigs fly? Forward chaining over trait-set relations.

Statements such as ``PIGS have WINGS`` and ``things with WINGS can FLY``
become relations between label sets; saturating their conclusions decides
whether all, some or no pigs can fly.

Public API::

    from pigsfly import Relation, Saturator, SaturationResult, judge, Verdict
    from pigsfly import parse_statement, parse_relations, load_relations
"""

from pigsfly._version import __version__
from pigsfly.engine import Judgement, SaturationResult, Saturator, Verdict, judge
from pigsfly.relation import ABILITY, SUBJECT, Relation
from pigsfly.syntax import (
    StatementError,
    load_relations,
    parse_count,
    parse_relations,
    parse_statement,
)

__all__ = [
    "__version__",
    "ABILITY",
    "SUBJECT",
    "Judgement",
    "Relation",
    "SaturationResult",
    "Saturator",
    "StatementError",
    "Verdict",
    "judge",
    "load_relations",
    "parse_count",
    "parse_relations",
    "parse_statement",
]
