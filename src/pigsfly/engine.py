"""Saturation of relation conclusion sets.

Conclusions spread between relations by two derivation rules:

Merge (applied in a single pass):
    a.premise <= b.premise     b inherits every conclusion of a

Cascade (applied until nothing changes):
    b.premise <= a.conclusion  a absorbs every conclusion of b

The merge pass runs exactly once, before any cascade. Cascades are applied
in sweeps over every ordered pair of distinct relations; after each complete
sweep the terminal predicate ``Relation.can_fly`` is checked on every
relation, and the run stops at the first hit or after a sweep that changed
nothing. Conclusion sets only grow and the label universe is finite, so the
run always stops.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Iterable
from dataclasses import dataclass, field

from pigsfly.relation import ABILITY, SUBJECT, Relation

logger = logging.getLogger(__name__)


class Verdict(enum.Enum):
    """The three possible answers to "can pigs fly?"."""

    ALL = "all"
    SOME = "some"
    NONE = "none"

    def message(self, subject: str = SUBJECT, ability: str = ABILITY) -> str:
        """Human-readable verdict line, e.g. ``All pigs can fly``."""
        quantifier = {"all": "All", "some": "Some", "none": "No"}[self.value]
        return f"{quantifier} {subject.lower()} can {ability.lower()}"


@dataclass
class SaturationResult:
    """Result of a saturation run.

    Attributes:
        derivable: Whether some relation satisfied the terminal predicate.
        sweeps: Number of completed cascade sweeps.
        merges: Merge-pass extensions that grew a conclusion set.
        cascades: Cascade extensions that grew a conclusion set.
        witness: Index of the first relation satisfying the predicate.
        trace: Human-readable derivation trace.
    """

    derivable: bool
    sweeps: int = 0
    merges: int = 0
    cascades: int = 0
    witness: int | None = None
    trace: list[str] = field(default_factory=list)


class Saturator:
    """Two-phase saturation over a fixed collection of relations.

    The relations are mutated in place: their conclusion sets grow as the
    rules fire. Use ``judge`` to leave the caller's relations untouched.

    Parameters:
        relations: The relation collection, in statement order.
        subject: Premise/conclusion label of the queried objects.
        ability: Conclusion label being asked about.
    """

    def __init__(
        self,
        relations: Iterable[Relation],
        *,
        subject: str = SUBJECT,
        ability: str = ABILITY,
    ) -> None:
        self.relations = list(relations)
        self.subject = subject
        self.ability = ability
        self._trace: list[str] = []

    def run(self, universal: bool) -> SaturationResult:
        """Saturate the relations, stopping early once the query holds.

        ``universal`` selects the strictness of ``Relation.can_fly``.
        """
        self._trace = []
        start = time.perf_counter()
        logger.debug(
            "Saturation: %d relations, universal=%s", len(self.relations), universal
        )

        merges = self._merge()
        result = self._cascade(universal)
        result.merges = merges
        result.trace = list(self._trace)

        logger.debug(
            "Result: %s after %d sweeps (%d merges, %d cascades, %.6fs)",
            result.derivable, result.sweeps, result.merges, result.cascades,
            time.perf_counter() - start,
        )
        return result

    def holds(self, universal: bool) -> int | None:
        """Index of the first relation satisfying the query, or None.

        Does not saturate; checks the relations as they currently stand.
        """
        for i, relation in enumerate(self.relations):
            if relation.can_fly(universal, subject=self.subject, ability=self.ability):
                return i
        return None

    # ------------------------------------------------------------------
    # Phases
    # ------------------------------------------------------------------

    def _pairs(self):
        """All ordered pairs of distinct relations, in collection order."""
        for i, a in enumerate(self.relations):
            for j, b in enumerate(self.relations):
                if a is b:
                    continue
                yield i, a, j, b

    def _merge(self) -> int:
        """Single merge pass: b inherits a's conclusions when a.premise <= b.premise."""
        grown = 0
        for i, a, j, b in self._pairs():
            if a.matches(b) and b.extend(a):
                grown += 1
                self._note(f"MERGE: #{j} {b} <- #{i}")
        return grown

    def _cascade(self, universal: bool) -> SaturationResult:
        """Cascade sweeps until the query holds or a sweep changes nothing."""
        sweeps = 0
        grown = 0
        changed = True

        while changed:
            changed = False
            sweeps += 1

            for i, a, j, b in self._pairs():
                if a.cascades(b) and a.extend(b):
                    changed = True
                    grown += 1
                    self._note(f"CASCADE: #{i} {a} <- #{j}")

            witness = self.holds(universal)
            if witness is not None:
                self._note(f"HIT: #{witness} {self.relations[witness]} (sweep {sweeps})")
                return SaturationResult(
                    derivable=True, sweeps=sweeps, cascades=grown, witness=witness
                )

        self._note(f"FIXPOINT: after {sweeps} sweeps")
        return SaturationResult(derivable=False, sweeps=sweeps, cascades=grown)

    def _note(self, msg: str) -> None:
        self._trace.append(msg)
        logger.debug(msg)


@dataclass
class Judgement:
    """A verdict together with the saturated state it was read from.

    Attributes:
        verdict: ALL, SOME or NONE.
        relations: Saturated copies of the input relations.
        result: The saturation run behind the verdict.
        elapsed: Wall-clock seconds spent saturating.
    """

    verdict: Verdict
    relations: list[Relation]
    result: SaturationResult
    elapsed: float = 0.0


def judge(
    relations: Iterable[Relation],
    *,
    subject: str = SUBJECT,
    ability: str = ABILITY,
) -> Judgement:
    """Decide whether all, some or no pigs can fly.

    Saturates copies of *relations* with the strict query. If that fails
    the copies are already at their fixpoint, so the weaker query is
    answered from the same state without saturating again.
    """
    start = time.perf_counter()
    saturator = Saturator(
        [r.copy() for r in relations], subject=subject, ability=ability
    )
    result = saturator.run(universal=True)

    if result.derivable:
        verdict = Verdict.ALL
    else:
        witness = saturator.holds(universal=False)
        if witness is not None:
            result.witness = witness
            verdict = Verdict.SOME
        else:
            verdict = Verdict.NONE

    elapsed = time.perf_counter() - start
    logger.info("Verdict: %s (%.6fs)", verdict.message(subject, ability), elapsed)
    return Judgement(
        verdict=verdict,
        relations=saturator.relations,
        result=result,
        elapsed=elapsed,
    )
