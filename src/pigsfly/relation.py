"""Relations between trait sets.

A relation reads "objects with every label in ``premise`` also have every
label in ``conclusion``". The premise is frozen when the relation is built;
the conclusion grows during saturation as other relations feed their
conclusions into it, and never loses a label.

Relations are compared by identity, not by value: two relations built from
the same statement are still two relations, and the saturation loop skips
only the pairing of a relation with itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# The fixed query: can PIGS FLY?
SUBJECT = "PIGS"
ABILITY = "FLY"


def _fmt(labels: Iterable[str]) -> str:
    """Format a label set for display."""
    return "{" + ", ".join(sorted(labels)) + "}"


class Relation:
    """A premise trait set and the conclusion trait set it licenses.

    Parameters:
        premise: Labels an object must carry for the relation to apply.
        conclusion: Labels inferred for such an object. Copied, so the
            relation always owns its conclusion set.
    """

    __slots__ = ("_premise", "_conclusion")

    def __init__(self, premise: Iterable[str], conclusion: Iterable[str] = ()) -> None:
        self._premise: frozenset[str] = frozenset(premise)
        self._conclusion: set[str] = set(conclusion)
        logger.debug("Relation created: %s => %s", _fmt(self._premise), _fmt(self._conclusion))

    # --- Read-only views ---

    @property
    def premise(self) -> frozenset[str]:
        """The premise label set."""
        return self._premise

    @property
    def conclusion(self) -> frozenset[str]:
        """A snapshot of the current conclusion label set."""
        return frozenset(self._conclusion)

    def __repr__(self) -> str:
        return f"Relation({_fmt(self._premise)} => {_fmt(self._conclusion)})"

    def __str__(self) -> str:
        return f"{_fmt(self._premise)} => {_fmt(self._conclusion)}"

    # --- Pairwise tests ---

    def matches(self, other: Relation) -> bool:
        """True iff this premise is a subset of ``other``'s premise.

        Whatever holds for objects with this premise holds for objects with
        the larger premise too, so ``other`` may inherit our conclusions.
        """
        return self._premise <= other._premise

    def cascades(self, other: Relation) -> bool:
        """True iff our current conclusions satisfy ``other``'s premise."""
        return other._premise <= self._conclusion

    # --- Mutation ---

    def extend(self, other: Relation) -> bool:
        """Add every conclusion of ``other`` to ours.

        Returns True only if the conclusion set actually grew.
        """
        size = len(self._conclusion)
        self._conclusion |= other._conclusion
        return len(self._conclusion) > size

    def copy(self) -> Relation:
        """Return an independent relation with the same premise and conclusions."""
        return Relation(self._premise, self._conclusion)

    # --- Terminal predicate ---

    def can_fly(self, universal: bool, *, subject: str = SUBJECT, ability: str = ABILITY) -> bool:
        """Check whether this relation concludes that pigs can fly.

        A relation whose premise names the subject and whose conclusion
        names the ability says so for every such object, whatever
        ``universal`` is. When ``universal`` is False it is also enough for
        the conclusion alone to hold both labels: some object, not
        necessarily picked out by the premise, is a flying pig.
        """
        if subject in self._premise and ability in self._conclusion:
            return True
        return not universal and subject in self._conclusion and ability in self._conclusion

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "premise": sorted(self._premise),
            "conclusion": sorted(self._conclusion),
        }
