"""Probability of events.

An event is a subset of the outcome space.  It need not be drawn from the
distribution's outcomes: members of the domain without mass simply
contribute nothing.
"""

from __future__ import annotations

from probspace.core.space import as_space, union
from probspace.core.types import IMPOSSIBLE, Distribution, Event, Probability, equiv


def probability_of_event(d: Distribution, A: Event) -> Probability:
    """``P(A) = Σ_{a ∈ A} P(a)``.

    Repeated members of a plain iterable are counted once.

    Raises
    ------
    OutcomeNotInDomainError
        If some member of *A* lies outside ``d.domain``.
    """
    total = IMPOSSIBLE
    for a in as_space(A):
        total += d.probability_of(a)
    return total


def independent_events(d: Distribution, A: Event, B: Event) -> bool:
    """Whether ``P(A ∪ B) ≈ P(A) P(B)`` under *d*.

    Note this compares against the probability of the *union* of the two
    events, not their intersection, so it only agrees with the textbook
    ``P(A ∩ B) = P(A) P(B)`` definition in special cases.
    """
    A, B = as_space(A), as_space(B)
    return equiv(
        probability_of_event(d, union(A, B)),
        probability_of_event(d, A) * probability_of_event(d, B),
    )
