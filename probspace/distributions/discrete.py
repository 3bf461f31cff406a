"""Discrete probability distributions over a finite outcome space.

Provides:

* :class:`DiscreteDistribution` – a distribution built incrementally with
  :meth:`~DiscreteDistribution.add_outcome`, rejecting every assignment
  that would break the total-mass invariant at the point it is made.
* :func:`uniform_discrete` – equal mass on every element of a domain.
* :func:`support`, :func:`fully_supported`, :func:`cardinality` and
  :func:`degenerate` – properties of any :class:`Distribution`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, List, Tuple

from ..core.errors import (
    DegenerateInputError,
    DuplicateOutcomeError,
    InvalidProbabilityError,
    OutcomeNotInDomainError,
    OverSupportedError,
)
from ..core.space import HashSpace, OutcomeSpace
from ..core.types import (
    CERTAIN,
    IMPOSSIBLE,
    Distribution,
    Outcome,
    Probability,
    epsilon,
    equiv,
    is_valid,
)

logger = logging.getLogger(__name__)


class DiscreteDistribution(Distribution):
    """A distribution we can build up one outcome at a time.

    The domain is held by reference, not copied; callers must not mutate
    it while the distribution is in use.  Once fully supported the
    distribution should be treated as read-only.

    Parameters
    ----------
    domain : OutcomeSpace
        The outcome space.
    """

    def __init__(self, domain: OutcomeSpace) -> None:
        if not isinstance(domain, OutcomeSpace):
            raise TypeError(
                f"domain must be an OutcomeSpace, got {type(domain).__name__}"
            )
        self._domain = domain
        self._outcomes = HashSpace()
        self._support: Dict[Outcome, Probability] = {}
        self._mass: float = 0.0

    @property
    def domain(self) -> OutcomeSpace:
        return self._domain

    @property
    def outcomes(self) -> OutcomeSpace:
        return self._outcomes

    def support(self) -> List[Outcome]:
        """Outcomes with assigned mass, in the order they were added."""
        return self._outcomes.elements()

    def add_outcome(self, outcome: Outcome, probability: Probability) -> None:
        """Assign *probability* to *outcome*.

        Raises
        ------
        OverSupportedError
            If the distribution is already fully supported, or the new
            mass would push the total above certainty.
        InvalidProbabilityError
            If *probability* is outside [0, 1] or is zero.
        OutcomeNotInDomainError
            If *outcome* is not a member of the domain.
        DuplicateOutcomeError
            If *outcome* already carries mass.
        """
        if equiv(self._mass, CERTAIN) or self._mass > CERTAIN:
            raise OverSupportedError("distribution already fully supported")
        if self._mass + probability >= CERTAIN + epsilon():
            raise OverSupportedError(
                f"adding {outcome!r} with probability {probability} would "
                f"over-support (current support {self._mass})"
            )
        if not is_valid(probability):
            raise InvalidProbabilityError(
                f"probability must be in [0, 1], got {probability}"
            )
        if equiv(probability, IMPOSSIBLE):
            raise InvalidProbabilityError(
                f"cannot assign zero probability to {outcome!r}"
            )
        if outcome not in self._domain:
            raise OutcomeNotInDomainError(f"outcome {outcome!r} not in domain")
        if outcome in self._support:
            raise DuplicateOutcomeError(
                f"outcome {outcome!r} already has probability "
                f"{self._support[outcome]}"
            )

        self._outcomes.add(outcome)
        self._support[outcome] = float(probability)
        self._mass += probability
        logger.debug(
            "assigned %r probability %g (support now %g)",
            outcome, probability, self._mass,
        )

    def probability_of(self, outcome: Outcome) -> Probability:
        if outcome in self._outcomes:
            return self._support[outcome]
        if outcome in self._domain:
            return IMPOSSIBLE
        raise OutcomeNotInDomainError(f"outcome {outcome!r} not in domain")

    def items(self) -> List[Tuple[Outcome, Probability]]:
        """``(outcome, probability)`` pairs in insertion order."""
        return list(self._support.items())

    def __len__(self) -> int:
        return len(self._outcomes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._outcomes)

    def __contains__(self, outcome: object) -> bool:
        return outcome in self._outcomes

    def __repr__(self) -> str:
        return f"DiscreteDistribution({dict(self._support)!r})"


def uniform_discrete(domain: OutcomeSpace) -> DiscreteDistribution:
    """Distribution assigning ``1 / |domain|`` to every element of *domain*.

    Each assignment is checked against the active tolerance, so with the
    default epsilon of 1e-5 a domain of 100 000 or more elements looks
    fully supported before its last element is added.  Build such
    distributions inside a tighter :class:`~probspace.core.context.Tolerance`.

    Raises
    ------
    DegenerateInputError
        If *domain* is empty.
    """
    n = len(domain)
    if n == 0:
        raise DegenerateInputError("cannot build a uniform distribution over an empty domain")

    d = DiscreteDistribution(domain)
    individual = CERTAIN / n
    for o in domain:
        d.add_outcome(o, individual)
    return d


# ---------------------------------------------------------------------------
# Distribution properties
# ---------------------------------------------------------------------------

def support(d: Distribution) -> Probability:
    """Total probability mass assigned so far.

    A distribution whose support is one is *fully supported*; adding any
    further outcome would invalidate it.
    """
    p = 0.0
    for o in d.outcomes:
        p += d.probability_of(o)
    return p


def fully_supported(d: Distribution) -> bool:
    """True iff all of the probability mass has been assigned."""
    return equiv(support(d), CERTAIN)


def cardinality(d: Distribution) -> int:
    """Number of outcomes carrying mass."""
    return len(d.outcomes)


def degenerate(d: Distribution) -> bool:
    """Fully supported with a single possible outcome."""
    return cardinality(d) == 1 and fully_supported(d)
