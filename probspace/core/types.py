"""Core types for probspace."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from typing import Any, Callable, Hashable, Iterable

from .context import Tolerance
from .space import OutcomeSpace

# ---------------------------------------------------------------------------
# Aliases
# ---------------------------------------------------------------------------

#: A probability is a float on [0, 1].
Probability = float

#: An outcome is any hashable element of the outcome space.
Outcome = Hashable

#: An event is a subset of the outcome space.
Event = Iterable[Any]

#: A random variable is a fixed real-valued function of an outcome.
RandomVariable = Callable[[Any], float]


# ---------------------------------------------------------------------------
# Probability
# ---------------------------------------------------------------------------

#: The probability of an outcome that never occurs.
IMPOSSIBLE: Probability = 0.0

#: The probability of an outcome that always occurs.
CERTAIN: Probability = 1.0


def is_valid(p: float) -> bool:
    """Whether *p* lies on [0, 1].  NaN is never valid."""
    return 0.0 <= p <= 1.0


def epsilon() -> float:
    """The tolerance currently in force (see :class:`Tolerance`)."""
    return Tolerance.current_epsilon()


def equiv(a: float, b: float) -> bool:
    """Tolerance-aware equality of two probabilities or masses."""
    return math.fabs(a - b) < epsilon()


# ---------------------------------------------------------------------------
# Distribution ABC
# ---------------------------------------------------------------------------

class Distribution(ABC):
    """Abstract base class for distributions over a finite outcome space.

    The *domain* is the whole outcome space; the *outcomes* are the
    members of the domain that carry non-zero mass.
    """

    @property
    @abstractmethod
    def domain(self) -> OutcomeSpace:
        """The outcome space the distribution is defined over."""

    @property
    @abstractmethod
    def outcomes(self) -> OutcomeSpace:
        """The outcomes that occur with non-zero probability."""

    @abstractmethod
    def probability_of(self, outcome: Outcome) -> Probability:
        """Probability of a single outcome.

        Must return :data:`IMPOSSIBLE` for a domain member without mass and
        raise :class:`~probspace.core.errors.OutcomeNotInDomainError` for
        anything outside the domain.
        """
