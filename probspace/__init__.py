"""probspace: discrete probability over finite outcome spaces.

This package provides distributions built incrementally over a finite
outcome space with their mass invariant enforced, statistics of random
variables, event algebra, convex composition of distributions and
inverse-CDF simulation, plus a library of named distribution formulas.
"""

import logging

try:
    from probspace._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

from .core.context import Tolerance
from .core.errors import (
    DegenerateInputError,
    DomainMismatchError,
    DuplicateOutcomeError,
    InvalidProbabilityError,
    NotFullySupportedError,
    OutcomeNotInDomainError,
    OverSupportedError,
    ProbabilityError,
)
from .core.operations import compose
from .core.space import HashSpace, OutcomeSpace, SortedSpace
from .core.types import CERTAIN, IMPOSSIBLE, Distribution, equiv, is_valid
from .distributions.discrete import (
    DiscreteDistribution,
    cardinality,
    degenerate,
    fully_supported,
    support,
    uniform_discrete,
)
from .inference.events import independent_events, probability_of_event
from .inference.sampling import SimulationResults, simulate, simulate_many
from .inference.statistics import (
    covariance,
    expectation,
    independent_variables,
    moment,
    standard_deviation,
    variance,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CERTAIN",
    "IMPOSSIBLE",
    "DegenerateInputError",
    "DiscreteDistribution",
    "Distribution",
    "DomainMismatchError",
    "DuplicateOutcomeError",
    "HashSpace",
    "InvalidProbabilityError",
    "NotFullySupportedError",
    "OutcomeNotInDomainError",
    "OutcomeSpace",
    "OverSupportedError",
    "ProbabilityError",
    "SimulationResults",
    "SortedSpace",
    "Tolerance",
    "cardinality",
    "compose",
    "covariance",
    "degenerate",
    "equiv",
    "expectation",
    "fully_supported",
    "independent_events",
    "independent_variables",
    "is_valid",
    "moment",
    "probability_of_event",
    "simulate",
    "simulate_many",
    "standard_deviation",
    "support",
    "uniform_discrete",
    "variance",
]
