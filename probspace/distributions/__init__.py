"""Distribution implementations for probspace.

This module contains the incrementally built discrete distribution and
the named distribution formulas.
"""

from .discrete import DiscreteDistribution, uniform_discrete
from .formulas import (
    Bernoulli,
    Binomial,
    Geometric,
    Multinomial,
    Poisson,
    Uniform,
    choose,
    combination,
    factorial,
)

__all__ = [
    "DiscreteDistribution",
    "uniform_discrete",
    "Bernoulli",
    "Binomial",
    "Geometric",
    "Multinomial",
    "Poisson",
    "Uniform",
    "choose",
    "combination",
    "factorial",
]
