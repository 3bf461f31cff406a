"""Statistics of random variables over a distribution.

A random variable is a fixed real-valued function of an outcome; the
distribution supplies the randomness.  Every reduction here sums over the
distribution's outcomes only, since unsupported outcomes carry no mass.
"""

from __future__ import annotations

import math

from probspace.core.types import Distribution, RandomVariable, equiv


def expectation(d: Distribution, X: RandomVariable) -> float:
    """Expected value of *X* under *d*: ``Σ X(o) P(o)``."""
    exp = 0.0
    for o in d.outcomes:
        exp += X(o) * d.probability_of(o)
    return exp


def moment(d: Distribution, X: RandomVariable, n: int) -> float:
    """The n-th raw moment of *X*, i.e. ``E[X^n]``."""
    return expectation(d, lambda o: math.pow(X(o), n))


def variance(d: Distribution, X: RandomVariable) -> float:
    """``Var(X) = E[X^2] - E[X]^2``.

    Floating-point noise can leave the result a hair below zero for
    (near-)constant variables; clamp at zero where that matters.
    """
    return moment(d, X, 2) - math.pow(moment(d, X, 1), 2)


def standard_deviation(d: Distribution, X: RandomVariable) -> float:
    """Square root of the variance, clamped at zero."""
    return math.sqrt(max(variance(d, X), 0.0))


def covariance(d: Distribution, X: RandomVariable, Y: RandomVariable) -> float:
    """``Cov(X, Y) = E[XY] - E[X]E[Y]``."""
    return expectation(d, lambda o: X(o) * Y(o)) - expectation(d, X) * expectation(d, Y)


def independent_variables(d: Distribution, X: RandomVariable, Y: RandomVariable) -> bool:
    """Whether *X* and *Y* are uncorrelated under *d* (``Cov(X, Y) ≈ 0``)."""
    return equiv(covariance(d, X, Y), 0.0)
