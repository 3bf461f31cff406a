"""Named discrete distribution formulas and combinatorics.

Closed-form probability mass functions backed by :mod:`scipy.stats`, plus
exact integer combinatorics from :mod:`scipy.special`.  Each family can be
evaluated directly (``Binomial(4, 0.5).pmf(2)`` or ``Binomial(4, 0.5)(2)``);
families over a finite range can also be tabulated into a
:class:`~probspace.distributions.discrete.DiscreteDistribution` with
``to_distribution()``.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
from scipy import special, stats

from ..core.context import Tolerance
from ..core.errors import NotFullySupportedError
from ..core.space import SortedSpace
from ..core.types import equiv, is_valid
from .discrete import DiscreteDistribution, fully_supported, support

# Tabulation keeps masses from _TABULATION_CUTOFF up, and checks them under
# a tolerance two orders of magnitude tighter
_TABULATION_CUTOFF = 1e-10
_TABULATION_EPSILON = 1e-12


# ---------------------------------------------------------------------------
# Combinatorics
# ---------------------------------------------------------------------------

def factorial(n: int) -> int:
    """Exact ``n!`` as a Python integer (arbitrary precision)."""
    n = _as_count(n, "n")
    return int(special.factorial(n, exact=True))


def combination(n: int, k: int) -> int:
    """Exact binomial coefficient ``n choose k``."""
    n = _as_count(n, "n")
    k = _as_count(k, "k")
    if k > n:
        raise ValueError(f"k must satisfy 0 <= k <= n, got n={n}, k={k}")
    return int(special.comb(n, k, exact=True))


choose = combination


def _as_count(value, name: str) -> int:
    if isinstance(value, bool) or int(value) != value:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value}")
    return value


def _check_p(p: float, name: str = "p") -> float:
    if not is_valid(p):
        raise ValueError(f"{name} must be in [0, 1], got {p}")
    return float(p)


# ---------------------------------------------------------------------------
# Univariate families
# ---------------------------------------------------------------------------

class _Formula:
    """Shared behaviour of the scipy-backed families."""

    _dist = None
    _lower: Optional[int] = None
    _upper: Optional[int] = None

    def pmf(self, k):
        """Probability mass function evaluated at k."""
        result = self._dist.pmf(k)
        return float(result) if np.ndim(result) == 0 else result

    __call__ = pmf

    def cdf(self, k):
        """Cumulative distribution function evaluated at k."""
        result = self._dist.cdf(k)
        return float(result) if np.ndim(result) == 0 else result

    def mean(self) -> float:
        return float(self._dist.mean())

    def variance(self) -> float:
        return float(self._dist.var())

    def sample(self, n=1, seed=None):
        """Draw n random samples from the distribution."""
        return self._dist.rvs(size=n, random_state=np.random.default_rng(seed))

    def to_distribution(self) -> DiscreteDistribution:
        """Tabulate the mass function into a :class:`DiscreteDistribution`.

        The domain is the family's finite range.  Values with mass below
        ``1e-10`` are left unsupported and the rest are assigned under a
        tolerance of ``1e-12``; the result is then checked against the
        tolerance in force for the caller.

        Raises
        ------
        TypeError
            If the family has an unbounded range.
        NotFullySupportedError
            If the tail mass left out exceeds the caller's tolerance.
        """
        if self._upper is None:
            raise TypeError(f"{type(self).__name__} has an unbounded range")
        domain = SortedSpace(range(self._lower, self._upper + 1))
        d = DiscreteDistribution(domain)
        skipped = 0.0
        with Tolerance(_TABULATION_EPSILON):
            for k in domain:
                p = self.pmf(k)
                if p < _TABULATION_CUTOFF:
                    skipped += p
                    continue
                d.add_outcome(k, p)
        if not fully_supported(d):
            raise NotFullySupportedError(
                f"{self!r} tabulates to support {support(d)}; "
                f"{skipped} of tail mass was left out"
            )
        return d


class Bernoulli(_Formula):
    """Bernoulli trial: 1 with probability p, 0 with probability 1 - p.

    Parameters
    ----------
    p : float
        Probability of success, must be in [0, 1].
    """

    def __init__(self, p: float = 0.5):
        self.p = _check_p(p)
        self._dist = stats.bernoulli(self.p)
        self._lower, self._upper = 0, 1

    def __repr__(self):
        return f"Bernoulli(p={self.p})"


class Binomial(_Formula):
    """Number of successes in n independent trials with success probability p.

    ``P(k) = C(n, k) p^k (1 - p)^(n - k)``
    """

    def __init__(self, n: int, p: float):
        self.n = _as_count(n, "n")
        self.p = _check_p(p)
        self._dist = stats.binom(self.n, self.p)
        self._lower, self._upper = 0, self.n

    def __repr__(self):
        return f"Binomial(n={self.n}, p={self.p})"


class Geometric(_Formula):
    """Number of trials up to and including the first success.

    ``P(k) = (1 - p)^(k - 1) p`` for ``k >= 1``.
    """

    def __init__(self, p: float):
        self.p = _check_p(p)
        if self.p == 0:
            raise ValueError("p must be > 0 for a geometric distribution")
        self._dist = stats.geom(self.p)

    def __repr__(self):
        return f"Geometric(p={self.p})"


class Poisson(_Formula):
    """Number of occurrences in an interval for a process with rate mu.

    Parameters
    ----------
    mu : float
        Rate parameter (mean), must be > 0.
    """

    def __init__(self, mu: float = 1.0):
        if not mu > 0:
            raise ValueError(f"mu must be > 0, got {mu}")
        self.mu = float(mu)
        self._dist = stats.poisson(self.mu)

    def __repr__(self):
        return f"Poisson(mu={self.mu})"


class Uniform(_Formula):
    """Uniform distribution on the discrete range 1, 2, ..., n."""

    def __init__(self, n: int):
        self.n = _as_count(n, "n")
        if self.n == 0:
            raise ValueError("n must be >= 1")
        self._dist = stats.randint(1, self.n + 1)
        self._lower, self._upper = 1, self.n

    def __repr__(self):
        return f"Uniform(n={self.n})"


# ---------------------------------------------------------------------------
# Multinomial
# ---------------------------------------------------------------------------

class Multinomial:
    """Counts per category when category i is drawn with probabilities[i].

    ``Multinomial(0.2, 0.3, 0.5).pmf(1, 0, 2)`` is the probability of
    seeing one item of the first category and two of the third in three
    draws.
    """

    def __init__(self, *probabilities: float):
        if not probabilities:
            raise ValueError("at least one category probability is required")
        self.probabilities = tuple(
            _check_p(p, f"probabilities[{i}]") for i, p in enumerate(probabilities)
        )
        total = float(np.sum(self.probabilities))
        if not equiv(total, 1.0):
            raise ValueError(f"probabilities must sum to 1, got {total}")

    def pmf(self, *partition: int) -> float:
        if len(partition) != len(self.probabilities):
            raise ValueError(
                f"invalid partition: expected {len(self.probabilities)} "
                f"counts, got {len(partition)}"
            )
        counts = [_as_count(c, "partition count") for c in partition]
        n = sum(counts)
        if n == 0:
            raise ValueError("partition sum can't be zero")
        return float(stats.multinomial(n, self.probabilities).pmf(counts))

    __call__ = pmf

    def __repr__(self):
        return f"Multinomial(probabilities={self.probabilities})"

