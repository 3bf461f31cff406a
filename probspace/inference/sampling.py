"""Simulation of experiments drawn from a discrete distribution.

Provides:
- simulate: draw one outcome by inverse-CDF sampling
- simulate_many: draw n outcomes into a SimulationResults
- SimulationResults: container for drawn outcomes with empirical statistics
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Dict, List, Union

import matplotlib.pyplot as plt
import numpy as np

from probspace.core.errors import NotFullySupportedError
from probspace.core.types import Distribution, Outcome, RandomVariable
from probspace.distributions.discrete import fully_supported

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def simulate(d: Distribution, rng: RandomSource = None) -> Outcome:
    """Simulate one experiment with the distribution *d*.

    A uniform threshold ``f`` on [0, 1) is drawn and the outcomes are
    walked in their iteration order, accumulating mass; the first outcome
    whose running mass exceeds ``f`` is returned.  If rounding leaves the
    walk exhausted, the last outcome visited is returned.

    Args:
        d: A fully supported distribution.
        rng: A :class:`numpy.random.Generator`, a seed, or *None* for
            fresh OS entropy.

    Returns:
        One outcome of *d*.

    Raises:
        NotFullySupportedError: If *d* is not fully supported.

    Example::

        d = uniform_discrete(HashSpace([1, 2, 3]))
        simulate(d, rng=42)  # 1, 2 or 3, each w.p. 1/3
    """
    if not fully_supported(d):
        raise NotFullySupportedError("discrete distribution not fully supported")
    return _draw(d, np.random.default_rng(rng))


def _draw(d: Distribution, rng: np.random.Generator) -> Outcome:
    f = rng.random()
    p = 0.0
    last = None
    for o in d.outcomes:
        p += d.probability_of(o)
        last = o
        if f < p:
            return o
    logger.debug("threshold %r not reached (mass %r), falling back to %r", f, p, last)
    return last


def simulate_many(d: Distribution, n: int, seed: RandomSource = None) -> "SimulationResults":
    """Simulate *n* independent experiments with *d*.

    Args:
        d: A fully supported distribution.
        n: Number of draws.
        seed: Generator or seed, as for :func:`simulate`.

    Raises:
        ValueError: If *n* is not positive.
        NotFullySupportedError: If *d* is not fully supported.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if not fully_supported(d):
        raise NotFullySupportedError("discrete distribution not fully supported")
    rng = np.random.default_rng(seed)
    outcomes = [_draw(d, rng) for _ in range(n)]
    logger.debug("simulated %d draws over %d outcomes", n, len(d.outcomes))
    return SimulationResults(outcomes)


class SimulationResults:
    """Outcomes of repeated simulation with empirical statistics.

    Args:
        outcomes: The drawn outcomes, in draw order.
    """

    def __init__(self, outcomes: List[Outcome]) -> None:
        self._outcomes = list(outcomes)

    @property
    def outcomes(self) -> List[Outcome]:
        """Return the raw draws."""
        return self._outcomes

    def counts(self) -> Dict[Outcome, int]:
        """Number of draws of each outcome."""
        return dict(Counter(self._outcomes))

    def frequencies(self) -> Dict[Outcome, float]:
        """Empirical frequency of each outcome."""
        n = len(self._outcomes)
        return {o: c / n for o, c in self.counts().items()}

    def mean(self, X: RandomVariable) -> float:
        """Sample mean of the random variable *X* over the draws."""
        return float(np.mean([X(o) for o in self._outcomes]))

    def histogram(
        self,
        *,
        show: bool = True,
        ax: Any | None = None,
    ) -> Any:
        """Bar chart of the empirical frequencies.

        Args:
            show: If *True*, call ``plt.show()``.
            ax: Optional matplotlib axes to plot on.

        Returns:
            The matplotlib axes object.
        """
        if ax is None:
            _, ax = plt.subplots()
        freqs = self.frequencies()
        labels = [str(o) for o in freqs]
        ax.bar(labels, list(freqs.values()), alpha=0.7, edgecolor="black")
        ax.set_xlabel("Outcome")
        ax.set_ylabel("Frequency")
        ax.set_title("Simulation Results")
        if show:
            plt.show()
        return ax

    def __len__(self) -> int:
        return len(self._outcomes)

    def __repr__(self) -> str:
        return (
            f"SimulationResults(n={len(self)}, "
            f"distinct={len(self.counts())})"
        )
