"""Core module for probspace.

This module contains the outcome-space abstraction, the probability
primitives and distribution contract, the error taxonomy, the tolerance
configuration and composition of distributions.
"""

from .context import Tolerance
from .operations import compose
from .space import HashSpace, OutcomeSpace, SortedSpace
from .types import CERTAIN, IMPOSSIBLE, Distribution, equiv, is_valid

__all__ = [
    "CERTAIN",
    "IMPOSSIBLE",
    "Distribution",
    "HashSpace",
    "OutcomeSpace",
    "SortedSpace",
    "Tolerance",
    "compose",
    "equiv",
    "is_valid",
]
