"""Exceptions raised by probspace.

Every error is a precondition failure: the operation aborts where the
violation is detected and nothing is partially constructed.  All of them
derive from :class:`ProbabilityError`, itself a :class:`ValueError`, so
callers that only care about "bad input" can catch the builtin.
"""


class ProbabilityError(ValueError):
    """Base class for all probspace errors."""


class InvalidProbabilityError(ProbabilityError):
    """A probability falls outside [0, 1], or is zero where mass is required."""


class OverSupportedError(ProbabilityError):
    """Assigning an outcome would push the total mass above certainty."""


class OutcomeNotInDomainError(ProbabilityError):
    """An outcome is not a member of the distribution's domain."""


class NotFullySupportedError(ProbabilityError):
    """An operation requires a distribution whose mass sums to one."""


class DomainMismatchError(ProbabilityError):
    """Two distributions do not share an equivalent domain."""


class DegenerateInputError(ProbabilityError):
    """A construction was asked to divide mass over an empty domain."""


class DuplicateOutcomeError(ProbabilityError):
    """An outcome already carries mass and cannot be assigned again."""
