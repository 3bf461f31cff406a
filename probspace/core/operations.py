"""Operations building new distributions from existing ones."""

from __future__ import annotations

import logging

from .errors import DomainMismatchError, NotFullySupportedError
from .space import equivalent
from .types import IMPOSSIBLE, Probability, equiv

logger = logging.getLogger(__name__)


def compose(p, q, alpha: Probability):
    """Mix two distributions with weight *alpha*.

    The result takes each outcome ``o`` of the shared domain with
    probability ``alpha * P_p(o) + (1 - alpha) * P_q(o)``.  Outcomes whose
    mixed probability is zero within tolerance are left unsupported, so the
    result can fall short of certainty by less than ``epsilon`` per outcome.

    *alpha* is expected on [0, 1] but is not checked; a value outside it
    produces whatever :meth:`add_outcome` makes of the resulting masses.

    Args:
        p: First fully supported distribution.
        q: Second fully supported distribution over an equivalent domain.
        alpha: Weight given to *p*.

    Returns:
        A new :class:`~probspace.distributions.discrete.DiscreteDistribution`
        over ``p.domain``.

    Raises:
        NotFullySupportedError: If either distribution is not fully supported.
        DomainMismatchError: If the domains are not equivalent.
    """
    # deferred to avoid a cycle: distributions.discrete imports core
    from ..distributions.discrete import DiscreteDistribution, fully_supported

    if not fully_supported(p):
        raise NotFullySupportedError("first distribution is not fully supported")
    if not fully_supported(q):
        raise NotFullySupportedError("second distribution is not fully supported")
    if not equivalent(p.domain, q.domain):
        raise DomainMismatchError(
            "domains of both distributions must be equivalent"
        )

    n = DiscreteDistribution(p.domain)
    for o in n.domain:
        cp = alpha * p.probability_of(o) + (1 - alpha) * q.probability_of(o)
        if equiv(cp, IMPOSSIBLE):
            continue
        n.add_outcome(o, cp)

    logger.debug("composed %d outcomes with alpha=%g", len(n), alpha)
    return n
