"""Normal-order β-reduction with lazy argument substitution."""

from __future__ import annotations

import logging

from ...errors import StuckTermError
from ..ast import Abstraction, Application, Term, apply_term
from ..debruijn import substitute
from .budget import StepBudget
from .whnf import whnf_spine

logger = logging.getLogger(__name__)


def _contract(body: Term, argument: Term) -> Term:
    return substitute(body, 0, argument)


def beta_head_step(term: Term) -> Term:
    """Contract the head redex of ``term``, or return ``term`` itself."""

    match term:
        case Application(Abstraction(body), argument):
            return _contract(body, argument)
        case Application(function, argument):
            f1 = beta_head_step(function)
            if f1 is not function:
                return Application(f1, argument)
            return term
        case _:
            return term


def beta_reduce(term: Term, max_steps: int | None = None) -> Term:
    """Reduce an application until its function position is an abstraction.

    The function of an application is reduced first and the argument is
    substituted unreduced. Abstractions and variables are returned as they
    are: nothing is reduced under a binder. Terms without a normal form make
    this loop forever unless ``max_steps`` bounds the number of contractions,
    in which case ``ReductionLimitExceeded`` is raised.
    """

    budget = StepBudget(max_steps)
    head, args = whnf_spine(term, budget, _contract)
    if args:
        # Only reachable for terms with free variables.
        raise StuckTermError(apply_term(head, *args))
    logger.debug("reduced in %d steps", budget.steps)
    return head


__all__ = ["beta_head_step", "beta_reduce"]
