"""Full normalization: weak head reduction repeated under binders and in arguments."""

from __future__ import annotations

import logging

from ..ast import Abstraction, Term, apply_term
from .budget import StepBudget
from .whnf import whnf_spine

logger = logging.getLogger(__name__)


def _normalize(term: Term, budget: StepBudget) -> Term:
    head, args = whnf_spine(term, budget)
    if isinstance(head, Abstraction):
        # whnf_spine leaves no arguments behind an abstraction.
        return Abstraction(_normalize(head.body, budget), head.argument_type)
    return apply_term(head, *(_normalize(arg, budget) for arg in args))


def normalize(term: Term, max_steps: int | None = None) -> Term:
    """Normalize ``term`` in normal order, including under abstractions.

    Unlike ``beta_reduce`` this accepts open terms: a variable in head
    position simply stays there with its arguments normalized.
    """

    budget = StepBudget(max_steps)
    result = _normalize(term, budget)
    logger.debug("normalized in %d steps", budget.steps)
    return result


__all__ = ["normalize"]
