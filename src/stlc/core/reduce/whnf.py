"""Weak head normal form via an explicit argument spine."""

from __future__ import annotations

import logging
from typing import Callable

from ..ast import Abstraction, Application, Term, apply_term
from ..debruijn import instantiate
from .budget import StepBudget

logger = logging.getLogger(__name__)

Contract = Callable[[Term, Term], Term]


def whnf_spine(
    term: Term, budget: StepBudget, contract: Contract = instantiate
) -> tuple[Term, list[Term]]:
    """Reduce ``term`` to weak head normal form.

    Returns the head and its remaining arguments, leftmost first. The head is
    either an ``Abstraction`` with no arguments left or a ``Variable``.
    Arguments are pushed on a stack while unwinding applications, so the
    reduction path never grows the Python call stack.
    """

    head = term
    # Pending arguments; the last entry is applied next.
    spine: list[Term] = []
    while True:
        while isinstance(head, Application):
            spine.append(head.argument)
            head = head.function
        if not spine or not isinstance(head, Abstraction):
            break
        budget.tick()
        head = contract(head.body, spine.pop())
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("step %d: %s", budget.steps, apply_term(head, *reversed(spine)))
    spine.reverse()
    return head, spine


def whnf(term: Term, max_steps: int | None = None) -> Term:
    """Weak head normal form of a possibly open term."""

    head, args = whnf_spine(term, StepBudget(max_steps))
    return apply_term(head, *args)


__all__ = ["whnf", "whnf_spine"]
