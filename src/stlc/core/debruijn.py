"""Utilities for working with De Bruijn indices such as shifting and substitution."""

from __future__ import annotations

from .ast import Abstraction, Application, Term, Variable


def substitute(term: Term, index: int, replacement: Term) -> Term:
    """Replace every ``Variable(index)`` at the current nesting level.

    The index grows by one under each abstraction. ``replacement`` is inserted
    verbatim, without shifting its own indices, so it must be closed for the
    result to be meaningful. The reducer only ever substitutes closed
    arguments; ``instantiate`` is the general, capture-avoiding version.
    """

    match term:
        case Variable(idx):
            return replacement if idx == index else term
        case Abstraction(body, argument_type):
            return Abstraction(substitute(body, index + 1, replacement), argument_type)
        case Application(function, argument):
            return Application(
                substitute(function, index, replacement),
                substitute(argument, index, replacement),
            )
    raise TypeError(f"Unexpected term in substitute: {term!r}")


def shift(term: Term, by: int, cutoff: int = 0) -> Term:
    """Add ``by`` to every index of ``term`` that is at least ``cutoff``."""

    match term:
        case Variable(idx):
            if idx < cutoff:
                return term
            return Variable(idx + by)
        case Abstraction(body, argument_type):
            return Abstraction(shift(body, by, cutoff + 1), argument_type)
        case Application(function, argument):
            return Application(shift(function, by, cutoff), shift(argument, by, cutoff))
    raise TypeError(f"Unexpected term in shift: {term!r}")


def subst(term: Term, sub: Term, j: int = 0) -> Term:
    """Substitute ``sub`` for ``Variable(j)`` and drop the binder at ``j``.

    ``sub`` is shifted as it moves under abstractions and indices above ``j``
    are decremented, so free references keep pointing at the same binders.
    """

    match term:
        case Variable(idx):
            if idx == j:
                return sub
            if idx > j:
                return Variable(idx - 1)
            return term
        case Abstraction(body, argument_type):
            return Abstraction(subst(body, shift(sub, 1), j + 1), argument_type)
        case Application(function, argument):
            return Application(subst(function, sub, j), subst(argument, sub, j))
    raise TypeError(f"Unexpected term in subst: {term!r}")


def instantiate(body: Term, argument: Term) -> Term:
    """Contract the redex ``(λ. body) argument`` for an open ``argument``."""

    return subst(body, argument, 0)


__all__ = ["substitute", "shift", "subst", "instantiate"]
