"""Abstract syntax tree for lambda terms using de Bruijn indices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import Type


@dataclass(frozen=True)
class Term:
    """Base class for all lambda terms.

    Terms are immutable trees. Every operation that transforms a term
    (substitution, reduction) builds a new tree and leaves its input intact.
    """

    # --- Display --------------------------------------------------------------
    def __str__(self) -> str:
        # Deferred import avoids cycles when pretty-printing dataclass reprs.
        from .pretty import pretty

        return pretty(self)


@dataclass(frozen=True)
class Variable(Term):
    """De Bruijn variable pointing ``idx`` binders outward (0 = innermost)."""

    idx: int

    def __post_init__(self) -> None:
        if self.idx < 0:
            raise ValueError("De Bruijn indices must be non-negative")


@dataclass(frozen=True)
class Abstraction(Term):
    """A lambda binding exactly one variable.

    ``argument_type`` is ``None`` for untyped terms and required by the type
    checker.
    """

    body: Term
    argument_type: Type | None = None


@dataclass(frozen=True)
class Application(Term):
    """Binary application; ``(f a b)`` is ``Application(Application(f, a), b)``."""

    function: Term
    argument: Term


def apply_term(function: Term, *args: Term) -> Term:
    """Apply ``args`` to ``function`` left-associatively."""

    result = function
    for arg in args:
        result = Application(result, arg)
    return result


def decompose_app(term: Term) -> tuple[Term, tuple[Term, ...]]:
    """Split ``f a1 ... an`` into ``(f, (a1, ..., an))``.

    This is the inverse of ``apply_term``.
    """

    args: list[Term] = []
    while isinstance(term, Application):
        args.append(term.argument)
        term = term.function
    return term, tuple(reversed(args))


def mk_lams(*arg_types: Type | None, body: Term) -> Term:
    """Wrap ``body`` in abstractions, outermost binder first."""

    result = body
    for ty in reversed(arg_types):
        result = Abstraction(result, ty)
    return result


def free_indices(term: Term, depth: int = 0) -> frozenset[int]:
    """Indices of ``term`` that escape it, relative to its own top level."""

    match term:
        case Variable(idx):
            return frozenset({idx - depth}) if idx >= depth else frozenset()
        case Abstraction(body):
            return free_indices(body, depth + 1)
        case Application(function, argument):
            return free_indices(function, depth) | free_indices(argument, depth)
    raise TypeError(f"Unexpected term: {term!r}")


def is_closed(term: Term) -> bool:
    return not free_indices(term)


def is_typed(term: Term) -> bool:
    """Whether any abstraction in ``term`` carries an argument type."""

    match term:
        case Variable():
            return False
        case Abstraction(body, argument_type):
            return argument_type is not None or is_typed(body)
        case Application(function, argument):
            return is_typed(function) or is_typed(argument)
    raise TypeError(f"Unexpected term: {term!r}")


def size(term: Term) -> int:
    """Number of nodes in ``term``."""

    match term:
        case Variable():
            return 1
        case Abstraction(body):
            return 1 + size(body)
        case Application(function, argument):
            return 1 + size(function) + size(argument)
    raise TypeError(f"Unexpected term: {term!r}")


__all__ = [
    "Term",
    "Variable",
    "Abstraction",
    "Application",
    "apply_term",
    "decompose_app",
    "mk_lams",
    "free_indices",
    "is_closed",
    "is_typed",
    "size",
]
