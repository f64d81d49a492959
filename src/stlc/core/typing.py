"""Type checking for the simply typed lambda calculus."""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import (
    InvalidApplication,
    MissingAnnotationError,
    TypeCheckError,
    TypeMismatchError,
    UnboundIndexError,
)
from .ast import Abstraction, Application, Term, Variable
from .types import FunctionType, Type

Ctx = tuple[Type, ...]
"""Binder types ordered outermost → innermost; ``Variable(k)`` reads ``ctx[-(k + 1)]``."""


def type_of(term: Term, ctx: Sequence[Type] = ()) -> Type:
    """Compute the type of ``term`` under ``ctx``.

    Raises a ``TypeCheckError`` subclass when the term is ill-typed.
    """

    return _infer(term, tuple(ctx))


def _infer(term: Term, ctx: Ctx) -> Type:
    match term:
        case Variable(idx):
            if idx >= len(ctx):
                raise UnboundIndexError(idx, len(ctx))
            return ctx[-(idx + 1)]

        case Abstraction(body, argument_type):
            if argument_type is None:
                raise MissingAnnotationError(term)
            return FunctionType(argument_type, _infer(body, (*ctx, argument_type)))

        case Application(function, argument):
            # Both sides are checked against the same context.
            function_type = _infer(function, ctx)
            argument_type = _infer(argument, ctx)
            if (
                isinstance(function_type, FunctionType)
                and function_type.argument == argument_type
            ):
                return function_type.result
            raise InvalidApplication(function, function_type, argument, argument_type)

    raise TypeError(f"Unexpected term in type_of: {term!r}")


def type_check(term: Term, expected: Type, ctx: Sequence[Type] = ()) -> None:
    """Check that ``term`` has exactly the type ``expected``."""

    found = type_of(term, ctx)
    if found != expected:
        raise TypeMismatchError(term, expected, found)


def is_well_typed(term: Term, ctx: Sequence[Type] = ()) -> bool:
    try:
        type_of(term, ctx)
    except TypeCheckError:
        return False
    return True


__all__ = ["Ctx", "type_of", "type_check", "is_well_typed"]
