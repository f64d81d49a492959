"""Exception hierarchy for parsing, type checking and reduction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from stlc.common.span import Span

if TYPE_CHECKING:
    from stlc.core.ast import Term
    from stlc.core.types import Type


class StlcError(Exception):
    """Base class for every error raised by this package."""


# --- Parsing ------------------------------------------------------------------


@dataclass
class ParseError(StlcError):
    message: str
    span: Span
    source: str | None = None

    def __str__(self) -> str:
        if self.source is None:
            return f"{self.message} @ {self.span.start}:{self.span.end}"
        snippet = self.span.extract(self.source)
        return f"{self.message} @ {self.span.start}:{self.span.end}: {snippet!r}"


class TermSyntaxError(ParseError):
    """Unexpected or missing token."""


@dataclass
class UnboundVariableError(ParseError):
    name: str = ""

    @classmethod
    def of(cls, name: str, span: Span, source: str | None = None) -> UnboundVariableError:
        return cls(f"Unbound variable {name!r}", span, source, name)


# --- Typing -------------------------------------------------------------------


class TypeCheckError(StlcError, TypeError):
    """Base class for ill-typed terms."""


def _render(term: Term) -> str:
    # Subterms taken from under a binder have no names to print, use indices.
    from stlc.core.ast import is_closed
    from stlc.core.pretty import pretty, show

    return pretty(term) if is_closed(term) else show(term)


class InvalidApplication(TypeCheckError):
    """Function and argument types do not line up."""

    def __init__(
        self,
        function: Term,
        function_type: Type,
        argument: Term,
        argument_type: Type,
    ) -> None:
        self.function = function
        self.function_type = function_type
        self.argument = argument
        self.argument_type = argument_type
        super().__init__(
            "Invalid application:\n"
            f"  function = {_render(function)}:{function_type}\n"
            f"  argument = {_render(argument)}:{argument_type}"
        )

    @property
    def expected(self) -> Type | None:
        """Domain of the function type, ``None`` if it is not a function."""
        from stlc.core.types import FunctionType

        if isinstance(self.function_type, FunctionType):
            return self.function_type.argument
        return None

    @property
    def found(self) -> Type:
        return self.argument_type


class MissingAnnotationError(TypeCheckError):
    def __init__(self, term: Term) -> None:
        self.term = term
        super().__init__(f"Abstraction has no argument type: {_render(term)}")


class UnboundIndexError(TypeCheckError):
    def __init__(self, index: int, depth: int) -> None:
        self.index = index
        self.depth = depth
        super().__init__(f"Unbound variable {index} in context of depth {depth}")


class TypeMismatchError(TypeCheckError):
    def __init__(self, term: Term, expected: Type, found: Type) -> None:
        self.term = term
        self.expected = expected
        self.found = found
        super().__init__(
            "Type mismatch:\n"
            f"  term = {term}\n"
            f"  expected = {expected}\n"
            f"  found = {found}"
        )


# --- Reduction ----------------------------------------------------------------


class ReductionError(StlcError, RuntimeError):
    """Base class for reduction failures."""


class ReductionLimitExceeded(ReductionError):
    def __init__(self, max_steps: int) -> None:
        self.max_steps = max_steps
        super().__init__(f"Reduction did not finish within {max_steps} steps")


class StuckTermError(ReductionError):
    """A variable ended up in function position; only open terms get here."""

    def __init__(self, term: Term) -> None:
        self.term = term
        super().__init__(f"Stuck application with free head: {term!r}")


__all__ = [
    "InvalidApplication",
    "MissingAnnotationError",
    "ParseError",
    "ReductionError",
    "ReductionLimitExceeded",
    "StlcError",
    "StuckTermError",
    "TermSyntaxError",
    "TypeCheckError",
    "TypeMismatchError",
    "UnboundIndexError",
    "UnboundVariableError",
]
