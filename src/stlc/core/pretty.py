"""Pretty-printing utilities for lambda terms and simple types."""

from __future__ import annotations

from string import ascii_lowercase

from .ast import Abstraction, Application, Term, Variable, decompose_app
from .types import BaseType, FunctionType, Type

LAMBDA = "λ"
ARROW = "→"


def binder_name(depth: int) -> str:
    """Name for the binder introduced at ``depth``: a, b, ..., z, aa, ab, ..."""

    if depth < 0:
        raise ValueError("depth must be non-negative")
    letters = []
    n = depth + 1
    while n:
        n, rem = divmod(n - 1, len(ascii_lowercase))
        letters.append(ascii_lowercase[rem])
    return "".join(reversed(letters))


def pretty_type(ty: Type) -> str:
    """Render ``ty`` in the surface type syntax, e.g. ``(A)→(B)→C``."""

    match ty:
        case BaseType(name):
            return name
        case FunctionType(argument, result):
            return f"({pretty_type(argument)}){ARROW}{pretty_type(result)}"
    raise TypeError(f"Cannot pretty-print unknown type: {ty!r}")


def pretty(term: Term) -> str:
    """Return a re-parsable rendering of ``term`` with generated binder names.

    Each binder is named after its depth, so names never shadow each other.
    Indices that escape the term (only possible for hand-built open terms)
    are printed as bare numbers.
    """

    def fmt(t: Term, ctx: list[str]) -> str:
        match t:
            case Variable(idx):
                return ctx[idx] if idx < len(ctx) else str(idx)

            case Abstraction(body, argument_type):
                name = binder_name(len(ctx))
                annotation = "" if argument_type is None else f":{pretty_type(argument_type)}"
                return f"({LAMBDA}{name}{annotation}.{fmt(body, [name, *ctx])})"

            case Application():
                head, args = decompose_app(t)
                parts = [fmt(head, ctx), *(fmt(arg, ctx) for arg in args)]
                return f"({' '.join(parts)})"

        raise TypeError(f"Cannot pretty-print unknown term: {t!r}")

    return fmt(term, [])


def show(term: Term) -> str:
    """Render ``term`` in bare de Bruijn notation: ``λ 0``, ``((λ 0) (λ 0))``."""

    def fmt(t: Term, in_app: bool) -> str:
        match t:
            case Variable(idx):
                return str(idx)
            case Abstraction(body, argument_type):
                head = LAMBDA if argument_type is None else f"{LAMBDA}:{pretty_type(argument_type)}"
                text = f"{head} {fmt(body, False)}"
                return f"({text})" if in_app else text
            case Application(function, argument):
                return f"({fmt(function, True)} {fmt(argument, True)})"
        raise TypeError(f"Cannot show unknown term: {t!r}")

    return fmt(term, False)


def debug(term: Term | Type) -> str:
    """Structural rendering, e.g. ``Abstraction(body=Variable(idx=0), ...)``."""

    return repr(term)


def render_result(term: Term, ty: Type | None = None, *, debug_mode: bool = False) -> str:
    """Format a reduced term, and its type when known, as one output line."""

    if debug_mode:
        text = debug(term)
        return text if ty is None else f"({text}):{debug(ty)}"
    text = pretty(term)
    return text if ty is None else f"{text}:{pretty_type(ty)}"


__all__ = [
    "binder_name",
    "debug",
    "pretty",
    "pretty_type",
    "render_result",
    "show",
]
