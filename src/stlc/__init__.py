"""Parse, reduce and type-check terms of the (simply typed) lambda calculus."""

from stlc.core.ast import Abstraction, Application, Term, Variable, apply_term
from stlc.core.debruijn import substitute
from stlc.core.pretty import pretty, pretty_type, show
from stlc.core.reduce import beta_reduce, normalize
from stlc.core.types import BaseType, FunctionType, Type
from stlc.core.typing import type_of
from stlc.surface.parse import parse, parse_type

__all__ = [
    "Abstraction",
    "Application",
    "BaseType",
    "FunctionType",
    "Term",
    "Type",
    "Variable",
    "apply_term",
    "beta_reduce",
    "normalize",
    "parse",
    "parse_type",
    "pretty",
    "pretty_type",
    "show",
    "substitute",
    "type_of",
]
