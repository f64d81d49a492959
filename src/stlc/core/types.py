"""Simple types: opaque base types and right-associative function types."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Type:
    """Base class for simple types. Equality is structural."""

    def __str__(self) -> str:
        from .pretty import pretty_type

        return pretty_type(self)


@dataclass(frozen=True)
class BaseType(Type):
    """An atomic type identified only by its name."""

    name: str

    def __post_init__(self) -> None:
        if not self.name.isalpha():
            raise ValueError(f"Base type names must be letters, got {self.name!r}")


@dataclass(frozen=True)
class FunctionType(Type):
    """``argument → result``."""

    argument: Type
    result: Type


def arrow(*types: Type) -> Type:
    """Build ``t0 → t1 → ... → tn`` associating to the right."""

    if not types:
        raise ValueError("arrow() needs at least one type")
    result = types[-1]
    for ty in reversed(types[:-1]):
        result = FunctionType(ty, result)
    return result


def arity(ty: Type) -> int:
    """Number of arguments before reaching a base type."""

    count = 0
    while isinstance(ty, FunctionType):
        count += 1
        ty = ty.result
    return count


__all__ = ["Type", "BaseType", "FunctionType", "arrow", "arity"]
