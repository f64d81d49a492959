import pytest

from stlc.core.ast import (
    Abstraction,
    Application,
    Variable,
    apply_term,
    decompose_app,
    free_indices,
    is_closed,
    is_typed,
    mk_lams,
    size,
)
from stlc.core.types import BaseType, FunctionType, arity, arrow

A = BaseType("A")
B = BaseType("B")


def test_negative_index_rejected() -> None:
    with pytest.raises(ValueError, match="non-negative"):
        Variable(-1)


def test_terms_are_immutable() -> None:
    term = Variable(0)
    with pytest.raises(AttributeError):
        term.idx = 1  # type: ignore[misc]


def test_apply_and_decompose() -> None:
    f, a, b = Variable(2), Variable(1), Variable(0)
    term = apply_term(f, a, b)
    assert term == Application(Application(f, a), b)
    assert decompose_app(term) == (f, (a, b))
    assert decompose_app(f) == (f, ())


def test_mk_lams_outermost_first() -> None:
    assert mk_lams(A, B, body=Variable(1)) == Abstraction(Abstraction(Variable(1), B), A)


def test_free_indices() -> None:
    assert free_indices(Abstraction(Variable(0))) == frozenset()
    assert free_indices(Abstraction(Application(Variable(0), Variable(3)))) == {2}
    assert is_closed(Abstraction(Abstraction(Variable(1))))
    assert not is_closed(Abstraction(Variable(1)))


def test_is_typed() -> None:
    assert not is_typed(Abstraction(Variable(0)))
    assert is_typed(Application(Abstraction(Variable(0)), Abstraction(Variable(0), A)))


def test_size() -> None:
    assert size(Abstraction(Application(Variable(0), Variable(0)))) == 4


def test_types() -> None:
    assert arrow(A, B, A) == FunctionType(A, FunctionType(B, A))
    assert arrow(A) == A
    assert arity(arrow(A, B, A)) == 2
    assert FunctionType(A, B) == FunctionType(BaseType("A"), BaseType("B"))
    assert FunctionType(A, B) != FunctionType(B, A)
    with pytest.raises(ValueError):
        BaseType("A1")
