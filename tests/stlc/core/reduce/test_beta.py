import pytest

from stlc.core.ast import Abstraction, Application, Variable, apply_term
from stlc.core.pretty import show
from stlc.core.reduce import StepBudget, beta_head_step, beta_reduce
from stlc.errors import ReductionLimitExceeded, StuckTermError
from stlc.surface.parse import parse

I = Abstraction(Variable(0))
OMEGA = "((λx.(x x)) (λx.(x x)))"


def test_identity_applied_to_identity() -> None:
    result = beta_reduce(parse("((λx.x) (λy.y))"))
    assert result == I
    assert show(result) == "λ 0"


def test_constant_combinator_skips_inner_binder() -> None:
    t1 = "(λa.a)"
    t2 = "(λb.(λc.b))"
    result = beta_reduce(parse(f"(((λx.(λy.x)) {t1}) {t2})"))
    assert result == parse(t1)


def test_second_projection() -> None:
    result = beta_reduce(parse("(((λx.(λy.y)) (λa.a)) (λb.(λc.b)))"))
    assert result == parse("(λb.(λc.b))")


def test_abstractions_are_not_reduced_under_binder() -> None:
    term = parse("(λx.((λy.y) x))")
    assert beta_reduce(term) is term


def test_arguments_are_substituted_unreduced() -> None:
    result = beta_reduce(parse("((λx.(λy.x)) ((λz.z) (λw.w)))"))
    assert result == Abstraction(Application(I, I))


def test_unused_divergent_argument_is_never_reduced() -> None:
    result = beta_reduce(parse(f"(((λx.(λy.x)) (λa.a)) {OMEGA})"))
    assert result == I


def test_function_position_is_reduced_first() -> None:
    # ((λf.f) (λx.(λy.x))) reduces to K before K meets its arguments.
    result = beta_reduce(parse("((((λf.f) (λx.(λy.x))) (λa.a)) (λb.(λc.c)))"))
    assert result == I


def test_input_is_left_untouched() -> None:
    term = parse("((λx.x) (λy.y))")
    beta_reduce(term)
    assert term == Application(I, I)


def test_omega_trips_step_limit() -> None:
    with pytest.raises(ReductionLimitExceeded, match="100 steps") as exc:
        beta_reduce(parse(OMEGA), max_steps=100)
    assert exc.value.max_steps == 100


def test_step_limit_counts_contractions() -> None:
    term = parse("((λx.x) (λy.y))")
    assert beta_reduce(term, max_steps=1) == I
    with pytest.raises(ReductionLimitExceeded):
        beta_reduce(term, max_steps=0)
    assert beta_reduce(I, max_steps=0) is I


def test_long_reduction_path_does_not_grow_the_stack() -> None:
    term = apply_term(I, *([I] * 3000))
    assert beta_reduce(term) == I


def test_variable_is_returned_unchanged() -> None:
    assert beta_reduce(Variable(0)) == Variable(0)


def test_free_head_is_stuck() -> None:
    with pytest.raises(StuckTermError, match="Stuck application"):
        beta_reduce(Application(Variable(0), I))


def test_head_step() -> None:
    assert beta_head_step(Application(I, I)) == I
    nested = Application(Application(I, I), Variable(0))
    assert beta_head_step(nested) == Application(I, Variable(0))
    assert beta_head_step(I) is I
    stuck = Application(Variable(0), I)
    assert beta_head_step(stuck) is stuck


def test_budget_counts_steps() -> None:
    budget = StepBudget(2)
    budget.tick()
    budget.tick()
    assert budget.steps == 2
    with pytest.raises(ReductionLimitExceeded):
        budget.tick()
