"""Reduction utilities split by strategy (head steps, weak head, full normal form)."""

from .beta import beta_head_step, beta_reduce
from .budget import StepBudget
from .normalize import normalize
from .whnf import whnf, whnf_spine

__all__ = [
    "StepBudget",
    "beta_head_step",
    "beta_reduce",
    "normalize",
    "whnf",
    "whnf_spine",
]
