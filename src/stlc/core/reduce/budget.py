"""Step counting shared by the reduction strategies."""

from __future__ import annotations

from ...errors import ReductionLimitExceeded


class StepBudget:
    """Counts β-contractions and trips once ``max_steps`` is exceeded.

    ``max_steps=None`` never trips.
    """

    def __init__(self, max_steps: int | None = None) -> None:
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must be non-negative")
        self.max_steps = max_steps
        self.steps = 0

    def tick(self) -> None:
        if self.max_steps is not None and self.steps >= self.max_steps:
            raise ReductionLimitExceeded(self.max_steps)
        self.steps += 1


__all__ = ["StepBudget"]
