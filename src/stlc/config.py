"""Evaluation settings gathered from the command line and the environment."""

from __future__ import annotations

import argparse
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

MAX_STEPS_ENV = "STLC_MAX_STEPS"


@dataclass(frozen=True)
class EvalConfig:
    """Options for a single evaluation run."""

    file: Path
    arg_file: Path | None = None
    # Print the structural form instead of re-parsable notation.
    debug: bool = False
    # None = no budget; the reduction may then run forever.
    max_steps: int | None = None
    # Normalize under binders instead of stopping at the outermost abstraction.
    full: bool = False
    verbose: int = 0

    @classmethod
    def from_args(
        cls, args: argparse.Namespace, environ: Mapping[str, str] = os.environ
    ) -> EvalConfig:
        max_steps = args.max_steps
        if max_steps is None and environ.get(MAX_STEPS_ENV):
            raw = environ[MAX_STEPS_ENV]
            try:
                max_steps = int(raw)
            except ValueError:
                raise ValueError(f"{MAX_STEPS_ENV} must be an integer, got {raw!r}") from None
        if max_steps is not None and max_steps < 0:
            raise ValueError("step budget must be non-negative")
        return cls(
            file=Path(args.file),
            arg_file=Path(args.arg) if args.arg is not None else None,
            debug=args.debug,
            max_steps=max_steps,
            full=args.full,
            verbose=args.verbose,
        )

    @property
    def log_level(self) -> int:
        if self.verbose >= 2:
            return logging.DEBUG
        if self.verbose == 1:
            return logging.INFO
        return logging.WARNING


__all__ = ["EvalConfig", "MAX_STEPS_ENV"]
