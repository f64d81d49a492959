"""Command-line entry point: read a term, optionally apply it, reduce and print."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from stlc.config import EvalConfig
from stlc.core.ast import Application, Term, is_typed
from stlc.core.pretty import render_result
from stlc.core.reduce import beta_reduce, normalize
from stlc.core.types import Type
from stlc.core.typing import type_of
from stlc.errors import ParseError, ReductionError, TypeCheckError
from stlc.surface.parse import parse

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stlc",
        description="Reduce a (simply typed) lambda term and print its normal form.",
    )
    parser.add_argument("file", help="file containing the term to evaluate")
    parser.add_argument(
        "-a", "--arg", help="file containing a term to apply the first term to"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", help="print the structural form of the result"
    )
    parser.add_argument(
        "--max-steps",
        type=int,
        default=None,
        help="give up after this many beta-reductions (default: unlimited)",
    )
    parser.add_argument(
        "--full", action="store_true", help="also reduce under abstractions"
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="log progress (repeat for more)"
    )
    return parser


def load_term(path: Path) -> Term:
    """Read and parse the term stored in ``path``."""

    text = path.read_text(encoding="utf-8")
    logger.info("parsing %s", path)
    return parse(text)


def evaluate(term: Term, config: EvalConfig) -> tuple[Term, Type | None]:
    """Type-check ``term`` when it is annotated, then reduce it.

    The type is computed on the term before reduction.
    """

    ty = type_of(term) if is_typed(term) else None
    if ty is not None:
        logger.info("type: %s", ty)
    reducer = normalize if config.full else beta_reduce
    return reducer(term, config.max_steps), ty


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = EvalConfig.from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    terms: list[Term] = []
    for path in (config.file, config.arg_file):
        if path is None:
            continue
        try:
            terms.append(load_term(path))
        except OSError as exc:
            print(f"Unable to open file {path}: {exc.strerror or exc}", file=sys.stderr)
            return 1
        except UnicodeDecodeError as exc:
            print(f"Unable to open file {path}: {exc.reason}", file=sys.stderr)
            return 1
        except RecursionError:
            print(f"{path}: term nested too deeply", file=sys.stderr)
            return 1
        except ParseError as exc:
            print(f"{path}: {exc}", file=sys.stderr)
            return 1
    term = terms[0] if len(terms) == 1 else Application(terms[0], terms[1])

    try:
        result, ty = evaluate(term, config)
        line = render_result(result, ty, debug_mode=config.debug)
    except RecursionError:
        print("Term nested too deeply", file=sys.stderr)
        return 1
    except TypeCheckError as exc:
        print(f"Term {term} is not well-typed: {exc}", file=sys.stderr)
        return 1
    except ReductionError as exc:
        print(f"Term {term} could not be reduced: {exc}", file=sys.stderr)
        return 1

    print(line)
    return 0


__all__ = ["build_parser", "evaluate", "load_term", "main"]
