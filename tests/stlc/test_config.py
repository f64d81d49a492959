import argparse
import logging
from pathlib import Path

import pytest

from stlc.cli import build_parser
from stlc.config import MAX_STEPS_ENV, EvalConfig


def parse_args(*argv: str) -> argparse.Namespace:
    return build_parser().parse_args(list(argv))


def test_defaults() -> None:
    config = EvalConfig.from_args(parse_args("term.lc"), environ={})
    assert config == EvalConfig(file=Path("term.lc"))
    assert config.log_level == logging.WARNING


def test_flags() -> None:
    args = parse_args("term.lc", "-a", "arg.lc", "-d", "--max-steps", "7", "--full", "-vv")
    config = EvalConfig.from_args(args, environ={})
    assert config.arg_file == Path("arg.lc")
    assert config.debug
    assert config.max_steps == 7
    assert config.full
    assert config.log_level == logging.DEBUG


def test_environment_budget() -> None:
    config = EvalConfig.from_args(parse_args("term.lc"), environ={MAX_STEPS_ENV: "12"})
    assert config.max_steps == 12


def test_flag_overrides_environment() -> None:
    args = parse_args("term.lc", "--max-steps", "3")
    config = EvalConfig.from_args(args, environ={MAX_STEPS_ENV: "12"})
    assert config.max_steps == 3


def test_invalid_environment_budget() -> None:
    with pytest.raises(ValueError, match=MAX_STEPS_ENV):
        EvalConfig.from_args(parse_args("term.lc"), environ={MAX_STEPS_ENV: "lots"})


def test_info_level() -> None:
    config = EvalConfig.from_args(parse_args("term.lc", "-v"), environ={})
    assert config.log_level == logging.INFO
