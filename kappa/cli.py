"""Command line driver: `python -m kappa [FILE | -e EXPR]`.

The driver supplies the outermost continuation. It prints the rendering of
the final value and exits with status 0. Evaluation errors are logged, and the
process exits with the error kind's `exit_code`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn, Sequence

from kappa import LispValue
from kappa.config import get_log_level
from kappa.errors import KappaError
from kappa.interpreter import DEMO_PROGRAM, Interpreter
from kappa.printer import to_str

logger = logging.getLogger(__name__)


def print_and_exit(value: LispValue) -> NoReturn:
    print(to_str(value))
    sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kappa",
        description="Evaluate a Kappa program in continuation-passing style and print its value.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "file",
        nargs="?",
        type=Path,
        help="Program file ('-' reads standard input). Runs the built-in demo when omitted.",
    )
    source.add_argument("-e", "--expr", help="Evaluate this source text instead of a file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (defaults to $LOGLEVEL, then WARNING)",
    )
    return parser


def read_source(args: argparse.Namespace) -> str:
    if args.expr is not None:
        return args.expr
    if args.file is None:
        return DEMO_PROGRAM
    if str(args.file) == "-":
        return sys.stdin.read()
    return args.file.read_text(encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> NoReturn:
    args = build_parser().parse_args(argv)
    level = getattr(logging, args.log_level) if args.log_level else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)

    try:
        source = read_source(args)
    except (OSError, UnicodeDecodeError) as ex:
        logger.error("Cannot read %s: %s", args.file, ex)
        sys.exit(1)

    try:
        Interpreter().run(source, print_and_exit)
    except KappaError as ex:
        logger.error("%s: %s", type(ex).__name__, ex)
        sys.exit(ex.exit_code)
