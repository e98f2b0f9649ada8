"""Trampoline for the CPS evaluator.

`run` repeatedly takes the pending TailCall and performs it. Nothing returns
from it: evaluation ends only when some continuation raises, which is how the
outermost continuation delivers its effect (SystemExit in the driver, Halt for
embedding) and how a KappaError aborts the computation.
"""

from __future__ import annotations

import logging
from typing import NoReturn

from kappa import Continuation, LispValue, SExpression
from kappa.evaluation.evaluator import evaluate
from kappa.types.environment import Environment
from kappa.types.tail_call import TailCall

logger = logging.getLogger(__name__)


class Halt(Exception):
    """Raised by the `halt` continuation to hand a final value to host code."""

    def __init__(self, value: LispValue):
        super().__init__("evaluation halted")
        self.value = value


def halt(value: LispValue) -> NoReturn:
    raise Halt(value)


def run(step: TailCall) -> NoReturn:
    bounces = 0
    try:
        while True:
            assert isinstance(step, TailCall), f"evaluation fell through with {step!r}"
            step = step.fn(step.arg)
            bounces += 1
    finally:
        logger.debug("trampoline stopped after %d bounces", bounces)


def execute(expr: SExpression, env: Environment, k: Continuation) -> NoReturn:
    """Evaluate `expr` and hand its value to the outermost continuation `k`."""
    run(evaluate(expr, env, k))


def evaluate_to_value(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` with the halting continuation and return its value."""
    try:
        execute(expr, env, halt)
    except Halt as done:
        return done.value
