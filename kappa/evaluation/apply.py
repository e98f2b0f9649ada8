"""Application engine for Kappa.

A call `(F A1 ... An)` evaluates F first and requires a Closure, then
evaluates the operands strictly left to right. Finally it invokes the closure
with the caller's continuation passed as an explicit parameter.
"""

from __future__ import annotations

from typing import Sequence

from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaNotCallable
from kappa.types.closure import Closure
from kappa.types.environment import Environment
from kappa.types.tail_call import TailCall


def apply(fn: LispValue, args: Sequence[LispValue], k: Continuation) -> TailCall:
    """Invoke `fn` on already-evaluated `args`, delivering the result to `k`."""
    if not isinstance(fn, Closure):
        from kappa.printer import to_str
        raise KappaNotCallable(f"Cannot apply non-function {to_str(fn)}")
    return fn.invoke(k, args)


def evaluate_operands(
    exprs: Sequence[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
    done: tuple[LispValue, ...] = (),
) -> TailCall:
    """Evaluate `exprs` left to right, then pass the tuple of values to `k`."""
    if len(done) == len(exprs):
        return TailCall(k, done)

    def collect(value: LispValue) -> TailCall:
        return evaluate_operands(exprs, env, k, evaluate_fn, done + (value,))

    return evaluate_fn(exprs[len(done)], env, collect)


def evaluate_application(
    head: SExpression,
    operands: Sequence[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    def with_function(fn: LispValue) -> TailCall:
        if not isinstance(fn, Closure):
            from kappa.printer import to_str
            raise KappaNotCallable(f"Cannot apply non-function {to_str(fn)}")

        def with_arguments(args: tuple[LispValue, ...]) -> TailCall:
            return apply(fn, args, k)

        return evaluate_operands(operands, env, with_arguments, evaluate_fn)

    return evaluate_fn(head, env, with_function)
