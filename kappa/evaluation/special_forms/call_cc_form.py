"""Special form: call/cc (call-with-current-continuation).

(call/cc f) evaluates f and applies it to one argument: the current
continuation reified as a ContinuationClosure. Every step already carries its
continuation explicitly, so capturing one only means wrapping `k`.
Continuations are re-entrant and may be invoked after call/cc has finished.

Usage examples:
  (call/cc (lambda (k) (k 42) 99))     ; => 42
  (+ 1 (call/cc (lambda (k) (k 10))))  ; => 11
"""

from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaSyntaxError
from kappa.evaluation.apply import apply
from kappa.types.closure import ContinuationClosure
from kappa.types.environment import Environment
from kappa.types.tail_call import TailCall


def call_cc_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 1:
        raise KappaSyntaxError("call/cc expects exactly 1 argument: a function")

    def with_receiver(fn: LispValue) -> TailCall:
        return apply(fn, (ContinuationClosure(k),), k)

    return evaluate_fn(tail[0], env, with_receiver)
