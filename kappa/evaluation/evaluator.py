"""Core CPS evaluator for the Kappa interpreter.

`evaluate(expr, env, k)` never hands a program value back to its caller. It
returns the next TailCall for the trampoline, usually "call k with the
value", or raises a KappaError. The TailCall return type is disjoint from
every runtime value, so a path that forgets its continuation is a type error.
"""

from __future__ import annotations

from kappa import Continuation, SExpression
from kappa.errors import KappaSyntaxError
from kappa.evaluation.apply import evaluate_application
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.types.closure import Closure
from kappa.types.environment import Environment
from kappa.types.integer import check_range
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall


def evaluate(expr: SExpression, env: Environment, k: Continuation) -> TailCall:
    match expr:
        case bool() | str():
            return TailCall(k, expr)
        case int():
            return TailCall(k, check_range(expr))
        case Symbol():
            return TailCall(k, env.lookup(expr))
        case []:
            return TailCall(k, Nil)
        case [head, *operands]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](operands, env, k, evaluate)
            return evaluate_application(head, operands, env, k, evaluate)
        case Closure():
            # Already-evaluated closures embedded by host code are self-evaluating
            return TailCall(k, expr)

    if expr is Nil:
        return TailCall(k, Nil)
    raise KappaSyntaxError(f"Cannot evaluate {expr!r}")
