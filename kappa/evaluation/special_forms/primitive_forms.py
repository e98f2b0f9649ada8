"""The two built-in operators: pair construction and integer addition.

Both are special forms rather than closures. Their operands are evaluated
left to right, each exactly once.
"""

from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.integer import check_range, require_integer
from kappa.types.pair import Pair
from kappa.types.tail_call import TailCall


def _binary_operands(name: str, tail: list[SExpression]) -> tuple[SExpression, SExpression]:
    if len(tail) != 2:
        raise KappaSyntaxError(f"{name} requires exactly 2 operands")
    return tail[0], tail[1]


def cons_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    car_expr, cdr_expr = _binary_operands("cons", tail)

    def with_car(car: LispValue) -> TailCall:
        def with_cdr(cdr: LispValue) -> TailCall:
            return TailCall(k, Pair(car, cdr))
        return evaluate_fn(cdr_expr, env, with_cdr)

    return evaluate_fn(car_expr, env, with_car)


def add_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    a_expr, b_expr = _binary_operands("+", tail)

    def with_a(a: LispValue) -> TailCall:
        require_integer(a, "+")

        def with_b(b: LispValue) -> TailCall:
            require_integer(b, "+")
            return TailCall(k, check_range(a + b))

        return evaluate_fn(b_expr, env, with_b)

    return evaluate_fn(a_expr, env, with_a)
