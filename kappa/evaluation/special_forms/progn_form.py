from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.tail_call import TailCall


def evaluate_sequence(
    forms: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """Evaluate `forms` in order; only the last value reaches `k`."""
    first, rest = forms[0], forms[1:]
    if not rest:
        return evaluate_fn(first, env, k)

    def discard(_: LispValue) -> TailCall:
        return evaluate_sequence(rest, env, k, evaluate_fn)

    return evaluate_fn(first, env, discard)


def progn_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if not tail:
        raise KappaSyntaxError("begin requires at least one form")
    return evaluate_sequence(tail, env, k, evaluate_fn)
