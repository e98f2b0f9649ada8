from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.tail_call import TailCall


def if_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    if len(tail) != 3:
        raise KappaSyntaxError("if requires exactly 3 operands: (if COND THEN ELSE)")

    cond_expr, then_expr, else_expr = tail

    def branch(cond: LispValue) -> TailCall:
        # Only #f is false; (), 0 and "" all select THEN
        if cond is False:
            return evaluate_fn(else_expr, env, k)
        return evaluate_fn(then_expr, env, k)

    return evaluate_fn(cond_expr, env, branch)
