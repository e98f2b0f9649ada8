from kappa import Continuation, EvaluatorFn, SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.closure import Lambda
from kappa.types.environment import Environment
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall


def parse_params(params: SExpression) -> list[Symbol]:
    """Validate a parameter list: a list of distinct Symbols."""
    if params is Nil:
        return []
    if not isinstance(params, list):
        raise KappaSyntaxError(f"lambda parameters must be a list, got {params!r}")
    for p in params:
        if not isinstance(p, Symbol):
            raise KappaSyntaxError(f"lambda parameter {p!r} is not a symbol")
    if len(set(params)) != len(params):
        raise KappaSyntaxError("lambda parameters must be distinct")
    return list(params)


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    # (lambda (params) body...) needs at least one body form; several form an implicit begin
    if len(tail) < 2:
        raise KappaSyntaxError("lambda requires a parameter list and at least one body form")

    params = parse_params(tail[0])
    return TailCall(k, Lambda(params, list(tail[1:]), env))
