import logging

from kappa import Continuation, EvaluatorFn, LispValue, SExpression
from kappa.errors import KappaInvalidSymbol, KappaSyntaxError
from kappa.types.environment import Environment
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall

logger = logging.getLogger(__name__)

_LAMBDA = Symbol("lambda")


def define_form(
    tail: list[SExpression],
    env: Environment,
    k: Continuation,
    evaluate_fn: EvaluatorFn,
) -> TailCall:
    """
    (define name value)
    (define (name params...) body...)  ==  (define name (lambda (params...) body...))

    The slot is reserved before the initializer runs, so a self-reference
    inside a non-lambda initializer sees Undef. Passes Nil on to `k`.
    """
    if len(tail) < 2:
        raise KappaSyntaxError("define requires a name and a value")

    target = tail[0]
    if isinstance(target, list):
        if not target:
            raise KappaSyntaxError("define requires a name")
        name, params = target[0], target[1:]
        value_expr = [_LAMBDA, params, *tail[1:]]
    else:
        if len(tail) != 2:
            raise KappaSyntaxError("define requires exactly 2 operands: (define NAME EXPR)")
        name, value_expr = target, tail[1]

    if not isinstance(name, Symbol):
        raise KappaInvalidSymbol(f"Cannot define {name!r} as a symbol")

    slot = env.reserve(name)

    def bind(value: LispValue) -> TailCall:
        slot.fill(value)
        logger.debug("defined %s", name)
        return TailCall(k, Nil)

    return evaluate_fn(value_expr, env, bind)
