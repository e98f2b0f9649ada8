"""Embedding API: parse Kappa source and evaluate it in a persistent environment."""

from __future__ import annotations

from typing import Callable, NoReturn

from kappa import Continuation, LispValue, SExpression
from kappa.errors import KappaError, KappaNestingError
from kappa.evaluation.special_forms import BEGIN
from kappa.evaluation.trampoline import evaluate_to_value, execute, run
from kappa.reader.parser import read
from kappa.types.closure import Closure, Primitive
from kappa.types.environment import Environment
from kappa.types.nil import Nil
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall

DEMO_PROGRAM = """\
(define (foo a) (if #t (cons (+ a 1) (cons "foo" ())) #f))
(foo 10)
"""


class Interpreter:
    """
    Reads and evaluates Kappa code against one global Environment.
    Definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def parse(self, code: str) -> SExpression | None:
        """Parse `code` into one form; several top-level forms become a begin."""
        forms = read(code)
        if not forms:
            return None
        if len(forms) == 1:
            return forms[0]
        return [BEGIN, *forms]

    def define(self, name: str, value: LispValue | Callable[..., LispValue], arity: int | None = None) -> None:
        """Bind a host value in the global environment; plain callables are lifted to Primitives."""
        if callable(value) and not isinstance(value, Closure):
            value = Primitive(value, arity, name)
        self.env.define(Symbol(name), value)

    def eval_expr(self, expr: SExpression) -> LispValue:
        return self._guarded(evaluate_to_value, expr, self.env)

    def eval(self, code: str) -> LispValue:
        expr = self.parse(code)
        if expr is None:
            return Nil
        return self.eval_expr(expr)

    def run(self, code: str, k: Continuation) -> NoReturn:
        """Evaluate `code` and hand the result to the outermost continuation `k`."""
        expr = self.parse(code)
        if expr is None:
            run(TailCall(k, Nil))
        self._guarded(execute, expr, self.env, k)

    def _guarded(self, step: Callable[..., LispValue], *args) -> LispValue:
        """Call `step`; on failure drop the global slots it left unfilled."""
        try:
            return step(*args)
        except KappaError:
            self.env.release_pending()
            raise
        except RecursionError as ex:
            self.env.release_pending()
            raise KappaNestingError("expression nests too deeply to evaluate") from ex
