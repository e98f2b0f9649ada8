"""Closure values: the only callable runtime values in Kappa.

Every closure supports two entry points:

- `invoke(k, args)`: continuation and argument values passed separately.
  The evaluator always calls this one.
- `closure(argument)`: the packed convention, where the continuation
  occupies argument slot 0 (see kappa.types.bind).

Both return the next TailCall and never a value.
"""

from __future__ import annotations

from typing import Callable, Sequence

from kappa import Continuation, LispValue, SExpression
from kappa.errors import KappaArityError, KappaMalformedContinuation, KappaTypeError
from kappa.types.bind import bind_arguments, forward_to, unpack_arguments, unpack_single
from kappa.types.environment import Environment
from kappa.types.integer import check_range, is_integer
from kappa.types.nil import Nil
from kappa.types.pair import Pair
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall


class Closure:
    """Base class of callable values. All of them print as <lambda>."""

    __slots__ = ()

    def invoke(self, k: Continuation, args: Sequence[LispValue]) -> TailCall:
        raise NotImplementedError

    def __call__(self, argument: LispValue) -> TailCall:
        k, args = unpack_arguments(argument)
        return self.invoke(forward_to(k), args)

    def __str__(self) -> str:
        return "<lambda>"


def _require_continuation(k) -> None:
    if not callable(k):
        raise KappaMalformedContinuation(f"{k!r} is not a continuation")


class Lambda(Closure):
    """A closure produced by a `lambda` form, closing over its defining frame."""

    __slots__ = ("params", "body", "env")

    def __init__(self, params: list[Symbol], body: list[SExpression], env: Environment):
        self.params: list[Symbol] = params
        self.body: list[SExpression] = body
        self.env: Environment = env

    @property
    def arity(self) -> int:
        return len(self.params)

    def invoke(self, k: Continuation, args: Sequence[LispValue]) -> TailCall:
        _require_continuation(k)
        frame = bind_arguments(self.params, args, self.env)
        # local import to avoid cycles
        from kappa.evaluation.special_forms.progn_form import evaluate_sequence
        from kappa.evaluation.evaluator import evaluate
        return evaluate_sequence(self.body, frame, k, evaluate)

    def __repr__(self) -> str:
        return f"<Lambda ({' '.join(str(p) for p in self.params)})>"


class ContinuationClosure(Closure):
    """A continuation reified as a first-class value (see call/cc).

    Applying it to one value resumes the captured continuation with that
    value and abandons the caller's own continuation.
    """

    __slots__ = ("k",)

    def __init__(self, k: Continuation):
        _require_continuation(k)
        self.k = k

    def invoke(self, k: Continuation, args: Sequence[LispValue]) -> TailCall:
        if len(args) != 1:
            raise KappaArityError(f"a continuation takes exactly one value, got {len(args)}")
        return TailCall(self.k, args[0])

    def __call__(self, argument: LispValue) -> TailCall:
        return TailCall(self.k, unpack_single(argument))

    def __repr__(self) -> str:
        return "<ContinuationClosure>"


class Primitive(Closure):
    """A host Python function lifted into a closure.

    `fn` receives the argument values positionally and returns a value, which
    is passed on to the call's continuation. When `arity` is given it is
    checked before `fn` runs. The result must be a Kappa value, and integers
    must fit in 64 bits.
    """

    __slots__ = ("fn", "arity", "name")

    def __init__(self, fn: Callable[..., LispValue], arity: int | None = None, name: str | None = None):
        self.fn = fn
        self.arity = arity
        self.name = name or getattr(fn, "__name__", "primitive")

    def invoke(self, k: Continuation, args: Sequence[LispValue]) -> TailCall:
        _require_continuation(k)
        if self.arity is not None and len(args) != self.arity:
            raise KappaArityError(f"{self.name} expects {self.arity} arguments, got {len(args)}")
        return TailCall(k, self._check_result(self.fn(*args)))

    def _check_result(self, result: LispValue) -> LispValue:
        if is_integer(result):
            return check_range(result)
        if result is Nil or isinstance(result, (bool, str, Pair, Closure)):
            return result
        raise KappaTypeError(f"{self.name} returned {result!r}, which is not a Kappa value")

    def __repr__(self) -> str:
        return f"<Primitive {self.name}>"
