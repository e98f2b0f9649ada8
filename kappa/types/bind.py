"""Argument packing, unpacking and binding for closure calls.

Two calling conventions meet here. Evaluated code passes the continuation
separately from the argument values. Host code may instead use the packed
form, where the whole call is one argument value:

    Pair(K, Pair(v1, ... Pair(vn, Nil)))

K must be a Closure. A reified continuation called in packed form receives
`Pair(r, Nil)`.
"""

from __future__ import annotations

from typing import Sequence

from kappa import Continuation, LispValue
from kappa.errors import KappaArityError, KappaMalformedContinuation
from kappa.types.environment import Environment
from kappa.types.nil import Nil
from kappa.types.pair import Pair
from kappa.types.symbol import Symbol
from kappa.types.tail_call import TailCall


def pack_arguments(k: LispValue, args: Sequence[LispValue]) -> Pair:
    """Build the packed argument chain for a call."""
    return Pair(k, Pair.from_iterable(args))


def unpack_arguments(argument: LispValue) -> tuple[LispValue, list[LispValue]]:
    """Split a packed argument chain into its continuation closure and values."""
    from kappa.types.closure import Closure

    if not isinstance(argument, Pair):
        raise KappaArityError("argument chain is missing the continuation slot")
    k = argument.car
    if not isinstance(k, Closure):
        from kappa.printer import to_str
        raise KappaMalformedContinuation(f"argument slot 0 holds {to_str(k)}, not a closure")
    values: list[LispValue] = []
    cell = argument.cdr
    while isinstance(cell, Pair):
        values.append(cell.car)
        cell = cell.cdr
    if cell is not Nil:
        raise KappaArityError("argument chain does not end in ()")
    return k, values


def unpack_single(argument: LispValue) -> LispValue:
    """Return the only value of a one-element argument chain."""
    if isinstance(argument, Pair) and argument.cdr is Nil:
        return argument.car
    raise KappaArityError("a continuation takes exactly one value")


def forward_to(closure: LispValue) -> Continuation:
    """Wrap a continuation closure as a native continuation.

    The result r is delivered as `Pair(r, Nil)`, the packed one-argument form.
    """
    def forward(value: LispValue) -> TailCall:
        return TailCall(closure, Pair(value, Nil))
    return forward


def bind_arguments(
    params: Sequence[Symbol], args: Sequence[LispValue], outer: Environment
) -> Environment:
    """Return a new frame under `outer` binding each parameter to its argument."""
    if len(args) != len(params):
        raise KappaArityError(
            f"expected {len(params)} argument{'s' if len(params) != 1 else ''}, got {len(args)}"
        )
    frame = Environment(outer=outer)
    for param, value in zip(params, args):
        frame.define(param, value)
    return frame
