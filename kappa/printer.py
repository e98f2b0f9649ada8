"""Canonical text rendering of Kappa runtime values.

    Undef -> <undefined>      Nil -> ()        #t / #f
    Integer -> decimal        Text -> raw characters, unquoted
    Closure -> <lambda>       Pair -> (a b c) or (a b . c)
"""

from __future__ import annotations

from io import StringIO

from kappa import LispValue
from kappa.errors import KappaTypeError
from kappa.types.closure import Closure
from kappa.types.nil import Nil, Undef
from kappa.types.pair import Pair


def to_str(value: LispValue) -> str:
    with StringIO() as buffer:
        write_value(buffer, value)
        return buffer.getvalue()


class _Punct(str):
    """Delimiter text queued between values; written as is."""


_OPEN, _CLOSE, _SPACE, _DOT = _Punct("("), _Punct(")"), _Punct(" "), _Punct(" . ")


def write_value(buffer: StringIO, value: LispValue) -> None:
    # Pending work is a stack of values and delimiters, so neither long nor
    # deeply nested lists recurse.
    pending: list[LispValue] = [value]
    while pending:
        item = pending.pop()
        if type(item) is _Punct:
            buffer.write(item)
        elif isinstance(item, Pair):
            pending.extend(reversed(_pair_parts(item)))
        else:
            _write_atom(buffer, item)


def _pair_parts(pair: Pair) -> list[LispValue]:
    parts: list[LispValue] = [_OPEN, pair.car]
    cell = pair.cdr
    while isinstance(cell, Pair):
        parts += (_SPACE, cell.car)
        cell = cell.cdr
    if cell is not Nil:
        parts += (_DOT, cell)
    parts.append(_CLOSE)
    return parts


def _write_atom(buffer: StringIO, value: LispValue) -> None:
    if value is Undef:
        buffer.write("<undefined>")
    elif value is Nil:
        buffer.write("()")
    elif isinstance(value, bool):
        buffer.write("#t" if value else "#f")
    elif isinstance(value, int):
        buffer.write(str(value))
    elif isinstance(value, str):
        buffer.write(value)
    elif isinstance(value, Closure):
        buffer.write("<lambda>")
    else:
        raise KappaTypeError(f"{value!r} is not a Kappa value")
