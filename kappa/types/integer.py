"""Integer representation: Python ints restricted to signed 64-bit.

Overflow never wraps. A literal or a sum outside the range raises
KappaOverflowError.
"""
from __future__ import annotations

from kappa import LispValue
from kappa.errors import KappaOverflowError, KappaTypeError

INT_BITS = 64
INT_MIN = -(2 ** (INT_BITS - 1))
INT_MAX = 2 ** (INT_BITS - 1) - 1


def is_integer(value: LispValue) -> bool:
    # bool subclasses int in Python, but #t/#f are not Kappa integers
    return isinstance(value, int) and not isinstance(value, bool)


def check_range(n: int) -> int:
    if not INT_MIN <= n <= INT_MAX:
        raise KappaOverflowError(f"integer {n} does not fit in {INT_BITS} bits")
    return n


def require_integer(value: LispValue, operator: str) -> int:
    if not is_integer(value):
        from kappa.printer import to_str
        raise KappaTypeError(f"{operator} expects an integer, got {to_str(value)}")
    return value
