from __future__ import annotations

from typing import Iterable, Iterator

from kappa import LispValue
from kappa.errors import KappaTypeError
from kappa.types.nil import Nil


def _atom_equal(a: LispValue, b: LispValue) -> bool:
    # type check keeps #t apart from 1 and #f apart from 0
    return a is b or (type(a) is type(b) and a == b)


class Pair:
    """An immutable cons cell used for lists and packed argument chains."""

    __slots__ = ("car", "cdr")

    def __init__(self, car: LispValue, cdr: LispValue):
        object.__setattr__(self, "car", car)
        object.__setattr__(self, "cdr", cdr)

    def __setattr__(self, name, value):
        raise AttributeError("Pair is immutable")

    def __delattr__(self, name):
        raise AttributeError("Pair is immutable")

    @classmethod
    def from_iterable(cls, items: Iterable[LispValue], tail: LispValue = Nil) -> LispValue:
        """Build a pair chain from `items`, ending in `tail` (Nil for a proper list)."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def is_proper(self) -> bool:
        cell = self
        while isinstance(cell, Pair):
            cell = cell.cdr
        return cell is Nil

    def __iter__(self) -> Iterator[LispValue]:
        cell = self
        while isinstance(cell, Pair):
            yield cell.car
            cell = cell.cdr
        if cell is not Nil:
            raise KappaTypeError("cannot iterate over an improper list")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if isinstance(a, Pair) and isinstance(b, Pair):
                pending.append((a.cdr, b.cdr))
                pending.append((a.car, b.car))
            elif isinstance(a, Pair) or isinstance(b, Pair) or not _atom_equal(a, b):
                return False
        return True

    def __hash__(self) -> int:
        # Pre-order walk with a marker per cell, consistent with __eq__
        shape = []
        pending: list[LispValue] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, Pair):
                shape.append(Pair)
                pending.append(item.cdr)
                pending.append(item.car)
            else:
                shape.append((type(item), item))
        return hash(tuple(shape))

    def __str__(self) -> str:
        from kappa.printer import to_str
        return to_str(self)

    def __repr__(self) -> str:
        return f"<Pair {self}>"
