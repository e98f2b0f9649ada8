from __future__ import annotations

from typing import Callable

from kappa import LispValue


class TailCall:
    """One trampoline work item: call `fn` with `arg` on the next bounce.

    Evaluation functions return a TailCall instead of calling a continuation
    directly, so the Python stack unwinds back to the trampoline after every
    step.
    """

    __slots__ = ("fn", "arg")

    def __init__(self, fn: Callable[[LispValue], TailCall], arg: LispValue):
        self.fn = fn
        self.arg = arg

    def __repr__(self):
        return f"TailCall({self.fn!r}, {self.arg!r})"
