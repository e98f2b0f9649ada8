"""Runtime environment for Kappa.

An Environment is one lexical frame: an ordered mapping from Symbols to
write-once Slots, plus an `outer` link. `define` reserves a slot before its
initializer runs, so the name is visible (holding Undef) while the value is
still being computed.
"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Optional

from kappa import LispValue
from kappa.config import get_undefined_policy
from kappa.errors import KappaInvalidSymbol, KappaNameError, KappaUnboundSymbol
from kappa.types.nil import Undef
from kappa.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Slot:
    """A binding cell. Holds Undef until filled, then never changes."""

    __slots__ = ("value", "filled")

    def __init__(self):
        self.value: LispValue = Undef
        self.filled = False

    def fill(self, value: LispValue) -> None:
        if self.filled:
            raise KappaNameError("binding is already initialized")
        self.value = value
        self.filled = True

    def __repr__(self):
        return f"Slot({self.value!r})" if self.filled else "Slot(<pending>)"


class Environment:
    """Hierarchical mapping from Symbols to Slots."""

    __slots__ = ("slots", "outer", "strict_undefined")

    def __init__(self, outer: Optional[Environment] = None, strict_undefined: bool | None = None):
        self.slots: dict[Symbol, Slot] = {}
        self.outer: Environment | None = outer
        # Child frames share the root's Undef policy
        if strict_undefined is None:
            if outer is not None:
                strict_undefined = outer.strict_undefined
            else:
                strict_undefined = get_undefined_policy() == "error"
        self.strict_undefined: bool = strict_undefined

    def reserve(self, name: Symbol) -> Slot:
        """Create an unfilled slot for `name` in this frame.

        Raises KappaInvalidSymbol if `name` is not a Symbol and KappaNameError
        if this frame already binds it.
        """
        if not isinstance(name, Symbol):
            raise KappaInvalidSymbol(f"Cannot define {name!r}: not a symbol")
        if name in self.slots:
            raise KappaNameError(f"{name} is already defined in this scope")
        slot = Slot()
        self.slots[name] = slot
        return slot

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this frame."""
        self.reserve(name).fill(value)

    def release_pending(self) -> list[Symbol]:
        """Drop the slots in this frame whose initializer never finished.

        Called after an evaluation aborts, so a failed define leaves the
        name unbound rather than stuck at Undef.
        """
        pending = [name for name, slot in self.slots.items() if not slot.filled]
        for name in pending:
            del self.slots[name]
        if pending:
            logger.debug("released unfinished definitions: %s", " ".join(map(str, pending)))
        return pending

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the nearest frame in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.slots:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Return the value bound to `name`.

        A slot whose initializer has not finished yields Undef, or raises
        KappaUnboundSymbol when the strict Undef policy is on.
        """
        env = self.find(name)
        if env is None:
            raise KappaUnboundSymbol(f"Cannot lookup unbound symbol {name}")
        slot = env.slots[name]
        if not slot.filled:
            if self.strict_undefined:
                raise KappaUnboundSymbol(f"{name} is used before its definition completes")
            logger.warning("%s read before its definition completed", name)
        return slot.value

    def _write_slots(self, buffer: StringIO) -> None:
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.slots.items()))
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_slots(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment chain: ")
            env: Optional[Environment] = self
            first = True
            while env is not None:
                if not first:
                    buffer.write(" -> ")
                env._write_slots(buffer)
                first = False
                env = env.outer
            buffer.write(">")
            return buffer.getvalue()
