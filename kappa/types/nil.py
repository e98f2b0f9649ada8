from __future__ import annotations


class NilType:
    """The empty list and list terminator. `Nil` is the only instance."""

    __slots__ = ()
    _instance: NilType | None = None

    def __new__(cls) -> NilType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Nil"
    def __str__(self): return "()"
    def __iter__(self): return iter(())
    def __len__(self): return 0


class UndefType:
    """Placeholder held by a `define` slot until its initializer finishes.

    Seeing it anywhere else means a name was read before it was ready.
    """

    __slots__ = ()
    _instance: UndefType | None = None

    def __new__(cls) -> UndefType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Undef"
    def __str__(self): return "<undefined>"


Nil = NilType()
Undef = UndefType()
