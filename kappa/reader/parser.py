"""
  Kappa Reader: Lexer and Parser

- Streaming, lazy parsing without recursion
- Emits Python primitives for forms:

    - lists        -> Python list (the empty list `()` -> [])
    - symbols      -> Symbol
    - strings      -> str
    - integers     -> int
    - #t / #f      -> True / False
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from kappa import SExpression
from kappa.errors import KappaSyntaxError
from kappa.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<boolean>#[tf](?![^\s()\";]))"  # #t and #f
    r'|(?P<symbol>[^\s()\'",;#][^\s()\'",;]*)'  # integers and symbols
    r")",
    re.DOTALL,
)

INTEGER_RE = re.compile(r"[+-]?\d+")


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise KappaSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        if m.group("comment"):
            continue
        for name in ("lparen", "rparen", "string", "boolean", "symbol"):
            if m.group(name):
                yield name, m.group(name)
                break


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> SExpression:
        """Parse one expression, or return None at end of input.

        Open lists live on an explicit stack, so nesting depth is not bounded
        by the Python call stack.
        """
        open_lists: list[list[SExpression]] = []
        while True:
            tok_type, tok_val = self.advance()
            if tok_type is None:
                if open_lists:
                    raise KappaSyntaxError("Unmatched '('")
                return None

            if tok_type == "lparen":
                open_lists.append([])
                continue
            if tok_type == "rparen":
                if not open_lists:
                    raise KappaSyntaxError("Unexpected ')'")
                expr = open_lists.pop()
            else:
                expr = self._parse_atom(tok_type, tok_val)

            if not open_lists:
                return expr
            open_lists[-1].append(expr)

    @staticmethod
    def _parse_atom(tok_type: str, tok_val: str) -> SExpression:
        if tok_type == "symbol":
            if INTEGER_RE.fullmatch(tok_val):
                return int(tok_val)
            return Symbol(tok_val)

        if tok_type == "boolean":
            return tok_val == "#t"

        if tok_type == "string":
            try:
                return ast.literal_eval(tok_val)
            except (SyntaxError, ValueError) as ex:
                raise KappaSyntaxError(f"Invalid string literal {tok_val}: {ex}") from ex

        raise KappaSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def parse_all(self) -> Iterator[SExpression]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read(source: str) -> list[SExpression]:
    """Parse every top-level form in `source`."""
    return list(TokenStream(lex(source)).parse_all())
