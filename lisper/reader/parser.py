"""
  Lisp Reader, Lexer and Parser

- Streaming, lazy parsing
- Emits the evaluator's value model directly:

    - #t / #f -> True / False
    - numbers -> int/float
    - strings -> str
    - symbols -> Symbol
    - () -> [] (the empty list)
    - lists -> Python list
    - dotted lists -> nested Pair, e.g. (a b . c) -> Pair(a, Pair(b, c))
    - 'x -> [Symbol("quote"), x]
"""

from __future__ import annotations

import re
from typing import Iterable, Iterator, Optional

from lisper import SExpression
from lisper.errors import LisperSyntaxError
from lisper.types.pair import Pair
from lisper.types.symbol import Symbol


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<quote>')"  # 'x
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<symbol>[^\s()\'";]+)'  # fallback: symbols, numbers, booleans
    r")",
    re.DOTALL,
)

ESCAPES: dict[str, str] = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
    "\\": "\\",
}

INT_RE = re.compile(r"[+-]?\d+")

QUOTE = Symbol("quote")
DOT = "."


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples; comments are dropped."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m or m.end() == pos:
            raise LisperSyntaxError(f"Unexpected char at {pos}: {source[pos]!r}")
        pos = m.end()
        for nm in TOKEN_RE.groupindex:
            if m.group(nm) is not None:
                if nm != "comment":
                    yield nm, m.group(nm)
                break


def unescape(literal: str) -> str:
    """Strip the surrounding quotes and resolve backslash escapes."""
    return re.sub(r"\\(.)", lambda m: ESCAPES.get(m.group(1), m.group(1)), literal[1:-1], flags=re.DOTALL)


def atom(token: str) -> SExpression:
    if token == "#t":
        return True
    if token == "#f":
        return False
    if INT_RE.fullmatch(token):
        return int(token)
    # float() would otherwise accept names such as nan and inf
    if not any(c.isdigit() for c in token):
        return Symbol(token)
    try:
        return float(token)
    except ValueError:
        return Symbol(token)


class TokenStream:
    def __init__(self, token_iter: Iterable[tuple[str, str]]):
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
        """Parse the next expression, or return None at end of input."""
        tok_type, tok_val = self.peek()
        if tok_type is None:
            return None
        self.advance()

        if tok_type == "symbol":
            if tok_val == DOT:
                raise LisperSyntaxError("Unexpected '.' outside a list")
            return atom(tok_val)

        if tok_type == "string":
            return unescape(tok_val)

        if tok_type == "quote":
            expr = self.parse_expr()
            if expr is None:
                raise LisperSyntaxError("Expected an expression after quote")
            return [QUOTE, expr]

        if tok_type == "rparen":
            raise LisperSyntaxError("Unexpected ')'")

        # List or dotted list
        items: list[SExpression] = []
        while True:
            nxt_type, nxt_val = self.peek()
            if nxt_type is None:
                raise LisperSyntaxError("Unmatched '('")
            if nxt_type == "rparen":
                self.advance()
                return items
            if nxt_type == "symbol" and nxt_val == DOT:
                self.advance()
                if not items:
                    raise LisperSyntaxError("Expected an expression before '.'")
                cdr_expr = self.parse_expr()
                if cdr_expr is None or self.peek()[0] != "rparen":
                    raise LisperSyntaxError("Expected ')' after dotted cdr")
                self.advance()
                return dotted(items, cdr_expr)
            items.append(self.parse_expr())


def dotted(items: list[SExpression], tail: SExpression) -> Pair:
    """Fold `(a b . c)` into Pair(a, Pair(b, c))."""
    result = tail
    for item in reversed(items):
        result = Pair(item, result)
    return result


def read(source: str) -> list[SExpression]:
    """Parse every top-level expression in `source`."""
    stream = TokenStream(lex(source))
    program: list[SExpression] = []
    while (expr := stream.parse_expr()) is not None:
        program.append(expr)
    return program
