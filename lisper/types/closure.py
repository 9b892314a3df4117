"""Closure representation for Lisper."""

from __future__ import annotations

from io import StringIO

from lisper import SExpression
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol


class Closure:
    """A first-class procedure: formal parameters, body forms and captured env.

    `formals` is either a list of Symbols (fixed arity) or a single Symbol
    (variadic: the symbol receives the whole argument list).
    """

    __slots__ = ("formals", "body", "env", "name")

    def __init__(
        self,
        formals: list[SExpression] | Symbol,
        body: list[SExpression],
        env: Environment | None = None,
        name: Symbol | None = None,
    ):
        self.formals = formals
        self.body: list[SExpression] = list(body)
        # Named definitions install env after construction, once the
        # environment holding the closure's own binding exists.
        self.env: Environment | None = env
        self.name: Symbol | None = name

    @property
    def is_variadic(self) -> bool:
        return isinstance(self.formals, Symbol)

    @property
    def arity(self) -> int | None:
        """Number of required arguments, or None for a variadic closure."""
        return None if self.is_variadic else len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("#<procedure")
            if self.name is not None:
                buffer.write(f" {self.name}")
            if self.is_variadic:
                buffer.write(f" {self.formals}")
            else:
                buffer.write(" (")
                buffer.write(" ".join(str(f) for f in self.formals))
                buffer.write(")")
            buffer.write(">")
            return buffer.getvalue()

    def __repr__(self) -> str:
        # Never include env: a named closure's env contains the closure itself
        return str(self)
