"""Runtime environment for Lisper.

The Environment is a persistent association list: a chain of single-binding
frames, most recent first. Extending an environment returns a new front frame
and never touches the frames behind it, so any number of scopes (and closures)
can share the same tail. Redefinition and `set!` shadow an older binding
instead of replacing it; lookup simply stops at the first match.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Iterator, Optional

from lisper import LispValue
from lisper.errors import LisperSyntaxError, LisperUndefinedVariable
from lisper.types.nil import Nil
from lisper.types.symbol import Symbol


class Environment:
    """Immutable chain of (Symbol, value) bindings with O(1) extension."""

    __slots__ = ("name", "value", "outer")

    def __init__(
        self,
        name: Optional[Symbol] = None,
        value: LispValue = Nil,
        outer: Optional[Environment] = None,
    ):
        # The root frame (name is None) carries no binding
        self.name: Symbol | None = name
        self.value: LispValue = value
        self.outer: Environment | None = outer

    @property
    def is_empty(self) -> bool:
        return self.name is None and self.outer is None

    def define(self, name: Symbol, value: LispValue) -> Environment:
        """Return a new environment with `name` bound to `value` in front.

        Raises LisperSyntaxError if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise LisperSyntaxError(f"Cannot bind {name!r}: not a symbol")
        return Environment(name, value, self)

    def extend(self, bindings: Iterable[tuple[Symbol, LispValue]]) -> Environment:
        """Prepend a binding list, keeping its order: the first pair ends up frontmost."""
        env = self
        for name, value in reversed(list(bindings)):
            env = env.define(name, value)
        return env

    def find(self, name: Symbol) -> Optional[Environment]:
        """Find the frontmost frame binding `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if env.name == name:
                return env
            env = env.outer
        return None

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises LisperUndefinedVariable if not found.
        """
        frame = self.find(name)
        if frame is None:
            raise LisperUndefinedVariable(name)
        return frame.value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, Symbol) and self.find(name) is not None

    def __iter__(self) -> Iterator[tuple[Symbol, LispValue]]:
        """Yield every binding front to back, shadowed ones included."""
        env: Optional[Environment] = self
        while env is not None:
            if env.name is not None:
                yield env.name, env.value
            env = env.outer

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def as_dict(self) -> dict[Symbol, LispValue]:
        """The bindings visible to lookup, i.e. the first entry for each name."""
        visible: dict[Symbol, LispValue] = {}
        for name, value in self:
            visible.setdefault(name, value)
        return visible

    def __str__(self) -> str:
        """Human-readable view of the visible bindings."""
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.as_dict().items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Full chain, shadowed bindings included, for debugging."""
        with StringIO() as buffer:
            buffer.write("<Environment ")
            buffer.write(" -> ".join(f"{k}={v!r}" for k, v in self) or "empty")
            buffer.write(">")
            return buffer.getvalue()
