"""Evaluation state threaded through eval, apply and progn.

An EvalState carries the single environment in flight plus the read-only
context a program runs against (primitive table, variadic binding mode).
Special forms that bind at the current scope (`define`, `set!`) replace
`state.env`; scopes that must not leak (`let` bodies, closure bodies) run
inside `state.local(...)`, which restores the caller's environment on the way
out, value or exception.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Mapping

from lisper import Primitive
from lisper.types.environment import Environment


class EvalState:
    __slots__ = ("env", "primitives", "strict_variadic")

    def __init__(
        self,
        env: Environment | None = None,
        primitives: Mapping[str, Primitive] | None = None,
        strict_variadic: bool = False,
    ):
        self.env: Environment = env if env is not None else Environment()
        self.primitives: Mapping[str, Primitive] = primitives if primitives is not None else {}
        self.strict_variadic = strict_variadic

    @contextmanager
    def local(self, env: Environment) -> Iterator[EvalState]:
        """Run a block against `env`, then put the caller's environment back."""
        saved = self.env
        self.env = env
        try:
            yield self
        finally:
            self.env = saved

    def __repr__(self) -> str:
        return f"EvalState(env={self.env!r}, primitives={len(self.primitives)})"
