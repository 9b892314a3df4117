from __future__ import annotations

from lisper import LispValue

class Pair:
    """A dotted cons cell. Self-evaluating: never run as code."""

    __slots__ = ("head", "tail")

    def __init__(self, head: LispValue, tail: LispValue):
        self.head = head
        self.tail = tail

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Pair)
            and type(self.head) is type(other.head)
            and self.head == other.head
            and type(self.tail) is type(other.tail)
            and self.tail == other.tail
        )

    def __repr__(self) -> str:
        return f"Pair({self.head!r}, {self.tail!r})"
