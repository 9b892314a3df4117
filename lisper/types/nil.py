from __future__ import annotations


class NilType:
    """The "no useful value" marker; falsy, and distinct from () and #f."""

    _instance: NilType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


Nil = NilType()


def is_falsy(value) -> bool:
    """Nil and #f are the only false values for if/cond."""
    return value is Nil or value is False
