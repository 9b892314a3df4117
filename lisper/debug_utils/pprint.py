from lisper import LispValue
from lisper.types.nil import NilType
from lisper.types.pair import Pair
from lisper.types.symbol import Symbol

ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\t": "\\t", "\r": "\\r"}


def _string_literal(s: str) -> str:
    return '"' + "".join(ESCAPES.get(ch, ch) for ch in s) + '"'


def to_lisp_string(obj: LispValue) -> str:
    """Render a value the way the reader would accept it back (closures aside)."""
    if obj is True:
        return "#t"
    if obj is False:
        return "#f"
    if isinstance(obj, NilType):
        return "nil"
    if isinstance(obj, Symbol):
        return str(obj)
    if isinstance(obj, str):
        return _string_literal(obj)
    if isinstance(obj, list):
        return "(" + " ".join(to_lisp_string(x) for x in obj) + ")"
    if isinstance(obj, Pair):
        parts = []
        while isinstance(obj, Pair):
            parts.append(to_lisp_string(obj.head))
            obj = obj.tail
        # A Pair chain ending in a list prints as a proper list
        if isinstance(obj, list):
            return "(" + " ".join(parts + [to_lisp_string(x) for x in obj]) + ")"
        return "(" + " ".join(parts) + " . " + to_lisp_string(obj) + ")"
    # Numbers, and closures as #<procedure ...>
    return str(obj)
