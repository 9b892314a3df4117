"""Primitive procedures for the Lisper runtime.

Each primitive takes the list of already-evaluated arguments and returns a
value. Primitives are not bound in the environment: the applier looks a head
symbol up here only when no binding of that name is visible. `PRIMITIVES` is
the default table handed to `evaluate`.
"""
from __future__ import annotations

from lisper import LispValue, Primitive
from lisper.errors import LisperArityError, LisperTypeError
from lisper.types.closure import Closure
from lisper.types.nil import Nil, is_falsy
from lisper.types.pair import Pair
from lisper.types.symbol import Symbol


def _is_number(x: LispValue) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def _numbers(name: str, args: list[LispValue]) -> list[LispValue]:
    if not all(_is_number(x) for x in args):
        raise LisperTypeError(f"All arguments to {name} must be numbers")
    return args


def _exactly(name: str, n: int, args: list[LispValue]) -> None:
    if len(args) != n:
        raise LisperArityError(n, len(args), f"{name} requires exactly {n} argument(s); got {len(args)}")


def is_equal(a, b) -> bool:
    """Deep equality for Lisp values, with element-wise comparison for lists and pairs."""
    if a is b:
        return True
    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, Pair) and isinstance(b, Pair):
        return is_equal(a.head, b.head) and is_equal(a.tail, b.tail)
    # #t is not 1, and 1 is not "1"
    if type(a) != type(b) and not (_is_number(a) and _is_number(b)):
        return False
    return a == b


# -------------------------------
# Arithmetic
# -------------------------------
def add(args: list[LispValue]) -> LispValue:
    """Return the numeric sum of all arguments."""
    return sum(_numbers("+", args))


def sub(args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if not args:
        raise LisperArityError(1, 0, "- requires at least 1 argument")
    _numbers("-", args)
    if len(args) == 1:
        return -args[0]
    result = args[0]
    for x in args[1:]:
        result -= x
    return result


def mul(args: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    result = 1
    for x in _numbers("*", args):
        result *= x
    return result


def div(args: list[LispValue]) -> LispValue:
    """Divide left-to-right; integer operands that divide evenly stay integers."""
    if not args:
        raise LisperArityError(1, 0, "/ requires at least 1 argument")
    _numbers("/", args)
    operands = [1, *args] if len(args) == 1 else args
    result = operands[0]
    for x in operands[1:]:
        if x == 0:
            raise LisperTypeError("Division by zero")
        if isinstance(result, int) and isinstance(x, int) and result % x == 0:
            result //= x
        else:
            result /= x
    return result


def mod(args: list[LispValue]) -> LispValue:
    """(mod n d) => n % d. Exactly 2 integer arguments."""
    _exactly("mod", 2, args)
    n, d = args
    if not all(isinstance(x, int) and not isinstance(x, bool) for x in args):
        raise LisperTypeError("All arguments to mod must be integers")
    if d == 0:
        raise LisperTypeError("Modulo by zero")
    return n % d


# -------------------------------
# Comparison and logic
# -------------------------------
def num_eq(args: list[LispValue]) -> bool:
    """Chainable numeric equality."""
    _numbers("=", args)
    return all(a == b for a, b in zip(args, args[1:]))


def lt(args: list[LispValue]) -> bool:
    """Chainable less-than: #t if a0 < a1 < a2 ... holds for all pairs."""
    _numbers("<", args)
    return all(a < b for a, b in zip(args, args[1:]))


def lte(args: list[LispValue]) -> bool:
    _numbers("<=", args)
    return all(a <= b for a, b in zip(args, args[1:]))


def gt(args: list[LispValue]) -> bool:
    _numbers(">", args)
    return all(a > b for a, b in zip(args, args[1:]))


def gte(args: list[LispValue]) -> bool:
    _numbers(">=", args)
    return all(a >= b for a, b in zip(args, args[1:]))


def eq(args: list[LispValue]) -> bool:
    """#t if all arguments are structurally equal."""
    if len(args) <= 1:
        return True
    first = args[0]
    return all(is_equal(first, other) for other in args[1:])


def logical_not(args: list[LispValue]) -> bool:
    """Logical NOT; only Nil and #f are false."""
    _exactly("not", 1, args)
    return is_falsy(args[0])


# -------------------------------
# Lists and pairs
# -------------------------------
def cons(args: list[LispValue]) -> LispValue:
    """Prepend head to a list, or build a dotted Pair when tail is not a list."""
    _exactly("cons", 2, args)
    head, tail = args
    if isinstance(tail, list):
        return [head, *tail]
    return Pair(head, tail)


def car(args: list[LispValue]) -> LispValue:
    """First element of a non-empty list, or head of a Pair."""
    _exactly("car", 1, args)
    xs = args[0]
    if isinstance(xs, Pair):
        return xs.head
    if isinstance(xs, list) and xs:
        return xs[0]
    raise LisperTypeError(f"car expects a pair or non-empty list; got {xs!r}")


def cdr(args: list[LispValue]) -> LispValue:
    """Rest of a non-empty list, or tail of a Pair."""
    _exactly("cdr", 1, args)
    xs = args[0]
    if isinstance(xs, Pair):
        return xs.tail
    if isinstance(xs, list) and xs:
        return xs[1:]
    raise LisperTypeError(f"cdr expects a pair or non-empty list; got {xs!r}")


def list_builtin(args: list[LispValue]) -> list[LispValue]:
    return list(args)


def length(args: list[LispValue]) -> int:
    _exactly("length", 1, args)
    if not isinstance(args[0], list):
        raise LisperTypeError(f"length expects a list; got {args[0]!r}")
    return len(args[0])


def append(args: list[LispValue]) -> list[LispValue]:
    result: list[LispValue] = []
    for xs in args:
        if not isinstance(xs, list):
            raise LisperTypeError(f"append expects lists; got {xs!r}")
        result.extend(xs)
    return result


def string_append(args: list[LispValue]) -> str:
    if not all(isinstance(s, str) for s in args):
        raise LisperTypeError("All arguments to string-append must be strings")
    return "".join(args)


# -------------------------------
# Predicates
# -------------------------------
def _predicate(test) -> Primitive:
    def primitive(args: list[LispValue]) -> bool:
        if len(args) != 1:
            raise LisperArityError(1, len(args))
        return test(args[0])
    return primitive


PRIMITIVES: dict[str, Primitive] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "mod": mod,
    "=": num_eq,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "eq": eq,
    "eq?": eq,
    "not": logical_not,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "list": list_builtin,
    "length": length,
    "append": append,
    "string-append": string_append,
    "null?": _predicate(lambda x: x == [] or x is Nil),
    "pair?": _predicate(lambda x: isinstance(x, Pair) or (isinstance(x, list) and bool(x))),
    "number?": _predicate(_is_number),
    "string?": _predicate(lambda x: isinstance(x, str)),
    "symbol?": _predicate(lambda x: isinstance(x, Symbol)),
    "boolean?": _predicate(lambda x: isinstance(x, bool)),
    "procedure?": _predicate(lambda x: isinstance(x, Closure)),
}
