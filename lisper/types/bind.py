from __future__ import annotations

from typing import TYPE_CHECKING

from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperArityError, LisperSyntaxError
from lisper.types.closure import Closure
from lisper.types.environment import Environment
from lisper.types.symbol import Symbol

if TYPE_CHECKING:
    from lisper.evaluation.state import EvalState


def duplicates(formals: list[SExpression]) -> list[SExpression]:
    """Return every repeated occurrence after the first, in order.

    Formals only repeat when both type and value agree, so `1` and `#t` are
    distinct.

    >>> duplicates([Symbol("a"), Symbol("b"), Symbol("a")])
    [Symbol('a')]
    """
    seen: list[SExpression] = []
    repeated: list[SExpression] = []
    for f in formals:
        if any(type(s) is type(f) and s == f for s in seen):
            repeated.append(f)
        else:
            seen.append(f)
    return repeated


def bind_arguments(
    fn: Closure,
    arg_exprs: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> Environment:
    """
    Build the environment a closure body runs in.

    Fixed formals: the argument count must match exactly, then each argument
    expression is evaluated in the caller's state (left to right) and bound
    positionally. Variadic formal: bound to the list of argument expressions
    as written, or to their values when `state.strict_variadic` is set.

    The result is `fn.env` extended by the new bindings; the caller's
    environment takes no part in it.
    """
    if fn.is_variadic:
        if state.strict_variadic:
            rest: list[LispValue] = [evaluate_fn(a, state) for a in arg_exprs]
        else:
            rest = list(arg_exprs)
        return fn.env.extend([(fn.formals, rest)])

    formals = fn.formals
    if len(formals) != len(arg_exprs):
        raise LisperArityError(len(formals), len(arg_exprs))

    bindings: list[tuple[Symbol, LispValue]] = []
    for formal, expr in zip(formals, arg_exprs):
        if not isinstance(formal, Symbol):
            raise LisperSyntaxError(f"Malformed function argument {formal!r}")
        bindings.append((formal, evaluate_fn(expr, state)))
    return fn.env.extend(bindings)
