"""Application engine for Lisper.

Centralizes how a callable receives its (unevaluated) argument expressions:
- Closures bind their formals via lisper.types.bind and run their body in the
  captured environment, inside a scope that is dropped on return.
- A Symbol in callable position names a primitive; its arguments are
  evaluated eagerly, left to right, and the primitive gets the value list.
- Anything else cannot be applied.
"""

import logging

from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperNotApplicable, LisperUndefinedPrimitive
from lisper.evaluation.progn import progn
from lisper.evaluation.state import EvalState
from lisper.types.bind import bind_arguments
from lisper.types.closure import Closure
from lisper.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_closure(
    fn: Closure,
    args: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to argument expressions.

    Arguments are evaluated against the caller's environment; the body only
    ever sees the closure's captured environment plus its parameters, which
    is what makes scoping lexical. Definitions inside the body do not leak.
    """
    local_env = bind_arguments(fn, args, state, evaluate_fn)
    with state.local(local_env):
        return progn(fn.body, state, evaluate_fn)


def apply_primitive(
    name: Symbol,
    args: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    primitive = state.primitives.get(name.id)
    if primitive is None:
        raise LisperUndefinedPrimitive(name)
    values = [evaluate_fn(arg, state) for arg in args]
    logger.debug("primitive %s applied to %d argument(s)", name, len(values))
    return primitive(values)


def apply(
    head: Closure | Symbol | object,
    args: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Closure or a primitive name to unevaluated arguments.

    Raises LisperNotApplicable for any other value.
    """
    if isinstance(head, Closure):
        return apply_closure(head, args, state, evaluate_fn)
    elif isinstance(head, Symbol):
        return apply_primitive(head, args, state, evaluate_fn)
    else:
        raise LisperNotApplicable(head)
