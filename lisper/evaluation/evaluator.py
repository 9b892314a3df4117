"""Core evaluator for the Lisper interpreter.

Implements expression dispatch (self-evaluating values, variable lookup,
special forms, procedure application) and the top-level `evaluate` driver
that runs a whole program once.
"""

from __future__ import annotations

import logging
from typing import Mapping, Sequence

from lisper import LispValue, Primitive, SExpression
from lisper.builtin.primitives import PRIMITIVES
from lisper.config import get_strict_variadic
from lisper.errors import LisperUnknownForm
from lisper.evaluation.apply import apply
from lisper.evaluation.progn import progn
from lisper.evaluation.special_forms import SPECIAL_FORMS
from lisper.evaluation.state import EvalState
from lisper.types.closure import Closure
from lisper.types.environment import Environment
from lisper.types.pair import Pair
from lisper.types.symbol import Symbol

logger = logging.getLogger(__name__)

SELF_EVALUATING = (bool, int, float, str, Pair, Closure)


def is_self_evaluating(expr: SExpression) -> bool:
    return isinstance(expr, SELF_EVALUATING) or (isinstance(expr, list) and not expr)


def eval_expr(expr: SExpression, state: EvalState) -> LispValue:
    """
    Evaluate one expression against `state`.

    `define`/`set!` at this level replace `state.env`; everything else leaves
    it as found.
    """
    if is_self_evaluating(expr):
        return expr

    if isinstance(expr, Symbol):
        return state.env.lookup(expr)

    if isinstance(expr, list):
        head, *args = expr
        if isinstance(head, Symbol):
            # --- Special forms handling ---
            form = SPECIAL_FORMS.get(head)
            if form is not None and form.matches(args):
                return form.handler(args, state, eval_expr)

            # Bound names apply their value; unbound ones name a primitive.
            # A misshapen special form lands here too, e.g. (if) names "if".
            frame = state.env.find(head)
            fn = frame.value if frame is not None else head
            return apply(fn, args, state, eval_expr)

        return apply(eval_expr(head, state), args, state, eval_expr)

    raise LisperUnknownForm(expr)


def evaluate(
    program: Sequence[SExpression],
    primitives: Mapping[str, Primitive] | None = None,
    env: Environment | None = None,
    strict_variadic: bool | None = None,
) -> tuple[LispValue, Environment]:
    """
    Run a program's top-level forms in order and return the last value
    together with the accumulated environment.

    Starts from an empty environment unless `env` is given. The first error
    is raised as a LisperError; no environment is handed back in that case,
    so bindings made by earlier top-level forms are lost with it.
    """
    if primitives is None:
        primitives = PRIMITIVES
    if strict_variadic is None:
        strict_variadic = get_strict_variadic()

    state = EvalState(env, primitives, strict_variadic)
    logger.debug("evaluating program of %d form(s)", len(program))
    value = progn(list(program), state, eval_expr)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("program finished with %d binding(s)", len(state.env))
    return value, state.env
