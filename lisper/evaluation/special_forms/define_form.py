import logging

from lisper import EvaluatorFn, LispValue, SExpression
from lisper.evaluation.special_forms.lambda_form import check_formals
from lisper.evaluation.state import EvalState
from lisper.types.closure import Closure
from lisper.types.symbol import Symbol

logger = logging.getLogger(__name__)


def define_function(
    name: Symbol, formals: list[SExpression], body: list[SExpression], state: EvalState
) -> Closure:
    """Bind a named closure whose captured environment contains that same binding.

    The closure is created first and its environment filled in once the
    extended environment exists, so the body can call `name` directly.
    """
    check_formals(formals)
    fn = Closure(formals, body, name=name)
    env = state.env.define(name, fn)
    fn.env = env
    state.env = env
    logger.debug("define function %s with %d formal(s)", name, len(formals))
    return fn


def _is_variable_definition(tail: list[SExpression]) -> bool:
    return len(tail) == 2 and isinstance(tail[0], Symbol)


def _is_function_definition(tail: list[SExpression]) -> bool:
    return bool(tail) and isinstance(tail[0], list) and bool(tail[0]) and isinstance(tail[0][0], Symbol)


def define_shape(tail: list[SExpression]) -> bool:
    return _is_variable_definition(tail) or _is_function_definition(tail)


def define_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name value)          binds the value and returns it
    (define (name args...) body) binds a self-referential closure and returns it
    """
    if _is_variable_definition(tail):
        name, val_expr = tail
        value = evaluate_fn(val_expr, state)
        state.env = state.env.define(name, value)
        logger.debug("define %s", name)
        return value

    (name, *formals), *body = tail
    return define_function(name, formals, body, state)
