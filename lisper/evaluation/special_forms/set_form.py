import logging

from lisper import EvaluatorFn, LispValue, SExpression
from lisper.evaluation.state import EvalState
from lisper.types.nil import Nil
from lisper.types.symbol import Symbol

logger = logging.getLogger(__name__)


def set_shape(tail: list[SExpression]) -> bool:
    return len(tail) == 2 and isinstance(tail[0], Symbol)


def set_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (set! var value)
    Only rebinds a name that is already visible; the new binding shadows the
    old one in the current scope.
    """
    var_sym, val_expr = tail

    evaluate_fn(var_sym, state)  # raises LisperUndefinedVariable when unbound
    value = evaluate_fn(val_expr, state)
    state.env = state.env.define(var_sym, value)
    logger.debug("set! %s", var_sym)
    return Nil
