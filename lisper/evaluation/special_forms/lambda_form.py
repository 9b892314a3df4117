import logging

from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperDuplicateArgument
from lisper.evaluation.state import EvalState
from lisper.types.bind import duplicates
from lisper.types.closure import Closure
from lisper.types.symbol import Symbol

logger = logging.getLogger(__name__)


def check_formals(formals: list[SExpression]) -> None:
    repeated = duplicates(formals)
    if repeated:
        raise LisperDuplicateArgument(repeated)


def lambda_shape(tail: list[SExpression]) -> bool:
    return bool(tail) and isinstance(tail[0], (list, Symbol))


def lambda_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (x y) body...)  fixed arity
    (lambda args body...)   variadic, args receives the whole argument list
    """
    params, *body = tail
    if isinstance(params, list):
        check_formals(params)

    fn = Closure(params, body, state.env)
    logger.debug("lambda %s", fn)
    return fn
