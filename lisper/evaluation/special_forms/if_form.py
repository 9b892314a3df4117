from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperUnspecifiedReturn
from lisper.evaluation.state import EvalState
from lisper.types.nil import is_falsy


def if_shape(tail: list[SExpression]) -> bool:
    return len(tail) in (2, 3)


def if_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if predicate consequent [alternative])
    A one-armed if whose predicate is falsy has no value and fails.
    """
    cond = evaluate_fn(tail[0], state)
    if not is_falsy(cond):
        return evaluate_fn(tail[1], state)
    if len(tail) == 3:
        return evaluate_fn(tail[2], state)
    raise LisperUnspecifiedReturn()
