from lisper import EvaluatorFn, LispValue, SExpression
from lisper.evaluation.state import EvalState


def quote_shape(tail: list[SExpression]) -> bool:
    return len(tail) == 1


def quote_form(
    tail: list[SExpression], state: EvalState, evaluate_fn: EvaluatorFn
) -> LispValue:
    return tail[0]
