from lisper import EvaluatorFn, LispValue, SExpression
from lisper.evaluation.state import EvalState
from lisper.types.nil import Nil


def progn(
    body: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate forms in order under one state thread and return the last value.

    An empty body is Nil. Every form is evaluated for effect before moving
    on, so a failure part way through aborts the rest.
    """
    result: LispValue = Nil
    for form in body:
        result = evaluate_fn(form, state)
    return result
