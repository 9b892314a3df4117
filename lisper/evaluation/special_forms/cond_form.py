from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperSyntaxError
from lisper.evaluation.state import EvalState
from lisper.types.nil import Nil, is_falsy
from lisper.types.symbol import Symbol

ELSE = Symbol("else")


def cond_shape(tail: list[SExpression]) -> bool:
    # Clause shapes are checked lazily, as they are reached
    return True


def cond_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (cond (test value) ... [(else value)])
    Clauses are tried left to right; only clauses actually reached are checked
    for shape. Nil when nothing matches.
    """
    for clause in tail:
        if not (isinstance(clause, list) and len(clause) == 2):
            raise LisperSyntaxError(f"Expected a (test value) clause in cond; got {clause!r} instead")
        test, value = clause
        if test == ELSE or not is_falsy(evaluate_fn(test, state)):
            return evaluate_fn(value, state)
    return Nil
