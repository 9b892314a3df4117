from lisper import EvaluatorFn, LispValue, SExpression
from lisper.errors import LisperSyntaxError
from lisper.evaluation.progn import progn
from lisper.evaluation.state import EvalState
from lisper.types.symbol import Symbol


def let_bindings(
    alist: SExpression, state: EvalState, evaluate_fn: EvaluatorFn
) -> list[tuple[Symbol, LispValue]]:
    """Evaluate `((a 1) (b (+ 1 1)))` into `[(a, 1), (b, 2)]`.

    Every right-hand side is evaluated in the current state before any name is
    bound, so bindings cannot see each other.
    """
    if not isinstance(alist, list):
        raise LisperSyntaxError("Second argument to let should be an alist")
    bindings = []
    for entry in alist:
        if not (isinstance(entry, list) and len(entry) == 2 and isinstance(entry[0], Symbol)):
            raise LisperSyntaxError(f"Malformed alist entry passed to let: {entry!r}")
        name, expr = entry
        bindings.append((name, evaluate_fn(expr, state)))
    return bindings


def let_shape(tail: list[SExpression]) -> bool:
    return bool(tail)


def let_form(
    tail: list[SExpression],
    state: EvalState,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let ((name value) ...) body...)
    Definitions made inside the body are dropped with the scope.
    """
    alist, *body = tail
    bindings = let_bindings(alist, state, evaluate_fn)
    with state.local(state.env.extend(bindings)):
        return progn(body, state, evaluate_fn)
