import pytest

from lisper.builtin.primitives import PRIMITIVES
from lisper.evaluation.evaluator import evaluate
from lisper.evaluation.state import EvalState
from lisper.interpreter import Interpreter
from lisper.reader.parser import read


@pytest.fixture
def state():
    """Fresh evaluation state with the default primitive table."""
    return EvalState(primitives=PRIMITIVES)


@pytest.fixture
def run():
    """Read and evaluate a whole program; returns (value, env).

    Variadic binding mode is pinned to the default so LISPER_STRICT_VARIADIC
    in the caller's shell cannot change results.
    """
    def _run(source: str, **kwargs):
        kwargs.setdefault("strict_variadic", False)
        return evaluate(read(source), **kwargs)
    return _run


@pytest.fixture
def value_of(run):
    """Read and evaluate a whole program; returns only the final value."""
    def _value_of(source: str, **kwargs):
        value, _ = run(source, **kwargs)
        return value
    return _value_of


@pytest.fixture
def interp():
    return Interpreter(strict_variadic=False)
