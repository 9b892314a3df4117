from __future__ import annotations

import logging
import sys
from typing import Mapping

from lisper import LispValue, Primitive
from lisper.builtin.primitives import PRIMITIVES
from lisper.config import get_log_level, get_recursion_limit, get_strict_variadic
from lisper.debug_utils.pprint import to_lisp_string
from lisper.errors import LisperError
from lisper.evaluation.evaluator import evaluate
from lisper.reader.parser import read
from lisper.types.environment import Environment
from lisper.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates Lisper source, keeping the environment across calls.

    Each call to `eval` is one program run: on success its final environment
    becomes the starting point for the next call; on failure the error is
    raised and the environment stays as it was before the call.
    """

    def __init__(
        self,
        primitives: Mapping[str, Primitive] | None = None,
        *,
        strict_variadic: bool | None = None,
    ):
        self.primitives: Mapping[str, Primitive] = dict(PRIMITIVES) if primitives is None else primitives
        self.strict_variadic = get_strict_variadic() if strict_variadic is None else strict_variadic
        self.env: Environment = Environment()

    def eval(self, code: str) -> LispValue:
        program = read(code)
        if not program:
            return Nil
        value, env = evaluate(program, self.primitives, self.env, self.strict_variadic)
        self.env = env
        return value

    def reset(self) -> None:
        logger.info("Discarding %d binding(s)", len(self.env))
        self.env = Environment()


def main() -> None:
    logging.basicConfig(level=get_log_level())
    sys.setrecursionlimit(max(sys.getrecursionlimit(), get_recursion_limit()))

    interp = Interpreter()
    while True:
        try:
            line = input("lisper> ")
        except EOFError:
            print()
            break
        if not line.strip():
            continue
        try:
            print(to_lisp_string(interp.eval(line)))
        except LisperError as e:
            logger.debug("evaluation failed", exc_info=True)
            print(f"error: {e}")


if __name__ == "__main__":
    main()
