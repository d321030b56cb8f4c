"""Program entry point: parse one source string and evaluate it."""

from __future__ import annotations

import logging

from owo import OwoValue
from owo.errors import OwoParseError, OwoRecursionError
from owo.evaluation.evaluator import evaluate
from owo.reader.parser import parse
from owo.types.environment import Environment

logger = logging.getLogger(__name__)


def evaluate_program(source: str, env: Environment) -> OwoValue:
    """Parse `source` as a single program and evaluate it against `env`.

    Parse failures are re-raised with a "Parse error: " prefix; evaluation
    errors propagate unchanged.
    """
    try:
        program = parse(source)
    except OwoParseError as e:
        raise OwoParseError(f"Parse error: {e}") from e
    try:
        logger.debug("parsed program: %r", program)
        return evaluate(program, env)
    except RecursionError as e:
        raise OwoRecursionError("Maximum recursion depth exceeded") from e


class Interpreter:
    """
    Keeps one root Environment alive so definitions persist across calls.
    """

    def __init__(self, env: Environment | None = None):
        self.env: Environment = env if env is not None else Environment()

    def eval(self, code: str) -> OwoValue:
        return evaluate_program(code, self.env)
