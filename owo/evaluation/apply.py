"""Function application for owo.

A call `(name arg1 arg2 ...)` looks `name` up in the caller's environment,
evaluates one argument per parameter against that same environment and runs
the lambda body in a fresh child of it. Arguments beyond the parameter count
are never evaluated.
"""

from __future__ import annotations

import logging

from owo import OwoValue, EvaluatorFn, SExpression
from owo.errors import OwoUndefinedFunction, OwoInvalidFunction
from owo.types.environment import Environment
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply(
    name: Symbol,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> OwoValue:
    fn = env.get(name)
    if fn is None:
        raise OwoUndefinedFunction(f"Undefined function: {name}")
    if not isinstance(fn, Lambda):
        raise OwoInvalidFunction(f"Invalid function: {name}")

    args = [evaluate_fn(arg, env) for arg in tail[:len(fn.params)]]
    new_env = fn.extend_env(args, env)
    logger.debug("calling %s with %d argument(s)", name, len(args))
    return evaluate_fn(fn.body, new_env)
