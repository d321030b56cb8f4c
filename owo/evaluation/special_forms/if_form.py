from owo import EvaluatorFn
from owo import SExpression, OwoValue
from owo.errors import OwoInvalidArgumentCount, OwoInvalidConditionType
from owo.printer import to_string
from owo.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> OwoValue:
    if len(tail) != 3:
        raise OwoInvalidArgumentCount(
            f"Invalid number of arguments for condition statement : {len(tail) + 1}"
        )

    cond = evaluate_fn(tail[0], env)
    # No truthiness: only a real boolean selects a branch
    if not isinstance(cond, bool):
        raise OwoInvalidConditionType(f"Condition must be a boolean. got: {to_string(cond)}")

    if cond:
        return evaluate_fn(tail[1], env)
    return evaluate_fn(tail[2], env)
