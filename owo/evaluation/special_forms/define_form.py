from owo import EvaluatorFn
from owo import SExpression, OwoValue
from owo.errors import OwoInvalidArgumentCount, OwoInvalidArgumentType
from owo.printer import to_string
from owo.types.environment import Environment
from owo.types.symbol import Symbol
from owo.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> OwoValue:
    """
    (define name value)
    Binds in the innermost environment only, overwriting any existing binding there.
    """
    if len(tail) != 2:
        raise OwoInvalidArgumentCount(f"Invalid number of arguments: {len(tail) + 1}")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise OwoInvalidArgumentType(
            f"Invalid argument. argument must be an Symbol: {to_string(name)}"
        )
    value = evaluate_fn(val_expr, env)
    env.set(name, value)
    return Void
