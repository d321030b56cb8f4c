from owo import EvaluatorFn
from owo import SExpression, OwoValue
from owo.errors import OwoInvalidArgumentCount, OwoInvalidLambda
from owo.printer import to_string
from owo.types.environment import Environment
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> OwoValue:
    """
    (lambda (params...) (body...))
    The body is stored unevaluated and the lambda is not bound to any name.
    """
    if len(tail) != 2:
        raise OwoInvalidArgumentCount(f"Invalid number of arguments: {len(tail) + 1}")

    params_expr, body = tail
    if not isinstance(params_expr, list):
        raise OwoInvalidLambda(f"Invalid Lambda: parameters must be a list: {to_string(params_expr)}")

    params: list[str] = []
    for p in params_expr:
        if not isinstance(p, Symbol):
            raise OwoInvalidLambda(f"Invalid Lambda: parameter must be an Symbol: {to_string(p)}")
        params.append(str(p))

    if not isinstance(body, list):
        raise OwoInvalidLambda(f"Invalid Lambda: body must be a list: {to_string(body)}")

    return Lambda(params, list(body))
