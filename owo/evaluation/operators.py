"""Binary integer operators.

Arithmetic (+ - * /) produces numbers; the owo comparison family produces
booleans. Every operator takes exactly two number operands.
"""

from __future__ import annotations

import operator
from typing import Callable

from owo import EvaluatorFn, SExpression, OwoValue, INT64_MIN, INT64_MAX
from owo.errors import (
    OwoInvalidArgumentCount,
    OwoInvalidArgumentType,
    OwoInvalidOperator,
    OwoDivisionByZero,
    OwoIntegerOverflow,
)
from owo.printer import to_string
from owo.types.environment import Environment
from owo.types.symbol import Symbol


def _checked(name: str, fn: Callable[[int, int], int]) -> Callable[[int, int], int]:
    def wrapper(a: int, b: int) -> int:
        result = fn(a, b)
        if result < INT64_MIN or result > INT64_MAX:
            raise OwoIntegerOverflow(f"Integer overflow: {a} {name} {b}")
        return result
    return wrapper


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    if b == 0:
        raise OwoDivisionByZero(f"Division by zero: {a} / {b}")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


BINARY_OPERATORS: dict[Symbol, Callable[[int, int], OwoValue]] = {
    Symbol("+"): _checked("+", operator.add),
    Symbol("-"): _checked("-", operator.sub),
    Symbol("*"): _checked("*", operator.mul),
    Symbol("/"): _checked("/", truncating_div),
    Symbol("owo"): operator.eq,
    Symbol("uwu"): operator.ne,
    Symbol("Owo"): operator.ge,
    Symbol("owO"): operator.le,
    Symbol("O_o"): operator.gt,
    Symbol("o_O"): operator.lt,
}


def is_number(value: OwoValue) -> bool:
    # bool is an int subclass but is not a Number
    return isinstance(value, int) and not isinstance(value, bool)


def check_number(value: OwoValue) -> int:
    if not is_number(value):
        raise OwoInvalidArgumentType(
            f"Invalid argument. argument must be an Number: {to_string(value)}"
        )
    return value


def binary_operator_form(
    op: SExpression,
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> OwoValue:
    """
    (op a b)
    Both operands are evaluated before either is type checked.
    """
    if len(tail) != 2:
        raise OwoInvalidArgumentCount(f"Invalid number of arguments: {len(tail) + 1}")

    left = evaluate_fn(tail[0], env)
    right = evaluate_fn(tail[1], env)
    a = check_number(left)
    b = check_number(right)

    fn = BINARY_OPERATORS.get(op) if isinstance(op, Symbol) else None
    if fn is None:
        raise OwoInvalidOperator(f"Invalid operator: {to_string(op)}")
    return fn(a, b)
