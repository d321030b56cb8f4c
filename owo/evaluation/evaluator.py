"""Core tree-walking evaluator for owo.

Dispatch order for a list whose head is a symbol: binary operators, then
special forms, then function application. A list with any other head is a
sequence: each element is evaluated in turn and the non-Void results are
collected into a new list.
"""

from __future__ import annotations

from owo import SExpression, OwoValue
from owo.errors import OwoUndefinedSymbol
from owo.evaluation.apply import apply
from owo.evaluation.operators import BINARY_OPERATORS, binary_operator_form
from owo.evaluation.special_forms import SPECIAL_FORMS
from owo.types.environment import Environment
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol
from owo.types.void import Void, VoidType


def evaluate(expr: SExpression, env: Environment) -> OwoValue:
    match expr:
        case [Symbol() as head, *tail]:
            if head in BINARY_OPERATORS:
                return binary_operator_form(head, tail, env, evaluate)
            if head in SPECIAL_FORMS:
                return SPECIAL_FORMS[head](tail, env, evaluate)
            return apply(head, tail, env, evaluate)

        case list():
            return evaluate_sequence(expr, env)

        case Symbol():
            value = env.get(expr)
            if value is None:
                raise OwoUndefinedSymbol(f"Undefined symbol: {expr}")
            return value

        case Lambda():
            # A bare lambda value yields no value
            return Void

    # --- Atoms (numbers, booleans, Void) return as-is ---
    return expr


def evaluate_sequence(exprs: list[SExpression], env: Environment) -> list[OwoValue]:
    results: list[OwoValue] = []
    for e in exprs:
        value = evaluate(e, env)
        if not isinstance(value, VoidType):
            results.append(value)
    return results
