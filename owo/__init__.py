# Core type aliases for owo's data model.
# Plain Python values are used for both code (forms) and runtime values:
# int for numbers, bool for booleans, list for lists, plus the Symbol, Void and
# Lambda types under owo.types.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - OwoValue:    use in evaluator/runtime code to denote evaluated values.
# Both resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
OwoValue = Any
# Forms alias (used interchangeably with OwoValue)
SExpression = OwoValue

# Evaluator function type, passed into special forms and the call engine
EvaluatorFn = Callable[..., OwoValue]

# Signed 64-bit bounds for Number values
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
