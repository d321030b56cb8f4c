"""Lambda function representation and argument binding for owo."""

from __future__ import annotations

from owo import SExpression, OwoValue
from owo.types.environment import Environment
from owo.errors import OwoInvalidArgumentCount


class Lambda:
    """A function value: ordered parameter names and an unevaluated body.

    No environment is captured. The body runs in a child of whichever
    environment the call happens in.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[str], body: list[SExpression]):
        self.params: list[str] = params
        self.body: list[SExpression] = body

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, Lambda)
            and self.params == other.params
            and self.body == other.body
        )

    __hash__ = None

    def __str__(self) -> str:
        from owo.printer import to_string
        return to_string(self)

    def __repr__(self) -> str:
        return f"Lambda({self.params!r}, {self.body!r})"

    # --- Evaluation helpers ---
    def extend_env(self, args: list[OwoValue], caller_env: Environment) -> Environment:
        """
        Bind already-evaluated `args` to the parameters, in order, inside a new
        child of `caller_env`. Extra arguments are ignored.
        """
        if len(args) < len(self.params):
            raise OwoInvalidArgumentCount(
                f"Invalid number of arguments: expected {len(self.params)}, got {len(args)}"
            )
        new_env = Environment.extend(caller_env)
        for param, value in zip(self.params, args):
            new_env.set(param, value)
        return new_env
