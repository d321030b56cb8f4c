"""Text rendering of owo values, used for REPL output and error messages."""

from __future__ import annotations

from owo import OwoValue
from owo.types.lambda_fn import Lambda
from owo.types.symbol import Symbol
from owo.types.void import VoidType


def to_string(value: OwoValue) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, Symbol)):
        return str(value)
    if isinstance(value, list):
        return "(" + " ".join(to_string(v) for v in value) + ")"
    if isinstance(value, Lambda):
        rendered = "Lambda(" + " ".join(value.params) + ")"
        return rendered + "".join(" " + to_string(e) for e in value.body)
    if isinstance(value, VoidType):
        return "Void"
    return repr(value)


def lambda_lines(fn: Lambda) -> list[str]:
    """Multi-line rendering of a lambda as printed by the REPL."""
    lines = ["Lambda("]
    lines.extend(f"{param} " for param in fn.params)
    lines.append(")")
    lines.extend(f" {to_string(e)}" for e in fn.body)
    return lines
