"""Runtime environment for owo.

The Environment stores bindings of names to evaluated values and supports
nested scopes via an `outer` link. Lookups walk from the innermost frame to the
root; definitions always land in the innermost frame.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from owo import OwoValue
from owo.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from names to owo values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, OwoValue] = {}
        self.outer: Environment | None = outer

    @classmethod
    def extend(cls, parent: Environment) -> Environment:
        """Create a child environment whose parent is `parent`."""
        return cls(outer=parent)

    def get(self, name: str | Symbol) -> Optional[OwoValue]:
        """Look up `name` locally, then in each enclosing frame.

        Returns None if the name is not bound anywhere in the chain.
        """
        key = str(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env.vars[key]
            env = env.outer
        return None

    def set(self, name: str | Symbol, value: OwoValue) -> None:
        """Bind `name` to `value` in this frame, shadowing any outer binding."""
        self.vars[str(name)] = value

    def __contains__(self, name: object) -> bool:
        return self.get(str(name)) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
