"""Runtime environment for Crisp.

The Environment stores bindings of Symbols to evaluated values and supports
nested scopes via an `outer` link. Scopes never own their parent: many call
scopes may share one outer environment.
"""

from __future__ import annotations

from io import StringIO
from typing import Mapping, Optional

from crisp import LispValue
from crisp.errors import CrispTypeError, CrispUnresolvedReference
from crisp.types.symbol import Symbol


class Environment:
    """Hierarchical mapping from Symbols to values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[Symbol, LispValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value` in this scope only; parents are never touched."""
        if not isinstance(name, Symbol):
            raise CrispTypeError("Symbol")
        self.vars[name] = value

    def find(self, symbol: Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that contains `symbol`."""
        env: Optional[Environment] = self
        while env is not None:
            if symbol in env.vars:
                return env
            env = env.outer
        return None

    def get(self, name: Symbol) -> Optional[LispValue]:
        """Return the value bound to `name`, or None when the chain has no binding."""
        env = self.find(name)
        if env is None:
            return None
        return env.vars[name]

    def lookup(self, name: Symbol) -> LispValue:
        """Like `get`, but raises CrispUnresolvedReference on a miss."""
        env = self.find(name)
        if env is None:
            raise CrispUnresolvedReference(str(name))
        return env.vars[name]

    def update(self, mapping: Mapping[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value in the current frame."""
        for k, v in mapping.items():
            self.define(k, v)

    def root(self) -> Environment:
        env = self
        while env.outer is not None:
            env = env.outer
        return env

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return f"<Environment chain: {' -> '.join(chain)}>"
