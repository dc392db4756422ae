"""Lambda (closure) representation for Crisp."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from crisp import SExpression
from crisp.errors import CrispTypeError
from crisp.types.symbol import Symbol


class Lambda:
    """A first-class lambda: formal parameters plus an unevaluated body.

    Both are shared by every invocation and never mutated after construction.
    The lambda does not capture its defining environment; a call scope is
    chained to the caller's environment (see crisp.types.bind).
    """

    __slots__ = ("formals", "body")

    def __init__(self, params: Symbol | Iterable[SExpression], body: SExpression):
        # A bare symbol is shorthand for a one-parameter list
        if isinstance(params, Symbol):
            formals: tuple[Symbol, ...] = (params,)
        elif isinstance(params, list):
            if not all(isinstance(p, Symbol) for p in params):
                raise CrispTypeError("Symbol || List<Symbol>")
            formals = tuple(params)
        else:
            raise CrispTypeError("Symbol || List<Symbol>")
        self.formals = formals
        self.body = body

    @property
    def arity(self) -> int:
        return len(self.formals)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("(\\ (")
            buffer.write(" ".join(str(f) for f in self.formals))
            buffer.write(") ")
            buffer.write(str(self.body))
            buffer.write(")")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Lambda {str(self)}>"
