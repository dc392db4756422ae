from __future__ import annotations

from typing import Sequence

from crisp import LispValue
from crisp.errors import CrispArgumentError
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol


def bind_arguments(
    formals: Sequence[Symbol],
    supplied_args: Sequence[LispValue],
    caller_env: Environment,
) -> Environment:
    """
    Build the scope a closure body is evaluated in.

    Closures are strictly positional: the number of supplied values must match
    the number of formals exactly. The new scope's outer link is the caller's
    environment, not the one the lambda was created in, so a callee can see
    the caller's locals unless a parameter shadows them.
    """
    if len(formals) != len(supplied_args):
        raise CrispArgumentError(len(formals), len(formals))

    local_env = Environment(outer=caller_env)
    for formal, value in zip(formals, supplied_args):
        local_env.define(formal, value)
    return local_env
