"""Built-in functions for the Crisp runtime environment.

Every builtin is a native of the form `fn(env, args) -> value`, where `args`
are already evaluated and `env` is the caller's environment.
"""
from __future__ import annotations

import logging

from crisp.types.environment import Environment
from crisp.types.symbol import Symbol
from crisp.builtin import arithmetic, assertions, boolean, formatting, lists

logger = logging.getLogger(__name__)

BUILTINS = {
    '+': arithmetic.add,
    '-': arithmetic.sub,
    '*': arithmetic.mul,
    '/': arithmetic.div,
    '%': arithmetic.mod,
    '=': boolean.equals,
    '>': boolean.gt,
    '>=': boolean.gte,
    '<': boolean.lt,
    '<=': boolean.lte,
    '!': boolean.logical_not,
    'cons': lists.cons,
    'map': lists.map_builtin,
    'foldl': lists.foldl,
    'foldl1': lists.foldl1,
    'format': formatting.format_builtin,
    'puts': formatting.puts,
    'print': formatting.print_builtin,
    'assert': assertions.assert_true,
    'assert_false': assertions.assert_false,
}


def register(env: Environment) -> None:
    env.update({Symbol(name): fn for name, fn in BUILTINS.items()})
    logger.debug("registered %d builtins", len(BUILTINS))
