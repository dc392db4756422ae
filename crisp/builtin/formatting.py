from __future__ import annotations

import re

from crisp import LispValue
from crisp.errors import check_arity
from crisp.printer import to_text
from crisp.types.environment import Environment
from crisp.types.nil import Nil

PLACEHOLDER_RE = re.compile(r"\{\{|\}\}|\{\}")
_MISSING = object()


def interpolate(template: str, values: list[LispValue]) -> str:
    """Fill `{}` left to right; `{{` and `}}` are literal braces.

    Placeholders without a value become empty and surplus values are ignored.
    """
    remaining = iter(values)

    def substitute(match: re.Match) -> str:
        token = match.group(0)
        if token == "{{":
            return "{"
        if token == "}}":
            return "}"
        value = next(remaining, _MISSING)
        return "" if value is _MISSING else to_text(value)

    return PLACEHOLDER_RE.sub(substitute, template)


def format_builtin(env: Environment, args: list[LispValue]) -> str:
    """(format template args...)"""
    check_arity(args, 1, None)
    template = to_text(args[0])
    # With no values the template is returned untouched, braces included
    if len(args) == 1:
        return template
    return interpolate(template, args[1:])


def puts(env: Environment, args: list[LispValue]) -> LispValue:
    """(puts template args...): print with a trailing newline."""
    if not args:
        print()
        return Nil
    text = format_builtin(env, args)
    print(text)
    return text


def print_builtin(env: Environment, args: list[LispValue]) -> str:
    """(print template args...): print without a newline."""
    text = format_builtin(env, args)
    print(text, end="", flush=True)
    return text
