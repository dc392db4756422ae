"""Textual rendering of Crisp values.

`display` is the round-trippable form a REPL shows: strings are quoted and
re-escaped, chars keep their `,` marker. `to_text` is what `format` and
`puts` interpolate: top-level strings and chars are written raw.
"""

from __future__ import annotations

import math

from crisp import LispValue
from crisp.reader.escapes import escape
from crisp.types.char import Char
from crisp.types.lambda_fn import Lambda
from crisp.types.nil import NilType
from crisp.types.symbol import Symbol

LAMBDA_PLACEHOLDER = "<lambda>"
NATIVE_PLACEHOLDER = "<function>"


def format_number(n: float) -> str:
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "inf" if n > 0 else "-inf"
    if n.is_integer():
        return str(int(n))
    return repr(n)


def display(value: LispValue) -> str:
    match value:
        case bool():
            return "true" if value else "false"
        case float() | int():
            return format_number(float(value))
        case str():
            return f'"{escape(value)}"'
        case Char():
            return f",{value.value}"
        case NilType():
            return "nil"
        case Symbol():
            return value.id
        case list():
            return "(" + " ".join(display(v) for v in value) + ")"
        case Lambda():
            return LAMBDA_PLACEHOLDER
        case _ if callable(value):
            return NATIVE_PLACEHOLDER
    return repr(value)


def to_text(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Char):
        return value.value
    return display(value)
