"""Helpers for pulling Python values out of Crisp arguments."""
from __future__ import annotations

from typing import Sequence

from crisp import LispValue
from crisp.errors import CrispTypeError
from crisp.types.lambda_fn import Lambda


def extract_number(value: LispValue) -> float:
    # bool is an int subclass, never a Number here
    if isinstance(value, bool) or not isinstance(value, float):
        raise CrispTypeError("Number")
    return value


def extract_numbers(values: Sequence[LispValue]) -> list[float]:
    return [extract_number(v) for v in values]


def extract_bool(value: LispValue) -> bool:
    if not isinstance(value, bool):
        raise CrispTypeError("Bool")
    return value


def extract_list(value: LispValue) -> list[LispValue]:
    if not isinstance(value, list):
        raise CrispTypeError("List")
    return value


def extract_lambda(value: LispValue) -> Lambda:
    if not isinstance(value, Lambda):
        raise CrispTypeError("Lambda")
    return value
