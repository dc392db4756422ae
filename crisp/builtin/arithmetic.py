"""Arithmetic folds: (+ 1 2 3) is ((1 + 2) + 3).

Every Number is a float64. numpy does the folding so that division by zero
and overflow follow IEEE 754 (inf / nan) instead of raising.
"""
from __future__ import annotations

import numpy as np

from crisp import LispValue
from crisp.errors import check_arity
from crisp.types.environment import Environment
from crisp.builtin.values import extract_numbers


def _fold(args: list[LispValue], op: np.ufunc) -> float:
    check_arity(args, 2, None)
    numbers = np.array(extract_numbers(args), dtype=np.float64)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(op.reduce(numbers))


def add(env: Environment, args: list[LispValue]) -> float:
    return _fold(args, np.add)


def sub(env: Environment, args: list[LispValue]) -> float:
    return _fold(args, np.subtract)


def mul(env: Environment, args: list[LispValue]) -> float:
    return _fold(args, np.multiply)


def div(env: Environment, args: list[LispValue]) -> float:
    return _fold(args, np.true_divide)


def mod(env: Environment, args: list[LispValue]) -> float:
    """Truncated remainder: the result takes the sign of the dividend."""
    return _fold(args, np.fmod)
