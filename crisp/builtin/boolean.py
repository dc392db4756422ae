from __future__ import annotations

import operator
from typing import Callable

from crisp import LispValue
from crisp.errors import check_arity
from crisp.types.environment import Environment
from crisp.builtin.values import extract_bool, extract_numbers


def equals(env: Environment, args: list[LispValue]) -> bool:
    """(= a b ...): every argument equals the first."""
    check_arity(args, 2, None)
    first, *rest = extract_numbers(args)
    return all(n == first for n in rest)


def _monotonic(compare: Callable[[float, float], bool]):
    def builtin(env: Environment, args: list[LispValue]) -> bool:
        check_arity(args, 2, None)
        numbers = extract_numbers(args)
        return all(compare(a, b) for a, b in zip(numbers, numbers[1:]))
    return builtin


gt = _monotonic(operator.gt)
gte = _monotonic(operator.ge)
lt = _monotonic(operator.lt)
lte = _monotonic(operator.le)


def logical_not(env: Environment, args: list[LispValue]) -> LispValue:
    """(! b ...): one argument gives a Bool, several give a list of Bools."""
    check_arity(args, 1, None)
    negated = [not extract_bool(a) for a in args]
    if len(negated) == 1:
        return negated[0]
    return negated
