"""List combinators. `map`, `foldl` and `foldl1` call back into the evaluator."""
from __future__ import annotations

from crisp import LispValue
from crisp.errors import CrispStandardError, check_arity
from crisp.types.environment import Environment
from crisp.evaluation.apply import apply_lambda
from crisp.evaluation.evaluator import evaluate
from crisp.builtin.values import extract_lambda, extract_list


def cons(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """(cons x list): a new list with x in front."""
    check_arity(args, 2, 2)
    head, tail = args
    return [head, *extract_list(tail)]


def map_builtin(env: Environment, args: list[LispValue]) -> list[LispValue]:
    """
    (map lambda list)

    The list is consumed in chunks as wide as the lambda's parameter list, so
    (map (\\ (a b) (+ a b)) (1 10 2 20)) is (11 22).
    """
    check_arity(args, 2, 2)
    fn = extract_lambda(args[0])
    items = extract_list(args[1])
    width = fn.arity
    if width == 0:
        raise CrispStandardError("Lambda for `map` should take at least 1 argument.")
    return [
        apply_lambda(fn, items[i:i + width], env, evaluate)
        for i in range(0, len(items), width)
    ]


def foldl(env: Environment, args: list[LispValue]) -> LispValue:
    """(foldl (\\ (acc x) ...) start list)"""
    check_arity(args, 3, 3)
    fn = extract_lambda(args[0])
    if fn.arity != 2:
        raise CrispStandardError("Lambda for `foldl`/`foldl1` should take 2 arguments.")
    acc = args[1]
    for item in extract_list(args[2]):
        acc = apply_lambda(fn, [acc, item], env, evaluate)
    return acc


def foldl1(env: Environment, args: list[LispValue]) -> LispValue:
    """(foldl1 lambda list): foldl seeded with the list's first element."""
    check_arity(args, 2, 2)
    items = extract_list(args[1])
    if not items:
        raise CrispStandardError("List for `foldl1` is empty.")
    return foldl(env, [args[0], items[0], items[1:]])
