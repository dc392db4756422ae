"""Application engine for Crisp.

Centralizes how callables are invoked so the evaluator and the list
combinator builtins (`map`, `foldl`) share one code path:
- Lambda: bind the already-evaluated arguments in a new scope chained to the
  caller's environment and evaluate the shared body there.
- Python callables (natives): invoke as `fn(env, args)`.
"""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from crisp import LispValue, EvaluatorFn
from crisp.errors import CrispTypeError
from crisp.types.bind import bind_arguments
from crisp.types.environment import Environment
from crisp.types.lambda_fn import Lambda

logger = logging.getLogger(__name__)

NativeFunction = Callable[[Environment, list[LispValue]], LispValue]


def is_native(value: LispValue) -> bool:
    return callable(value) and not isinstance(value, Lambda)


def apply_lambda(
    fn: Lambda,
    args: Sequence[LispValue],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to argument values. This is the only place a body is evaluated."""
    call_env = bind_arguments(fn.formals, args, caller_env)
    logger.debug("calling %s with %d argument(s)", fn, len(args))
    return evaluate_fn(fn.body, call_env)


def apply(
    head: Lambda | NativeFunction | object,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a native function to evaluated arguments."""
    if isinstance(head, Lambda):
        return apply_lambda(head, args, env, evaluate_fn)
    elif callable(head):
        return head(env, args)
    else:
        raise CrispTypeError("Lambda || Function")
