import logging
import math

from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispExit, CrispTypeError, check_arity
from crisp.types.environment import Environment

logger = logging.getLogger(__name__)


def exit_code(value: LispValue) -> int:
    """Round a Number half away from zero into a process status."""
    if isinstance(value, bool) or not isinstance(value, float) or not math.isfinite(value):
        raise CrispTypeError("Number")
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def exit_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (exit [code])
    Stops the program; the code defaults to 0. Never returns.
    """
    check_arity(tail, None, 1)

    code = exit_code(evaluate_fn(tail[0], env)) if tail else 0
    logger.debug("exit requested with status %d", code)
    raise CrispExit(code)
