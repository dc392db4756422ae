import logging

from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispArgumentError, CrispTypeError
from crisp.types.environment import Environment
from crisp.types.lambda_fn import Lambda
from crisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (fn name params body)
    Shorthand for (let name (\\ params body)).
    """
    if len(tail) != 3:
        raise CrispArgumentError(3, 3)

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise CrispTypeError("Symbol")
    fn = Lambda(params, body)
    env.define(name, fn)
    logger.debug("defined function %s/%d", name, fn.arity)
    return fn
