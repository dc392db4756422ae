from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispArgumentError, CrispTypeError
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let name value)
    Binds into the current scope and returns the bound value.
    """
    if len(tail) != 2:
        raise CrispArgumentError(2, 2)

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise CrispTypeError("Symbol")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    return value
