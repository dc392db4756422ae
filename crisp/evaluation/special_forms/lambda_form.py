from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispArgumentError
from crisp.types.environment import Environment
from crisp.types.lambda_fn import Lambda


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (\\ params body)
    `params` is a symbol or a list of symbols. Nothing is evaluated here.
    """
    if len(tail) != 2:
        raise CrispArgumentError(2, 2)

    params, body = tail
    return Lambda(params, body)
