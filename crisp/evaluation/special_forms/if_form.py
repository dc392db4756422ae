from crisp import EvaluatorFn
from crisp import SExpression, LispValue
from crisp.errors import CrispArgumentError, CrispTypeError
from crisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if predicate then else)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise CrispArgumentError(3, 3)

    predicate, then_expr, else_expr = tail
    cond = evaluate_fn(predicate, env)
    # No truthiness: the predicate has to produce a Bool
    if not isinstance(cond, bool):
        raise CrispTypeError("Bool")

    return evaluate_fn(then_expr if cond else else_expr, env)
