"""Core tree-walking evaluator for the Crisp interpreter.

Dispatches special forms, applies natives and lambdas, and evaluates
non-callable lists element-wise as data.
"""

from __future__ import annotations

from crisp import SExpression, LispValue
from crisp.errors import CrispStandardError, CrispTypeError
from crisp.types.char import Char
from crisp.types.environment import Environment
from crisp.types.lambda_fn import Lambda
from crisp.types.nil import NilType
from crisp.types.symbol import Symbol
from crisp.evaluation.apply import apply, is_native
from crisp.evaluation.special_forms import SPECIAL_FORMS, SpecialForm


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """
    Reduce `expr` to a value in `env`.

    Deep recursion (no tail-call elimination) surfaces as the host's
    RecursionError.
    """
    match expr:
        case [head, *tail_args]:
            form = SpecialForm.resolve(head)
            if form is not None:
                return SPECIAL_FORMS[form](tail_args, env, evaluate)

            # A callable already in head position is applied, not re-evaluated
            if isinstance(head, Lambda) or is_native(head):
                head_value = head
            else:
                head_value = evaluate(head, env)
            if isinstance(head_value, Lambda) or is_native(head_value):
                args = [evaluate(arg, env) for arg in tail_args]
                return apply(head_value, args, env, evaluate)

            # Not a call: the list is data and is reduced element by element
            return [head_value, *(evaluate(arg, env) for arg in tail_args)]

        case []:
            return []

        case Symbol():
            return env.lookup(expr)

        # --- Atoms return as-is ---
        case bool() | float() | str() | Char() | NilType():
            return expr

        case Lambda():
            raise CrispStandardError("Found unexpected lambda in expression position.")

    if callable(expr):
        raise CrispStandardError("Found unexpected function in expression position.")
    raise CrispTypeError("expression")
