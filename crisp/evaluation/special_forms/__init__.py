"""Registry of special forms for the Crisp evaluator.

A special form is a reserved head symbol whose handler receives its
arguments unevaluated and decides what to evaluate, and in which order.
The evaluator resolves a head symbol to a `SpecialForm` member once and
dispatches on it before ordinary function application, so user bindings
can never shadow these names.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from crisp import EvaluatorFn, LispValue, SExpression
from crisp.types.environment import Environment
from crisp.types.symbol import Symbol
from crisp.evaluation.special_forms.if_form import if_form
from crisp.evaluation.special_forms.let_form import let_form
from crisp.evaluation.special_forms.lambda_form import lambda_form
from crisp.evaluation.special_forms.fn_form import fn_form
from crisp.evaluation.special_forms.exit_form import exit_form

SpecialFormHandler = Callable[[list[SExpression], Environment, EvaluatorFn], LispValue]


class SpecialForm(Enum):
    IF = "if"
    LET = "let"
    LAMBDA = "\\"
    FN = "fn"
    EXIT = "exit"

    @classmethod
    def resolve(cls, head: SExpression) -> Optional[SpecialForm]:
        if not isinstance(head, Symbol):
            return None
        return _BY_NAME.get(head.id)


_BY_NAME: dict[str, SpecialForm] = {form.value: form for form in SpecialForm}

SPECIAL_FORMS: dict[SpecialForm, SpecialFormHandler] = {
    SpecialForm.IF: if_form,
    SpecialForm.LET: let_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.FN: fn_form,
    SpecialForm.EXIT: exit_form,
}
