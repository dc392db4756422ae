# Core type aliases for Crisp's data model.
# We use plain Python types (float, bool, str, list) wherever Python has a natural
# equivalent, and small classes for the rest (Symbol, Char, Nil, Lambda).
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms (code-as-data).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any`; a Crisp program is data, so they are interchangeable.

import logging
from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: passed into special forms so they control evaluation order
EvaluatorFn = Callable[..., LispValue]

logging.getLogger(__name__).addHandler(logging.NullHandler())
