from crisp.types.symbol import Symbol
from crisp.types.nil import Nil, NilType
from crisp.types.char import Char
from crisp.types.lambda_fn import Lambda
from crisp.types.environment import Environment
from crisp.types.bind import bind_arguments

__all__ = (
    "Symbol",
    "Nil",
    "NilType",
    "Char",
    "Lambda",
    "Environment",
    "bind_arguments",
)
