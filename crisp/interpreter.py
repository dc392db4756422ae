from __future__ import annotations

import logging
import sys
from typing import Literal

from crisp import LispValue
from crisp.config import get_prelude_file, get_recursion_limit
from crisp.evaluation.evaluator import evaluate
from crisp.reader.parser import parse, parse_all, tokenize
from crisp.types.environment import Environment
from crisp.types.nil import Nil
from crisp.builtin import register

logger = logging.getLogger(__name__)


def evaluate_program(text: str, env: Environment) -> LispValue:
    """Tokenize `text`, parse one top-level expression and evaluate it in `env`."""
    expr, remaining = parse(tokenize(text))
    if remaining:
        logger.debug("ignoring %d token(s) after the first expression", len(remaining))
    return evaluate(expr, env)


class Interpreter:
    """
    Orchestrates reading and evaluating Crisp code.
    Maintains one root Environment across calls, so successive `eval` calls
    see each other's `let` and `fn` bindings.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            sys.setrecursionlimit(limit)

        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_file()
            if path.is_file():
                logger.debug("loading prelude from %s", path)
                self.eval(path.read_text(encoding='utf-8'))
            else:
                logger.debug("no prelude at %s", path)
        elif prelude:
            self.eval(prelude)

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level expression in `code`; return the last value."""
        result: LispValue = Nil
        for expr in parse_all(tokenize(code)):
            result = evaluate(expr, self.env)
        return result

