from __future__ import annotations

import logging

from crisp import LispValue
from crisp.errors import CrispExit, check_arity
from crisp.types.environment import Environment
from crisp.builtin.values import extract_bool

logger = logging.getLogger(__name__)

ASSERTION_EXIT_CODE = 101


def assert_true(env: Environment, args: list[LispValue]) -> bool:
    """(assert predicate): stop the program with status 101 unless predicate is true."""
    check_arity(args, 1, 1)
    if not extract_bool(args[0]):
        logger.debug("assertion failed")
        raise CrispExit(ASSERTION_EXIT_CODE)
    return True


def assert_false(env: Environment, args: list[LispValue]) -> bool:
    """(assert_false predicate): stop the program with status 101 unless predicate is false."""
    check_arity(args, 1, 1)
    if extract_bool(args[0]):
        logger.debug("assert_false failed")
        raise CrispExit(ASSERTION_EXIT_CODE)
    return True
