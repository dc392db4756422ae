import pytest

from crisp.builtin import register
from crisp.interpreter import Interpreter
from crisp.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def interp():
    """Interpreter without the prelude, so tests only see the builtins."""
    return Interpreter(prelude=None)
