import pytest

from egg.builtins import register
from egg.interpreter import Interpreter
from egg.types import Environment


@pytest.fixture
def global_env():
    """A fresh global scope holding true/false and the primitives."""
    return register(Environment())


@pytest.fixture
def env(global_env):
    """Top-level program scope, child of the global scope."""
    return Environment(outer=global_env)


@pytest.fixture
def interp(global_env):
    return Interpreter(global_env)
