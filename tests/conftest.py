import pytest

from lambic.builtins import standard_environment
from lambic.evaluation.evaluator import evaluate
from lambic.interpreter import Interpreter
from lambic.reader.parser import read_all

# Most tests either evaluate forms directly against a fresh root frame
# (the `env` fixture) or go through the Interpreter facade (`interp`).


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    return standard_environment()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Read and evaluate every form in a source string; return the last value."""
    def _run(source):
        result = None
        for expr in read_all(source):
            result = evaluate(expr, env)
        return result
    return _run
