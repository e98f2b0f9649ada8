import pytest

from kappa.interpreter import Interpreter
from kappa.types.environment import Environment


@pytest.fixture(autouse=True)
def _default_undefined_policy(monkeypatch):
    # Tests that need the strict policy set it explicitly
    monkeypatch.delenv("KAPPA_UNDEFINED", raising=False)


@pytest.fixture
def env():
    return Environment()


@pytest.fixture
def itp():
    """Interpreter with two host helpers for writing terminating loops."""
    interp = Interpreter()
    interp.define("zero?", lambda n: n == 0, arity=1)
    interp.define("dec", lambda n: n - 1, arity=1)
    return interp
