import pytest

from owo.interpreter import evaluate_program
from owo.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment for each test."""
    return Environment()


@pytest.fixture
def run(env):
    """Evaluate a program string against the test's environment."""
    def _run(source: str):
        return evaluate_program(source, env)
    return _run
