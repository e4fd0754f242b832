# tests/conftest.py

import pytest

import fancal
from fancal.api import set_registry
from fancal._bootstrap import build_registry


@pytest.fixture
def fresh_registry():
    """Registry rebuilt from the builtins, restored after the test."""
    reg = build_registry()
    set_registry(reg)
    yield reg
    set_registry(build_registry())


@pytest.fixture
def gregorian():
    return fancal.get_calendar("gregorian")
