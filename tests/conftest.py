# tests/conftest.py
# This file is part of Tarski - A Propositional Logic Evaluation Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the evaluation engine tests.

This module ensures the project root is importable and provides formula
fixtures shared between the parser and core test suites.
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Import the engine packages before running any test.

    A broken import fails the session instead of skipping it.
    """
    import core  # noqa: F401
    import parser  # noqa: F401
    import utils  # noqa: F401

    yield


@pytest.fixture
def tautologies():
    """Formulas true under every assignment."""
    return [
        "p -> p",
        "p OR NOT p",
        "(p -> q) <-> (!q -> !p)",
        "!(p & q) <-> (!p | !q)",
        "((p -> q) & (q -> r)) -> (p -> r)",
        "true",
    ]


@pytest.fixture
def contradictions():
    """Formulas false under every assignment."""
    return [
        "p AND NOT p",
        "!(p -> p)",
        "(p <-> q) & (p <-> !q)",
        "false",
    ]


@pytest.fixture
def contingencies():
    """Formulas true under some assignments and false under others."""
    return [
        "p",
        "p AND q",
        "p OR q",
        "p -> q",
        "p <-> q",
        "(p | q) & !r",
    ]
