# tests/conftest.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Tabula tests.

Puts the project root on the import path so the top-level packages import
by bare name, and provides the formulas several suites share.
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
    """Verify that the project packages import before any test runs."""
    try:
        import logic
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def bracketed_formula():
    """Fully-bracketed three-variable formula.

    Truth column over (x1, x2, x3) in ascending order: 0,0,1,0,0,1,1,1.
    """
    return "(¬(((¬x2)+x3)•(¬(x1•x3))))"


@pytest.fixture
def prefix_formula():
    """Three-variable formula written with unbracketed negations.

    Truth column over (x1, x2, x3) in ascending order: 0,0,0,1,1,0,1,1.
    """
    return "¬((¬x2 + ¬x3) • ¬(x1 • ¬x3))"
