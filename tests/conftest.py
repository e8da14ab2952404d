# tests/conftest.py
# This file is part of Sentential - A Propositional Logic Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for Sentential tests.

Puts the project root on the module path so the flat packages import
without installation, and provides formulas shared by several suites.
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
    """Verify that the toolkit packages are importable.

    Skips the whole session if a required module cannot be imported.
    """
    try:
        import logic
        import parser
        import transform
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def sample_formulas():
    """Formulas covering every operator and several nesting shapes.

    Returns:
        List[str]: Well formed formulas in mixed notation
    """
    return [
        "A",
        "¬A",
        "A∧B",
        "A OR B",
        "¬(P∧Q)",
        "NEG ((NEG P) OR (NEG Q))",
        "P∨(Q∧R)",
        "(A∨B)∧(¬C∨(D∧¬A))",
        "¬¬(A∧(B∨¬C))",
        "((P∧Q)∨(R∧S))∨¬T",
    ]


@pytest.fixture
def de_morgan_formula():
    """Provide the De Morgan example formula."""
    return "¬(P∧Q)"
