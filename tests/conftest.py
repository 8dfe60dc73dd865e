# tests/conftest.py
# This file is part of Arbor - A Modal Logic Formula Toolkit
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the Arbor test suite.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures: a logic over the letters a-d, seeded generators
"""

import sys
import random
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from logic import Logic, letters, MODAL_OPERATORS  # noqa: E402

# Logic over the letters used by the worked examples, e.g. "(b∧a)∨(d∧c)"
ABCD_LOGIC = Logic("abcd", letters("abcd"), MODAL_OPERATORS)


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Initialize test environment and verify module availability.

    Skips the entire test session if the project packages cannot be
    imported (e.g. sly is missing).

    Yields:
        None: Control to test execution
    """
    try:
        import logic
        import syntax
        import tree
        import generation
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


@pytest.fixture
def abcd_logic():
    """Provide the modal logic over the letters a, b, c, d.

    Returns:
        Logic: Alphabet {a, b, c, d} with every standard operator
    """
    return ABCD_LOGIC


@pytest.fixture
def seeded_rng():
    """Provide a deterministic random number generator.

    Returns:
        random.Random: Generator seeded with a fixed value
    """
    return random.Random(1234)
