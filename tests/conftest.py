"""
Pytest configuration and shared fixtures.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Isolates tests from MERKLE_* environment variables and config files
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

import importlib

_leaves = importlib.import_module("fixtures.sample_leaves")

SAMPLE_LEAVES = _leaves.SAMPLE_LEAVES
make_leaves = _leaves.make_leaves


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sample_leaves():
    """The 21-leaf sample set as a fresh list."""
    return list(SAMPLE_LEAVES)


@pytest.fixture
def four_leaves():
    return make_leaves(4)


@pytest.fixture
def three_leaves():
    return make_leaves(3)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent of the caller's MERKLE_* environment."""
    from core.config.runtime import set_default_config

    for name in [
        "MERKLE_HASH_ALGORITHM",
        "MERKLE_CACHE_ENABLED",
        "MERKLE_CACHE_MAX_ENTRIES",
        "MERKLE_LOG_LEVEL",
        "MERKLE_LOG_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)
    set_default_config(None)
    yield
    set_default_config(None)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
