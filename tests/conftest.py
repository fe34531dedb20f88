"""
Pytest configuration and shared fixtures for commitkit tests.

This conftest.py:
1. Adds project root and tests root to sys.path for imports
2. Provides shared fixtures via pytest's autodiscovery
"""

import os
import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def clean_env(monkeypatch):
    """Remove every COMMITKIT_* variable from the environment."""
    for name in list(os.environ):
        if name.startswith("COMMITKIT_"):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch
