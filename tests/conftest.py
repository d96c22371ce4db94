"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides injected and patched environments for retrieval tests
"""

import os
from unittest.mock import patch

import pytest

from env_option import MappingEnvironment


@pytest.fixture
def test_env_vars():
    """Provide raw environment values for testing."""
    return {
        "PORT": "10",
        "BAD_PORT": "abc",
        "NAME": "10",
        "RATIO": "0.25",
        "DEBUG": "true",
        "EMPTY": "",
    }


@pytest.fixture
def environ(test_env_vars):
    """Provide an injected environment accessor."""
    return MappingEnvironment(test_env_vars)


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Mock process environment variables for testing."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        yield test_env_vars


@pytest.fixture
def clean_env(test_env_vars):
    """Remove the test variable names and MISSING from the process environment."""
    names = list(test_env_vars) + ["MISSING"]
    with patch.dict(os.environ, {}, clear=False):
        for name in names:
            os.environ.pop(name, None)
        yield
