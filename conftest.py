"""
Configuration file for pytest.

This file loads environment variables from a .env file and provides shared
fixtures for tests.
"""

import pytest
import dotenv

from holocron import Record, VectorStore
from holocron.config.config_manager import ConfigManager
import holocron.config.config_manager as config_module

# Load environment variables from .env file
dotenv.load_dotenv()


@pytest.fixture
def sample_records():
    """The four two-dimensional records used throughout the scenario tests."""
    return [
        Record("vec1", [1.2, 2.0]),
        Record("vec2", [4.0, 9.5]),
        Record("vec3", [9.3, 7.6]),
        Record("vec4", [3.4, 3.1]),
    ]


@pytest.fixture
def sample_store(sample_records):
    """A store pre-populated with the sample records via add()."""
    store = VectorStore([])
    store.add(sample_records)
    return store


@pytest.fixture
def reset_config():
    """Reset the configuration singleton before and after a test."""
    ConfigManager._instance = None
    config_module._config_manager = None
    yield
    ConfigManager._instance = None
    config_module._config_manager = None
