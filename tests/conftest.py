"""
Shared fixtures for randomized store tests.
"""

import numpy as np
import pytest

from holocron import Record


@pytest.fixture
def rng():
    """Seeded generator so randomized tests are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def make_records(rng):
    """Factory building records with random components in [-10, 10)."""

    def _make(count: int, dimension: int, prefix: str = "id"):
        return [
            Record(f"{prefix}_{i}", rng.uniform(-10.0, 10.0, size=dimension))
            for i in range(count)
        ]

    return _make
