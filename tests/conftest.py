"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def line_data(rng):
    """Noisy sample from y = 2 + 3x with x centred on zero."""
    n = 100
    x = rng.uniform(-1.0, 1.0, n)
    y = 2.0 + 3.0 * x + rng.standard_normal(n) * 0.5
    return x, y


@pytest.fixture
def exact_line():
    """Points exactly on y = 2x."""
    return np.array([1.0, 2.0, 3.0]), np.array([2.0, 4.0, 6.0])
