"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pypolyreg.core.defaults import DEFAULT_POINTS


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def seed_points():
    """The application's start-up data (seven points on [10, 70])."""
    return list(DEFAULT_POINTS)


@pytest.fixture
def line_points():
    """Three points exactly on y = 1 + 2x."""
    return [(0.0, 1.0), (1.0, 3.0), (2.0, 5.0)]


@pytest.fixture
def noisy_cubic_data(rng):
    """Noisy samples of a known cubic on [-2, 2]."""
    beta_true = np.array([0.5, -1.0, 0.25, 0.75])
    x = np.sort(rng.uniform(-2.0, 2.0, size=40))
    y = np.polynomial.polynomial.polyval(x, beta_true) + rng.standard_normal(40) * 0.05
    return x, y, beta_true
