"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinreg.datasets import housing, housing_size
from pylinreg.regression import LinearRegression


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def simple_regression_data(rng):
    """Well-conditioned table: three features plus a noisy linear label."""
    n = 100
    X = rng.standard_normal((n, 3))
    beta_true = np.array([1.0, -2.0, 0.5])
    y = 4.0 + X @ beta_true + rng.standard_normal(n) * 0.1
    return np.column_stack([X, y]), beta_true


@pytest.fixture
def collinear_table(rng):
    """Table with perfectly collinear features (normal equation must fail)."""
    n = 100
    x1 = rng.standard_normal(n)
    x2 = rng.standard_normal(n)
    x3 = x1 + x2
    y = rng.standard_normal(n)
    return np.column_stack([x1, x2, x3, y])


@pytest.fixture
def constant_feature_table(rng):
    """Table whose second feature never varies."""
    n = 20
    x1 = rng.standard_normal(n)
    y = 2.0 * x1 + 1.0
    return np.column_stack([x1, np.full(n, 5.0), y])


@pytest.fixture
def model_one_feature():
    """House size -> price."""
    return LinearRegression(housing_size)


@pytest.fixture
def model_two_features():
    """House size, bedrooms -> price."""
    return LinearRegression(housing)
