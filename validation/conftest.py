"""
Shared datasets with known properties.

Every dataset here has a characteristic that the ground truth
libraries (numpy, scipy, statsmodels) agree on.
"""
import numpy as np
import pytest


@pytest.fixture
def gaussian_columns():
    """Independent standard normal columns: covariance ~ identity."""
    rng = np.random.RandomState(42)
    return rng.randn(5000, 4)


@pytest.fixture
def correlated_columns():
    """Three columns with known population correlation.

    Built from a Cholesky factor of
    [[1, 0.8, 0.3], [0.8, 1, 0.5], [0.3, 0.5, 1]].
    """
    target = np.array([[1.0, 0.8, 0.3], [0.8, 1.0, 0.5], [0.3, 0.5, 1.0]])
    rng = np.random.RandomState(42)
    z = rng.randn(20000, 3)
    return z @ np.linalg.cholesky(target).T, target


@pytest.fixture
def frequency_weights():
    """Integer weights, valid as numpy fweights."""
    rng = np.random.RandomState(99)
    return rng.randint(0, 5, size=300)


@pytest.fixture
def analytic_weights():
    """Fractional positive weights."""
    rng = np.random.RandomState(99)
    return rng.rand(300) * 2.0 + 0.1


@pytest.fixture
def mixed_scale_data():
    """300 x 5 data with column scales spanning six orders of magnitude."""
    rng = np.random.RandomState(7)
    return rng.randn(300, 5) * np.array([1e-3, 1e-1, 1.0, 1e2, 1e3])
