"""
Test that the vectorized numpy path matches the pairwise reference path.

The pairwise path loops over column pairs calling covmat.pairwise.correlation.covariance.
Tolerance: CONFIG.tolerance.backend_atol.
"""
import numpy as np
import pytest

import covmat.matrix.covariance as covmod
from covmat.config import CONFIG

DATA = {
    'tall': np.random.RandomState(42).randn(500, 4),
    'wide': np.random.RandomState(42).randn(12, 30),
    'offset': np.random.RandomState(42).randn(200, 3) * 1e3 + 1e4,
    'single_column': np.random.RandomState(42).randn(50, 1),
}


def _with_backend(monkeypatch, vectorized, fn, *args):
    monkeypatch.setattr(covmod, "_USE_VECTORIZED", vectorized)
    return fn(*args)


@pytest.mark.parametrize("name", DATA.keys())
@pytest.mark.parametrize("weighted", [False, True], ids=["unweighted", "weighted"])
def test_covariance_parity(monkeypatch, name, weighted):
    data = DATA[name]
    weights = np.random.RandomState(7).rand(len(data)) * 3 if weighted else None

    fast = _with_backend(monkeypatch, True, covmod.covariance_matrix, data, weights)
    ref = _with_backend(monkeypatch, False, covmod.covariance_matrix, data, weights)

    scale = max(1.0, float(np.max(np.abs(ref))))
    np.testing.assert_allclose(fast, ref, rtol=0, atol=CONFIG.tolerance.backend_atol * scale)


@pytest.mark.parametrize("name", DATA.keys())
def test_correlation_parity(monkeypatch, name):
    data = DATA[name]

    fast = _with_backend(monkeypatch, True, covmod.correlation_matrix, data, None)
    ref = _with_backend(monkeypatch, False, covmod.correlation_matrix, data, None)

    np.testing.assert_allclose(fast, ref, rtol=0, atol=CONFIG.tolerance.backend_atol)


def test_pairwise_path_is_symmetric(monkeypatch):
    data = DATA['tall']
    ref = _with_backend(monkeypatch, False, covmod.covariance_matrix, data, None)
    np.testing.assert_array_equal(ref, ref.T)
