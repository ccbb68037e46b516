"""Tests for configuration and environment switches."""
import dataclasses
import importlib
import logging

import numpy as np
import pytest

import covmat
import covmat._config
import covmat.matrix.covariance as covmod
from covmat.config import CONFIG, CorrelationConfig, CovmatConfig


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        CONFIG.correlation.force_unit_diagonal = False


def test_defaults():
    assert CONFIG.correlation.force_unit_diagonal is True
    assert CONFIG.tolerance.roundtrip_atol == 1e-14
    assert CONFIG.benchmark.small < CONFIG.benchmark.medium < CONFIG.benchmark.large


def test_backend_reported():
    assert covmat.BACKEND in ("numpy", "pairwise")


def test_unforced_diagonal(monkeypatch):
    cfg = CovmatConfig(correlation=CorrelationConfig(force_unit_diagonal=False))
    monkeypatch.setattr(covmod, "cfg", cfg)
    data = np.random.RandomState(0).randn(30, 3) * 7.3
    result = covmod.correlation_matrix(data)
    np.testing.assert_allclose(np.diag(result), 1.0, atol=1e-14)


@pytest.mark.parametrize("value,expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("nonsense", None),
    ("", None),
])
def test_log_level_from_env(monkeypatch, value, expected):
    monkeypatch.setenv("COVMAT_LOG_LEVEL", value)
    assert covmat._config._env_log_level() == expected


def test_vectorized_switch_from_env(monkeypatch):
    monkeypatch.setenv("COVMAT_USE_VECTORIZED", "0")
    try:
        assert importlib.reload(covmat._config).USE_VECTORIZED is False
    finally:
        monkeypatch.delenv("COVMAT_USE_VECTORIZED")
        importlib.reload(covmat._config)


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="covmat"):
        covmat.covariance_matrix(np.zeros((4, 2)))
    assert any("covariance of 4 x 2 data" in r.getMessage() for r in caplog.records)
