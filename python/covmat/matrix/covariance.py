"""
Matrix Covariance Primitives

Weighted covariance and correlation matrices of the columns of a data
matrix. Each routine comes in two forms: one allocating its result and
one (``*_into``) writing into a caller-supplied destination.
"""

import logging

import numpy as np
from typing import Optional, Sequence

from covmat._checks import as_data, check_destination, check_weights
from covmat._config import USE_VECTORIZED as _USE_VECTORIZED
from covmat.config import CONFIG as cfg
from covmat.individual.statistics import column_means
from covmat.matrix.conversion import cov_to_corr
from covmat.pairwise.correlation import covariance

logger = logging.getLogger(__name__)


def _mirror_upper(matrix: np.ndarray) -> np.ndarray:
    """Copy the strict upper triangle onto the lower one."""
    rows, cols = np.triu_indices(matrix.shape[0], k=1)
    matrix[cols, rows] = matrix[rows, cols]
    return matrix


def _covariance_vectorized(data: np.ndarray, w: Optional[np.ndarray]) -> np.ndarray:
    centered = data - column_means(data, w)

    if w is None:
        denom = np.float64(data.shape[0]) - 1
    else:
        denom = np.sum(w) - 1
        centered *= np.sqrt(w)[:, np.newaxis]

    with np.errstate(divide='ignore', invalid='ignore'):
        cov = (centered.T @ centered) / denom

    return _mirror_upper(cov)


def _covariance_pairwise(data: np.ndarray, w: Optional[np.ndarray]) -> np.ndarray:
    n_cols = data.shape[1]
    cov = np.empty((n_cols, n_cols))

    for i in range(n_cols):
        for j in range(i, n_cols):
            cov[i, j] = covariance(data[:, i], data[:, j], w)
            cov[j, i] = cov[i, j]

    return cov


def _covariance(data: np.ndarray, w: Optional[np.ndarray]) -> np.ndarray:
    logger.debug(
        "covariance of %d x %d data (%s, %s)",
        data.shape[0], data.shape[1],
        "weighted" if w is not None else "unweighted",
        "vectorized" if _USE_VECTORIZED else "pairwise",
    )
    if _USE_VECTORIZED:
        return _covariance_vectorized(data, w)
    return _covariance_pairwise(data, w)


def _correlation(data: np.ndarray, w: Optional[np.ndarray]) -> np.ndarray:
    corr = cov_to_corr(_covariance(data, w))
    if cfg.correlation.force_unit_diagonal:
        np.fill_diagonal(corr, 1.0)
    return corr


def covariance_matrix(
    data: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> np.ndarray:
    """
    Compute the weighted sample covariance matrix of the columns of data.

    Parameters
    ----------
    data : np.ndarray
        Observations (n_samples x n_columns). Not modified.
    weights : sequence of float, optional
        Non-negative weight per row (default: all ones). Not modified.

    Returns
    -------
    np.ndarray
        Symmetric covariance matrix (n_columns x n_columns)

    Raises
    ------
    DimensionMismatchError
        len(weights) != n_samples
    InvalidArgumentError
        Any weight is negative

    Notes
    -----
    mu_i = sum_k(w_k x_ki) / sum_k(w_k)
    C_ij = sum_k(w_k (x_ki - mu_i)(x_kj - mu_j)) / (sum_k(w_k) - 1)

    Without weights the denominator is n - 1. A single observation (or
    sum(w) <= 1) yields Inf/NaN entries rather than an error.
    """
    data = as_data(data)
    w = check_weights(weights, data.shape[0])
    return _covariance(data, w)


def covariance_matrix_into(
    dst: np.ndarray,
    data: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> np.ndarray:
    """
    Compute the covariance matrix of data into dst.

    dst must be a float ndarray of shape (n_columns, n_columns). It is
    checked together with the weights before anything is computed, so
    a failing call leaves dst untouched. Returns dst.

    See covariance_matrix for the formula.
    """
    data = as_data(data)
    check_destination(dst, (data.shape[1], data.shape[1]))
    w = check_weights(weights, data.shape[0])

    dst[...] = _covariance(data, w)
    return dst


def correlation_matrix(
    data: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> np.ndarray:
    """
    Compute the weighted Pearson correlation matrix of the columns of data.

    Parameters
    ----------
    data : np.ndarray
        Observations (n_samples x n_columns). Not modified.
    weights : sequence of float, optional
        Non-negative weight per row (default: all ones). Not modified.

    Returns
    -------
    np.ndarray
        Symmetric correlation matrix (n_columns x n_columns)

    Raises
    ------
    DimensionMismatchError
        len(weights) != n_samples
    InvalidArgumentError
        Any weight is negative

    Notes
    -----
    R_ij = C_ij / (sigma_i * sigma_j), sigma_i = sqrt(C_ii)
    Diagonal elements are exactly 1 (see CorrelationConfig).
    A constant column gives NaN off-diagonal entries.
    """
    data = as_data(data)
    w = check_weights(weights, data.shape[0])
    return _correlation(data, w)


def correlation_matrix_into(
    dst: np.ndarray,
    data: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> np.ndarray:
    """
    Compute the correlation matrix of data into dst.

    The intermediate covariance uses fresh storage; dst is only written
    once the correlations are final. Returns dst.
    """
    data = as_data(data)
    check_destination(dst, (data.shape[1], data.shape[1]))
    w = check_weights(weights, data.shape[0])

    dst[...] = _correlation(data, w)
    return dst
