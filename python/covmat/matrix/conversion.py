"""
Covariance <-> Correlation Conversion

In-place rescaling between the two representations.
"""

import logging

import numpy as np
from typing import Sequence

from covmat._checks import check_sigmas, check_square

logger = logging.getLogger(__name__)


def cov_to_corr(matrix: np.ndarray) -> np.ndarray:
    """
    Convert a covariance matrix to a correlation matrix, in place.

    Parameters
    ----------
    matrix : np.ndarray
        Square covariance matrix (n x n), float dtype. Overwritten.

    Returns
    -------
    np.ndarray
        The same object, now holding correlations

    Notes
    -----
    sigma_i = sqrt(C_ii)
    R_ij = C_ij / (sigma_i * sigma_j)

    A negative variance gives a NaN sigma, which propagates into its
    row and column.
    """
    check_square(matrix)

    with np.errstate(divide='ignore', invalid='ignore'):
        sigmas = np.sqrt(np.diag(matrix))
        matrix /= np.outer(sigmas, sigmas)

    return matrix


def corr_to_cov(matrix: np.ndarray, sigmas: Sequence[float]) -> np.ndarray:
    """
    Convert a correlation matrix to a covariance matrix, in place.

    Parameters
    ----------
    matrix : np.ndarray
        Square correlation matrix (n x n), float dtype. Overwritten.
    sigmas : sequence of float
        Standard deviation of each of the n variables

    Returns
    -------
    np.ndarray
        The same object, now holding covariances

    Raises
    ------
    DimensionMismatchError
        len(sigmas) != n

    Notes
    -----
    C_ij = R_ij * sigma_i * sigma_j
    """
    check_square(matrix)
    s = check_sigmas(sigmas, matrix.shape[0])

    matrix *= np.outer(s, s)
    return matrix
