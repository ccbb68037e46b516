"""
Pairwise Covariance and Correlation

Weighted statistics of two equal-length samples. These are the scalar
counterparts of the matrix routines in covmat.matrix.covariance.
"""

import numpy as np
from typing import Optional, Sequence, Tuple

from covmat._checks import as_vector, check_weights
from covmat.errors import DimensionMismatchError
from covmat.individual.statistics import mean


def _centered_sums(
    x: np.ndarray,
    y: np.ndarray,
    weights: Optional[Sequence[float]],
) -> Tuple[float, float, float, float, float, float]:
    """Return (sxx, syy, sxy, x_comp, y_comp, sum_w) about the weighted means."""
    x = as_vector(x, "x")
    y = as_vector(y, "y")
    if len(x) != len(y):
        raise DimensionMismatchError(
            f"x and y must have the same length, got {len(x)} and {len(y)}"
        )
    w = check_weights(weights, len(x))

    dx = x - mean(x, w)
    dy = y - mean(y, w)

    if w is None:
        return (
            np.dot(dx, dx), np.dot(dy, dy), np.dot(dx, dy),
            np.sum(dx), np.sum(dy), np.float64(len(x)),
        )

    wdx = w * dx
    wdy = w * dy
    return (
        np.dot(wdx, dx), np.dot(wdy, dy), np.dot(wdx, dy),
        np.sum(wdx), np.sum(wdy), np.sum(w),
    )


def covariance(
    x: np.ndarray,
    y: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> float:
    """
    Compute the bias-corrected (weighted) sample covariance.

    Parameters
    ----------
    x, y : np.ndarray
        Input samples of equal length
    weights : sequence of float, optional
        Non-negative weight per sample (default: all ones)

    Returns
    -------
    float
        Covariance. Inf or NaN when sum(w) <= 1.

    Notes
    -----
    cov(x, y) = sum(w_i (x_i - mu_x)(y_i - mu_y)) / (sum(w_i) - 1)
    covariance(x, x) equals variance(x).
    """
    _, _, sxy, x_comp, y_comp, sum_w = _centered_sums(x, y, weights)

    with np.errstate(divide='ignore', invalid='ignore'):
        return float((sxy - x_comp * y_comp / sum_w) / (sum_w - 1))


def correlation(
    x: np.ndarray,
    y: np.ndarray,
    weights: Optional[Sequence[float]] = None
) -> float:
    """
    Compute the (weighted) Pearson correlation coefficient.

    Parameters
    ----------
    x, y : np.ndarray
        Input samples of equal length
    weights : sequence of float, optional
        Non-negative weight per sample (default: all ones)

    Returns
    -------
    float
        Correlation in [-1, 1]. NaN if either sample is constant.

    Notes
    -----
    r = cov(x, y) / (std(x) * std(y))
    The (sum(w) - 1) normalisation cancels.
    """
    sxx, syy, sxy, x_comp, y_comp, sum_w = _centered_sums(x, y, weights)

    with np.errstate(divide='ignore', invalid='ignore'):
        sxx = sxx - x_comp * x_comp / sum_w
        syy = syy - y_comp * y_comp / sum_w
        sxy = sxy - x_comp * y_comp / sum_w
        return float(sxy / np.sqrt(sxx * syy))
