"""
Weighted Statistical Primitives

Mean, variance and standard deviation of a single column, with optional
per-sample weights. Weights are relative: they need not sum to one.
"""

import numpy as np
from typing import Optional, Sequence

from covmat._checks import as_data, as_vector, check_weights


def mean(x: np.ndarray, weights: Optional[Sequence[float]] = None) -> float:
    """
    Compute the (weighted) arithmetic mean.

    Parameters
    ----------
    x : np.ndarray
        Input samples
    weights : sequence of float, optional
        Non-negative weight per sample (default: all ones)

    Returns
    -------
    float
        Weighted mean. NaN if all weights are zero.

    Notes
    -----
    mean = sum(w_i * x_i) / sum(w_i)
    """
    x = as_vector(x)
    w = check_weights(weights, len(x))

    with np.errstate(divide='ignore', invalid='ignore'):
        if w is None:
            return float(np.sum(x) / np.float64(len(x)))
        return float(np.dot(w, x) / np.sum(w))


def variance(x: np.ndarray, weights: Optional[Sequence[float]] = None) -> float:
    """
    Compute the bias-corrected (weighted) sample variance.

    Parameters
    ----------
    x : np.ndarray
        Input samples
    weights : sequence of float, optional
        Non-negative weight per sample (default: all ones)

    Returns
    -------
    float
        Sample variance. Inf or NaN when sum(w) <= 1.

    Notes
    -----
    var = sum(w_i * (x_i - mean)^2) / (sum(w_i) - 1)

    The compensation term sum(w_i * (x_i - mean)) is subtracted to
    cancel the rounding error of the mean.
    """
    x = as_vector(x)
    w = check_weights(weights, len(x))
    mu = mean(x, w)
    d = x - mu

    with np.errstate(divide='ignore', invalid='ignore'):
        if w is None:
            sum_w = np.float64(len(x))
            ss = np.dot(d, d)
            comp = np.sum(d)
        else:
            sum_w = np.sum(w)
            ss = np.dot(w * d, d)
            comp = np.dot(w, d)
        return float((ss - comp * comp / sum_w) / (sum_w - 1))


def std(x: np.ndarray, weights: Optional[Sequence[float]] = None) -> float:
    """Bias-corrected (weighted) sample standard deviation."""
    with np.errstate(invalid='ignore'):
        return float(np.sqrt(variance(x, weights)))


def column_means(data: np.ndarray, weights: Optional[Sequence[float]] = None) -> np.ndarray:
    """
    Compute the (weighted) mean of every column.

    Parameters
    ----------
    data : np.ndarray
        Observations (n_samples x n_columns)
    weights : sequence of float, optional
        Non-negative weight per row (default: all ones)

    Returns
    -------
    np.ndarray
        1-D array of n_columns means
    """
    data = as_data(data)
    w = check_weights(weights, data.shape[0])

    with np.errstate(divide='ignore', invalid='ignore'):
        if w is None:
            return data.sum(axis=0) / np.float64(data.shape[0])
        return (w @ data) / np.sum(w)
