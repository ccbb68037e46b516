"""
Precondition checks shared by the statistics and matrix routines.

Every check runs before any computation or write, so a failing call
leaves its destination untouched.
"""

import logging

import numpy as np
from typing import Optional, Sequence, Tuple

from covmat.errors import DimensionMismatchError, InvalidArgumentError

logger = logging.getLogger(__name__)


def as_data(data) -> np.ndarray:
    """Convert observations to a 2-D float array (rows = samples)."""
    data = np.asarray(data, dtype=float)
    if data.ndim == 1:
        data = data.reshape(-1, 1)
    if data.ndim != 2:
        raise DimensionMismatchError(
            f"data must be 2-D (n_samples x n_columns), got {data.ndim}-D"
        )
    return data


def as_vector(x, name: str = "x") -> np.ndarray:
    """Convert a sequence to a 1-D float array."""
    x = np.asarray(x, dtype=float)
    if x.ndim != 1:
        raise DimensionMismatchError(f"{name} must be 1-D, got {x.ndim}-D")
    return x


def check_weights(weights: Optional[Sequence[float]], n_rows: int) -> Optional[np.ndarray]:
    """
    Validate sample weights against the number of observations.

    Parameters
    ----------
    weights : sequence of float or None
        One non-negative weight per row, or None for uniform weights
    n_rows : int
        Number of observations

    Returns
    -------
    np.ndarray or None
        Weights as a float copy, or None when not supplied

    Raises
    ------
    DimensionMismatchError
        len(weights) != n_rows
    InvalidArgumentError
        Any weight is negative
    """
    if weights is None:
        return None

    w = np.array(weights, dtype=float).reshape(-1)
    if len(w) != n_rows:
        logger.debug("weights length %d does not match %d rows", len(w), n_rows)
        raise DimensionMismatchError(
            f"weights length {len(w)} does not match number of rows {n_rows}"
        )
    if np.any(w < 0):
        logger.debug("negative weight at index %d", int(np.argmax(w < 0)))
        raise InvalidArgumentError("weights must be non-negative")
    return w


def check_destination(dst, shape: Tuple[int, int]) -> np.ndarray:
    """Require a writable float ndarray with exactly ``shape``."""
    if not isinstance(dst, np.ndarray):
        raise InvalidArgumentError(
            f"destination must be a numpy.ndarray, got {type(dst).__name__}"
        )
    if dst.shape != shape:
        logger.debug("destination shape %s, expected %s", dst.shape, shape)
        raise DimensionMismatchError(
            f"destination has shape {dst.shape}, expected {shape}"
        )
    if not np.issubdtype(dst.dtype, np.floating):
        raise InvalidArgumentError(
            f"destination must have a floating dtype, got {dst.dtype}"
        )
    return dst


def check_square(matrix) -> np.ndarray:
    """Require a square 2-D float ndarray (for in-place conversions)."""
    if not isinstance(matrix, np.ndarray):
        raise InvalidArgumentError(
            f"matrix must be a numpy.ndarray, got {type(matrix).__name__}"
        )
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError("Matrix must be square")
    if not np.issubdtype(matrix.dtype, np.floating):
        raise InvalidArgumentError(
            f"matrix must have a floating dtype, got {matrix.dtype}"
        )
    return matrix


def check_sigmas(sigmas: Sequence[float], n: int) -> np.ndarray:
    """Require one standard deviation per matrix dimension."""
    s = np.asarray(sigmas, dtype=float).reshape(-1)
    if len(s) != n:
        logger.debug("sigma length %d does not match dimension %d", len(s), n)
        raise DimensionMismatchError(
            f"sigmas length {len(s)} does not match matrix dimension {n}"
        )
    return s
