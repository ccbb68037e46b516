"""
covmat — weighted covariance and correlation matrices.

Standalone compute package on top of numpy. No circular dependencies.

Usage:
    from covmat import covariance_matrix, correlation_matrix
    from covmat import cov_to_corr, corr_to_cov

    # Or import by category:
    from covmat.individual.statistics import mean, variance, std
    from covmat.pairwise.correlation import covariance, correlation
    from covmat.matrix.covariance import covariance_matrix_into
"""
__version__ = "0.1.0"

import logging

from covmat._config import LOG_LEVEL as _LOG_LEVEL
from covmat._config import USE_VECTORIZED as _USE_VECTORIZED

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())
if _LOG_LEVEL is not None:
    _logger.setLevel(_LOG_LEVEL)

BACKEND = "numpy" if _USE_VECTORIZED else "pairwise"

from covmat.errors import (  # noqa: E402
    CovmatError,
    DimensionMismatchError,
    InvalidArgumentError,
)
from covmat.individual.statistics import mean, variance, std  # noqa: E402
from covmat.pairwise.correlation import covariance, correlation  # noqa: E402
from covmat.matrix.covariance import (  # noqa: E402
    covariance_matrix,
    covariance_matrix_into,
    correlation_matrix,
    correlation_matrix_into,
)
from covmat.matrix.conversion import cov_to_corr, corr_to_cov  # noqa: E402

# Subpackages
from covmat import individual  # noqa: F401, E402
from covmat import pairwise  # noqa: F401, E402
from covmat import matrix  # noqa: F401, E402

__all__ = [
    # Matrix routines (top-level convenience exports)
    "covariance_matrix",
    "covariance_matrix_into",
    "correlation_matrix",
    "correlation_matrix_into",
    "cov_to_corr",
    "corr_to_cov",
    # Scalar routines
    "mean",
    "variance",
    "std",
    "covariance",
    "correlation",
    # Errors
    "CovmatError",
    "DimensionMismatchError",
    "InvalidArgumentError",
    "BACKEND",
    # Subpackages
    "individual",
    "pairwise",
    "matrix",
]
