"""
Errors raised on precondition violations.

All of them subclass ValueError so callers catching numpy-style
argument errors keep working.
"""


class CovmatError(ValueError):
    """Base class for covmat errors."""


class DimensionMismatchError(CovmatError):
    """Weights, destination or sigma vector have the wrong size."""


class InvalidArgumentError(CovmatError):
    """An argument has a value outside its domain (e.g. negative weight)."""
