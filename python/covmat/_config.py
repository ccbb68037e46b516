"""
Environment switches, read once at import.

COVMAT_USE_VECTORIZED=0 forces the pairwise reference path.
COVMAT_LOG_LEVEL sets the package logger level (e.g. DEBUG).
"""
import logging
import os

USE_VECTORIZED = os.environ.get("COVMAT_USE_VECTORIZED", "1") != "0"


def _env_log_level():
    """Resolve COVMAT_LOG_LEVEL to a logging level, or None if unset/unknown."""
    name = os.environ.get("COVMAT_LOG_LEVEL")
    if not name:
        return None
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else None


LOG_LEVEL = _env_log_level()
