"""
Covmat Configuration

Centralized defaults for the covariance and correlation routines.
Avoids hardcoded magic numbers scattered across modules.

Usage:
    from covmat.config import CONFIG as cfg

    if cfg.correlation.force_unit_diagonal:
        np.fill_diagonal(corr, 1.0)
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CorrelationConfig:
    """Configuration for correlation matrices."""

    # Write exactly 1.0 on the diagonal instead of cov_ii / sigma_i**2
    force_unit_diagonal: bool = True


@dataclass(frozen=True)
class ToleranceConfig:
    """Tolerances used when comparing results."""

    # Covariance matrices are mirrored, so symmetry is exact
    symmetry_atol: float = 0.0

    # cov -> corr -> cov round trip
    roundtrip_atol: float = 1e-14

    # Vectorized vs pairwise backend agreement
    backend_atol: float = 1e-12


@dataclass(frozen=True)
class BenchmarkConfig:
    """Problem sizes for the benchmark script."""

    small: int = 10
    medium: int = 1000
    large: int = 100_000
    huge: int = 10_000_000

    # Timed calls per case (best of)
    repeats: int = 5

    # Constant weight used by the weighted cases
    weight: float = 0.5


@dataclass(frozen=True)
class CovmatConfig:
    """Master configuration."""

    correlation: CorrelationConfig = CorrelationConfig()
    tolerance: ToleranceConfig = ToleranceConfig()
    benchmark: BenchmarkConfig = BenchmarkConfig()


# Global singleton instance
CONFIG = CovmatConfig()
