"""
Timings for the covariance routines.

Cases: covariance_matrix (plain, weighted, into a destination) at
small/medium/large shapes, plus the two in-place converters on a
small x small matrix. Sizes come from CONFIG.benchmark.

    python benchmarks/bench_covariance.py [--huge]
"""
import argparse
import time

import numpy as np

from covmat import BACKEND
from covmat.config import CONFIG
from covmat.matrix.conversion import corr_to_cov, cov_to_corr
from covmat.matrix.covariance import (
    correlation_matrix,
    covariance_matrix,
    covariance_matrix_into,
)

cfg = CONFIG.benchmark


def rand_mat(rows, cols, seed=42):
    return np.random.RandomState(seed).rand(rows, cols)


def bench_fn(name, fn, setup=None):
    """Best wall time of cfg.repeats calls; setup runs untimed before each."""
    best = np.inf
    for _ in range(cfg.repeats):
        arg = setup() if setup is not None else None
        t0 = time.perf_counter()
        fn() if arg is None else fn(arg)
        best = min(best, time.perf_counter() - t0)
    print(f"{name:<48s} {best * 1e3:12.4f} ms")


def shapes(include_huge):
    yield "SmallxSmall", cfg.small, cfg.small
    yield "SmallxMedium", cfg.small, cfg.medium
    yield "MediumxSmall", cfg.medium, cfg.small
    yield "MediumxMedium", cfg.medium, cfg.medium
    yield "LargexSmall", cfg.large, cfg.small
    if include_huge:
        yield "HugexSmall", cfg.huge, cfg.small


def run(include_huge=False):
    print(f"backend: {BACKEND}")

    for label, rows, cols in shapes(include_huge):
        m = rand_mat(rows, cols)
        wts = np.full(rows, cfg.weight)
        res = np.empty((cols, cols))

        bench_fn(f"CovarianceMatrix{label}", lambda: covariance_matrix(m))
        bench_fn(f"CovarianceMatrix{label}Weighted", lambda: covariance_matrix(m, wts))
        bench_fn(f"CovarianceMatrix{label}InPlace", lambda: covariance_matrix_into(res, m))

    cov = covariance_matrix(rand_mat(cfg.small, cfg.small))
    bench_fn("CovToCorr", cov_to_corr, setup=cov.copy)

    corr = correlation_matrix(rand_mat(cfg.small, cfg.small))
    sigma = np.full(cfg.small, 2.0)
    bench_fn("CorrToCov", lambda cc: corr_to_cov(cc, sigma), setup=corr.copy)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--huge", action="store_true",
                        help="include the huge x small case (~800 MB)")
    run(parser.parse_args().huge)
