"""Covariance matrix of the columns of a data matrix."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, format_dump, parse_args, parse_dataset
from polykernels.correlation import SIZES


def init_array(m: int, n: int) -> Tuple[float, np.ndarray]:
    """Return ``(float_n, data)`` with ``data`` of shape ``(n, m)``."""
    rows, cols = np.indices((n, m), dtype=float)
    return float(n), rows * cols / m


def kernel_covariance(
    m: int, n: int, float_n: float, data: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(cov, mean)`` for the first ``n`` rows and ``m`` columns.

    The covariance is normalised by ``float_n - 1``. The input array is left
    unchanged.
    """
    block = np.asarray(data, dtype=float)
    if block.ndim != 2 or block[:n, :m].shape != (n, m):
        raise ValueError(f"data must have at least {n} rows and {m} columns")
    block = block[:n, :m]

    mean = block.mean(axis=0) if float_n == n else block.sum(axis=0) / float_n
    deviations = block - mean
    with np.errstate(divide="ignore", invalid="ignore"):
        cov = (deviations.T @ deviations) / (float_n - 1.0)
    return cov, mean


def print_array(m: int, cov: np.ndarray) -> str:
    """Return the dump of the ``m`` by ``m`` covariance matrix."""
    flat = np.asarray(cov, dtype=float)[:m, :m].ravel()
    body = format_dump("cov", enumerate(map(float, flat)), False)
    return f"{DUMP_START}{body}{DUMP_FINISH}"


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the matrix and the kernel time."""
    columns, rows = SIZES[parse_dataset(dataset)]
    float_n, data = init_array(columns, rows)
    began = time.perf_counter()
    cov, _ = kernel_covariance(columns, rows, float_n, data)
    return cov, time.perf_counter() - began


def main(argv: Sequence[str] | None = None) -> int:
    settings = parse_args(argv, "covariance")
    cov, took = run(settings.dataset)
    if settings.time:
        print(f"{took:0.6f}")
    if settings.dump:
        sys.stderr.write(print_array(cov.shape[0], cov))
    return 0


if __name__ == "__main__":
    sys.exit(main())