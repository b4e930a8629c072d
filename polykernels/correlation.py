"""Correlation matrix of the columns of a data matrix."""

from __future__ import annotations

import math
import sys
import time
from itertools import product
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset, format_dump, parse_args, parse_dataset

EPS = 0.1

#: (m, n) per dataset: m columns (variables), n rows (observations).
SIZES = {
    Dataset.MINI: (280, 320),
    Dataset.SMALL: (800, 1000),
    Dataset.MEDIUM: (2400, 2600),
    Dataset.LARGE: (12000, 14000),
    Dataset.EXTRALARGE: (26000, 30000),
}


def init_array(m: int, n: int) -> Tuple[float, np.ndarray]:
    """Return ``(float_n, data)`` with ``data`` of shape ``(n, m)``."""
    i, j = np.indices((n, m), dtype=float)
    return float(n), i * j / m + i


def kernel_correlation(
    m: int, n: int, float_n: float, data: np.ndarray
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(corr, mean, stddev)`` for the first ``n`` rows and ``m`` columns.

    Standard deviations at or below 0.1 are replaced by 1 to avoid dividing
    by values near zero. The input array is left unchanged.
    """
    if m < 1:
        raise ValueError("correlation needs at least one column")
    data = np.asarray(data, dtype=float)
    if data.ndim != 2 or data.shape[0] < n or data.shape[1] < m:
        raise ValueError(f"data must have at least {n} rows and {m} columns")
    data = data[:n, :m]

    mean = data.sum(axis=0) / float_n
    centered = data - mean
    stddev = np.sqrt((centered * centered).sum(axis=0) / float_n)
    stddev = np.where(stddev <= EPS, 1.0, stddev)

    normalized = centered / (math.sqrt(float_n) * stddev)
    corr = normalized.T @ normalized
    np.fill_diagonal(corr, 1.0)
    return corr, mean, stddev


def print_array(m: int, corr: np.ndarray) -> str:
    """Return the dump of the ``m`` by ``m`` correlation matrix."""
    items = ((i * m + j, float(corr[i, j])) for i, j in product(range(m), repeat=2))
    return DUMP_START + format_dump("corr", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the matrix and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    float_n, data = init_array(m, n)
    start = time.perf_counter()
    corr = kernel_correlation(m, n, float_n, data)[0]
    return corr, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    options = parse_args(argv, "correlation")
    corr, elapsed = run(options.dataset)
    if options.time:
        print(f"{elapsed:0.6f}")
    if options.dump:
        sys.stderr.write(print_array(len(corr), corr))
    return 0


if __name__ == "__main__":
    sys.exit(main())