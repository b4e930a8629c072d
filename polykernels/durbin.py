"""Levinson-Durbin recursion for Toeplitz (Yule-Walker) systems."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import (
    DUMP_FINISH,
    DUMP_START,
    Dataset,
    format_dump,
    parse_args,
    parse_dataset,
)

SIZES = {
    Dataset.MINI: 32,
    Dataset.SMALL: 256,
    Dataset.MEDIUM: 1024,
    Dataset.LARGE: 2048,
    Dataset.EXTRALARGE: 4096,
}


def init_array(n: int) -> np.ndarray:
    """Return ``r`` with ``r[i] = n + 1 - i``."""
    return (n + 1 - np.arange(n)).astype(float)


def kernel_durbin(n: int, r) -> np.ndarray:
    """Return ``y`` solving ``T*y = -r``.

    ``T`` is the symmetric Toeplitz matrix with a unit diagonal and
    ``T[i, j] = r[|i - j| - 1]`` elsewhere. A singular leading block yields
    infinities or NaNs, not an error.
    """
    if n < 1:
        raise ValueError("durbin needs at least one element")
    r = np.asarray(r, dtype=float)
    if r.ndim != 1 or r.shape[0] < n:
        raise ValueError(f"r must have at least {n} elements")
    y = np.empty(n)
    y[0] = -r[0]
    beta = np.float64(1.0)
    alpha = -r[0]
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for k in range(1, n):
            beta = (1 - alpha * alpha) * beta
            total = r[:k][::-1] @ y[:k]
            alpha = -(r[k] + total) / beta
            y[:k] = y[:k] + alpha * y[:k][::-1]
            y[k] = alpha
    return y


def print_array(n: int, y) -> str:
    """Return the dump of the vector ``y``."""
    items = ((i, float(y[i])) for i in range(n))
    return DUMP_START + format_dump("y", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``y`` and the kernel time."""
    n = SIZES[parse_dataset(dataset)]
    r = init_array(n)
    start = time.perf_counter()
    y = kernel_durbin(n, r)
    return y, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "durbin")
    y, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(len(y), y))
    return 0


if __name__ == "__main__":
    sys.exit(main())