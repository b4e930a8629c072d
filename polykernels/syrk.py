"""Symmetric rank-k update of the lower triangle: C := alpha*A*A' + beta*C."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, format_dump, parse_args, parse_dataset
from polykernels.symm import SIZES


def init_array(n: int, m: int) -> Tuple[float, float, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, C, A)``."""
    r, s = np.indices((n, m))
    A = ((r * s + 1) % n / n).astype(float)
    r, s = np.indices((n, n))
    C = ((r * s + 2) % m / m).astype(float)
    return 1.5, 1.2, C, A


def kernel_syrk(n: int, m: int, alpha: float, beta: float, C, A) -> np.ndarray:
    """Return C with its lower triangle set to ``alpha*A*A' + beta*C``.

    The strict upper triangle is copied from ``C``. The inputs are left
    unchanged.
    """
    C, A = np.asarray(C, dtype=float), np.asarray(A, dtype=float)
    for label, array, rows, cols in (("C", C, n, n), ("A", A, n, m)):
        if array.ndim != 2 or not (array.shape[0] >= rows and array.shape[1] >= cols):
            raise ValueError(f"{label} must be at least {rows} x {cols}")
    C, A = C[:n, :n], A[:n, :m]
    return np.where(np.tri(n, dtype=bool), beta * C + alpha * (A @ A.T), C)


def print_array(n: int, C) -> str:
    """Return the dump of the ``n`` by ``n`` result matrix."""
    matrix = np.asarray(C, dtype=float)[:n, :n]
    body = format_dump("C", ((k, float(v)) for k, v in enumerate(matrix.flat)), False)
    return "".join((DUMP_START, body, DUMP_FINISH))


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    alpha, beta, C, A = init_array(n, m)
    clock = time.perf_counter()
    rank_k = kernel_syrk(n, m, alpha, beta, C, A)
    return rank_k, time.perf_counter() - clock


def main(argv: Sequence[str] | None = None) -> int:
    given = parse_args(argv, "syrk")
    rank_k, interval = run(given.dataset)
    if given.time:
        print(f"{interval:0.6f}")
    if given.dump:
        sys.stderr.write(print_array(rank_k.shape[0], rank_k))
    return 0


if __name__ == "__main__":
    sys.exit(main())