"""Symmetric rank-2k update of the lower triangle of C."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, format_dump, parse_args, parse_dataset
from polykernels.symm import SIZES


def init_array(
    n: int, m: int
) -> Tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, C, A, B)``."""
    row, col = np.indices((n, m))
    A = ((row * col + 1) % n / n).astype(float)
    B = ((row * col + 2) % m / m).astype(float)
    row, col = np.indices((n, n))
    C = ((row * col + 3) % n / m).astype(float)
    return 1.5, 1.2, C, A, B


def kernel_syr2k(n: int, m: int, alpha: float, beta: float, C, A, B) -> np.ndarray:
    """Return C with its lower triangle set to ``alpha*(A*B' + B*A') + beta*C``.

    The strict upper triangle is copied from ``C``. The inputs are left
    unchanged.
    """
    needed = {"C": (n, n), "A": (n, m), "B": (n, m)}
    trimmed = []
    for label, given in zip(needed, (C, A, B)):
        matrix = np.asarray(given, dtype=float)
        if matrix.ndim != 2 or np.any(np.subtract(matrix.shape, needed[label]) < 0):
            raise ValueError(f"{label} must be at least {needed[label][0]} x {needed[label][1]}")
        trimmed.append(matrix[: needed[label][0], : needed[label][1]])
    C, A, B = trimmed
    updated = beta * C + alpha * (B @ A.T + A @ B.T)
    return np.where(np.tri(n, dtype=bool), updated, C)


def print_array(n: int, C) -> str:
    """Return the dump of the ``n`` by ``n`` result matrix."""
    flat = [float(C[i][j]) for i in range(n) for j in range(n)]
    return DUMP_START + format_dump("C", enumerate(flat), False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    prepared = init_array(n, m)
    origin = time.perf_counter()
    lower = kernel_syr2k(n, m, *prepared)
    return lower, time.perf_counter() - origin


def main(argv: Sequence[str] | None = None) -> int:
    request = parse_args(argv, "syr2k")
    lower, wall = run(request.dataset)
    if request.time:
        print(f"{wall:0.6f}")
    if request.dump:
        sys.stderr.write(print_array(len(lower), lower))
    return 0


if __name__ == "__main__":
    sys.exit(main())