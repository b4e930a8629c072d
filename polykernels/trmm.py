"""Triangular matrix multiply: B := alpha*A'*B with A unit lower triangular."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, format_dump, parse_args, parse_dataset
from polykernels.symm import SIZES


def init_array(m: int, n: int) -> Tuple[float, np.ndarray, np.ndarray]:
    """Return ``(alpha, A, B)``.

    ``A`` has a unit diagonal; its strict upper triangle is zero and unused.
    """
    i, j = np.indices((m, m))
    A = np.where(j < i, (i + j) % m / m, 0.0).astype(float)
    np.fill_diagonal(A, 1.0)
    i, j = np.indices((m, n))
    B = ((n + (i - j)) % n / n).astype(float)
    return 1.5, A, B


def kernel_trmm(m: int, n: int, alpha: float, A, B) -> np.ndarray:
    """Return ``alpha*(I + L')*B`` where ``L`` is the strict lower triangle of A.

    The diagonal and upper triangle of ``A`` are not read. The inputs are
    left unchanged.
    """
    triangle, right = np.asarray(A, dtype=float), np.asarray(B, dtype=float)
    for label, matrix, cols in (("A", triangle, m), ("B", right, n)):
        if matrix.ndim != 2 or matrix[:m, :cols].shape != (m, cols):
            raise ValueError(f"{label} must be at least {m} x {cols}")
    right = right[:m, :n]
    return alpha * (right + np.tril(triangle[:m, :m], -1).T @ right)


def print_array(m: int, n: int, B) -> str:
    """Return the dump of the ``m`` by ``n`` result matrix."""
    cells = [(i * m + j, float(B[i][j])) for i in range(m) for j in range(n)]
    return f"{DUMP_START}{format_dump('B', cells, False)}{DUMP_FINISH}"


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    alpha, A, B = init_array(m, n)
    before = time.perf_counter()
    scaled = kernel_trmm(m, n, alpha, A, B)
    return scaled, time.perf_counter() - before


def main(argv: Sequence[str] | None = None) -> int:
    arguments = parse_args(argv, "trmm")
    scaled, lapse = run(arguments.dataset)
    if arguments.time:
        print(f"{lapse:0.6f}")
    if arguments.dump:
        sys.stderr.write(print_array(*scaled.shape, scaled))
    return 0


if __name__ == "__main__":
    sys.exit(main())