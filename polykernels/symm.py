"""Symmetric matrix multiply: C := alpha*A*B + beta*C with A symmetric."""

from __future__ import annotations

import sys
import time
from itertools import product
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset, format_dump, parse_args, parse_dataset

#: (m, n) per dataset; shared by the symmetric and triangular BLAS kernels.
SIZES = {
    Dataset.MINI: (20, 30),
    Dataset.SMALL: (60, 80),
    Dataset.MEDIUM: (200, 240),
    Dataset.LARGE: (1000, 1200),
    Dataset.EXTRALARGE: (2000, 2600),
}

UNUSED = -999.0


def init_array(
    m: int, n: int
) -> Tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, C, A, B)``.

    Only the lower triangle of ``A`` is meaningful; the rest holds -999.
    """
    i, j = np.indices((m, n))
    C = ((i + j) % 100 / m).astype(float)
    B = ((n + i - j) % 100 / m).astype(float)
    i, j = np.indices((m, m))
    A = np.where(j <= i, (i + j) % 100 / m, UNUSED).astype(float)
    return 1.5, 1.2, C, A, B


def kernel_symm(m: int, n: int, alpha: float, beta: float, C, A, B) -> np.ndarray:
    """Return ``alpha*A*B + beta*C`` reading only the lower triangle of ``A``.

    The inputs are left unchanged.
    """
    C, A, B = (np.asarray(array, dtype=float) for array in (C, A, B))
    for label, array, rows, cols in (("C", C, m, n), ("A", A, m, m), ("B", B, m, n)):
        if array.ndim != 2 or min(array.shape[0] - rows, array.shape[1] - cols) < 0:
            raise ValueError(f"{label} must be at least {rows} x {cols}")
    lower = np.tril(A[:m, :m])
    symmetric = lower + np.tril(lower, -1).T
    return beta * C[:m, :n] + alpha * (symmetric @ B[:m, :n])


def print_array(m: int, n: int, C) -> str:
    """Return the dump of the ``m`` by ``n`` result matrix."""
    entries = ((i * m + j, float(C[i][j])) for i, j in product(range(m), range(n)))
    return DUMP_START + format_dump("C", entries, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    inputs = init_array(m, n)
    mark = time.perf_counter()
    updated = kernel_symm(m, n, *inputs)
    return updated, time.perf_counter() - mark


def main(argv: Sequence[str] | None = None) -> int:
    opts = parse_args(argv, "symm")
    updated, spent = run(opts.dataset)
    if opts.time:
        print(f"{spent:0.6f}")
    if opts.dump:
        sys.stderr.write(print_array(*updated.shape, updated))
    return 0


if __name__ == "__main__":
    sys.exit(main())