"""Matrix transpose and vector multiplication: y := A'*(A*x)."""

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

# (m, n): A is m x n
SIZES = {
    Dataset.MINI: (32, 48),
    Dataset.SMALL: (128, 136),
    Dataset.MEDIUM: (512, 528),
    Dataset.LARGE: (1024, 1048),
    Dataset.EXTRALARGE: (2048, 2080),
}


def init_array(m: int, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(A, x)`` with ``A`` of shape ``(m, n)``."""
    x = 1 + np.arange(n, dtype=float) / float(n)
    i, j = np.indices((m, n))
    A = ((i + j) % n / (5 * m)).astype(float)
    return A, x


def kernel_atax(m: int, n: int, A, x) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(y, tmp)`` with ``tmp = A*x`` and ``y = A'*tmp``."""
    A = np.asarray(A, dtype=float)
    x = np.asarray(x, dtype=float)
    if A.ndim != 2 or A.shape[0] < m or A.shape[1] < n:
        raise ValueError(f"A must be at least {m} x {n}")
    if x.ndim != 1 or x.shape[0] < n:
        raise ValueError(f"x must have at least {n} elements")
    A = A[:m, :n]
    tmp = A @ x[:n]
    y = A.T @ tmp
    return y, tmp


def print_array(n: int, y) -> str:
    """Return the dump of the vector ``y``."""
    items = ((i, float(y[i])) for i in range(n))
    return DUMP_START + format_dump("y", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``y`` and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    A, x = init_array(m, n)
    start = time.perf_counter()
    y, _ = kernel_atax(m, n, A, x)
    return y, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "atax")
    y, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(len(y), y))
    return 0


if __name__ == "__main__":
    sys.exit(main())