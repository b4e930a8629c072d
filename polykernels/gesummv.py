"""Sum of two scaled matrix-vector products: y := alpha*A*x + beta*B*x."""

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
    Dataset.MINI: 30,
    Dataset.SMALL: 90,
    Dataset.MEDIUM: 250,
    Dataset.LARGE: 1300,
    Dataset.EXTRALARGE: 2800,
}


def init_array(n: int) -> Tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, A, B, x)``."""
    x = (np.arange(n) % n / n).astype(float)
    i, j = np.indices((n, n))
    A = ((i * j + 1) % n / n).astype(float)
    B = ((i * j + 2) % n / n).astype(float)
    return 1.5, 1.2, A, B, x


def kernel_gesummv(n: int, alpha: float, beta: float, A, B, x) -> np.ndarray:
    """Return ``alpha*A*x + beta*B*x``; the inputs are left unchanged."""
    A = np.asarray(A, dtype=float)
    B = np.asarray(B, dtype=float)
    x = np.asarray(x, dtype=float)
    for name, matrix in (("A", A), ("B", B)):
        if matrix.ndim != 2 or matrix.shape[0] < n or matrix.shape[1] < n:
            raise ValueError(f"{name} must be at least {n} x {n}")
    if x.ndim != 1 or x.shape[0] < n:
        raise ValueError(f"x must have at least {n} elements")
    x = x[:n]
    tmp = A[:n, :n] @ x
    y = B[:n, :n] @ x
    return alpha * tmp + beta * y


def print_array(n: int, y) -> str:
    """Return the dump of the vector ``y``."""
    items = ((i, float(y[i])) for i in range(n))
    return DUMP_START + format_dump("y", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``y`` and the kernel time."""
    n = SIZES[parse_dataset(dataset)]
    alpha, beta, A, B, x = init_array(n)
    start = time.perf_counter()
    y = kernel_gesummv(n, alpha, beta, A, B, x)
    return y, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "gesummv")
    y, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(len(y), y))
    return 0


if __name__ == "__main__":
    sys.exit(main())