"""Forward substitution: solve L*x = b for lower triangular L."""

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


def init_array(n: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(L, b)``; the strict upper triangle of ``L`` is zero and unused."""
    i, j = np.indices((n, n))
    L = np.where(j <= i, (i + n - j + 1) * 2 / n, 0.0).astype(float)
    b = np.arange(n, dtype=float)
    return L, b


def kernel_trisolv(n: int, L, b) -> np.ndarray:
    """Return ``x`` with ``L*x = b``, reading only the lower triangle of ``L``.

    A zero on the diagonal yields infinities or NaNs, not an error.
    """
    L = np.asarray(L, dtype=float)
    b = np.asarray(b, dtype=float)
    if L.ndim != 2 or L.shape[0] < n or L.shape[1] < n:
        raise ValueError(f"L must be at least {n} x {n}")
    if b.ndim != 1 or b.shape[0] < n:
        raise ValueError(f"b must have at least {n} elements")
    x = np.empty(n)
    with np.errstate(divide="ignore", invalid="ignore"):
        for i, row in enumerate(L[:n, :n]):
            x[i] = (b[i] - row[:i] @ x[:i]) / row[i]
    return x


def print_array(n: int, x) -> str:
    """Return the dump of the vector ``x``."""
    items = ((i, float(x[i])) for i in range(n))
    return DUMP_START + format_dump("x", items, True) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``x`` and the kernel time."""
    n = SIZES[parse_dataset(dataset)]
    L, b = init_array(n)
    start = time.perf_counter()
    x = kernel_trisolv(n, L, b)
    return x, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "trisolv")
    x, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(len(x), x))
    return 0


if __name__ == "__main__":
    sys.exit(main())