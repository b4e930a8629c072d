"""BiCG sub-kernel: s := A'*r and q := A*p."""

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

# (m, n): A is n x m
SIZES = {
    Dataset.MINI: (32, 48),
    Dataset.SMALL: (128, 136),
    Dataset.MEDIUM: (512, 528),
    Dataset.LARGE: (1024, 1048),
    Dataset.EXTRALARGE: (2048, 2080),
}


def init_array(m: int, n: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(A, r, p)`` with ``A`` of shape ``(n, m)``."""
    p = (np.arange(m) % m / m).astype(float)
    r = (np.arange(n) % n / n).astype(float)
    i, j = np.indices((n, m))
    A = (i * (j + 1) % n / n).astype(float)
    return A, r, p


def kernel_bicg(m: int, n: int, A, p, r) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(s, q)`` with ``s = A'*r`` and ``q = A*p``."""
    A = np.asarray(A, dtype=float)
    p = np.asarray(p, dtype=float)
    r = np.asarray(r, dtype=float)
    if A.ndim != 2 or A.shape[0] < n or A.shape[1] < m:
        raise ValueError(f"A must be at least {n} x {m}")
    if p.ndim != 1 or p.shape[0] < m:
        raise ValueError(f"p must have at least {m} elements")
    if r.ndim != 1 or r.shape[0] < n:
        raise ValueError(f"r must have at least {n} elements")
    A = A[:n, :m]
    s = A.T @ r[:n]
    q = A @ p[:m]
    return s, q


def print_array(m: int, n: int, s, q) -> str:
    """Return the dump of the vectors ``s`` and ``q``."""
    s_items = ((i, float(s[i])) for i in range(m))
    q_items = ((i, float(q[i])) for i in range(n))
    return (
        DUMP_START
        + format_dump("s", s_items, False)
        + format_dump("q", q_items, False)
        + DUMP_FINISH
    )


def run(dataset) -> Tuple[Tuple[np.ndarray, np.ndarray], float]:
    """Run the kernel on a dataset; return ``(s, q)`` and the kernel time."""
    m, n = SIZES[parse_dataset(dataset)]
    A, r, p = init_array(m, n)
    start = time.perf_counter()
    result = kernel_bicg(m, n, A, p, r)
    return result, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "bicg")
    (s, q), elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(len(s), len(q), s, q))
    return 0


if __name__ == "__main__":
    sys.exit(main())