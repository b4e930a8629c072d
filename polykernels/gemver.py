"""Vector multiplication and matrix addition: two rank-one updates, then two products."""

from __future__ import annotations

import sys
import time
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset, format_dump, parse_args, parse_dataset

SIZES = {
    Dataset.MINI: 40,
    Dataset.SMALL: 120,
    Dataset.MEDIUM: 400,
    Dataset.LARGE: 2000,
    Dataset.EXTRALARGE: 4000,
}


def _block(name: str, array, *shape: int) -> np.ndarray:
    """Return the leading ``shape`` block of ``array`` or raise ValueError."""
    array = np.asarray(array, dtype=float)
    if array.ndim != len(shape) or any(have < need for have, need in zip(array.shape, shape)):
        raise ValueError(f"{name} must be at least {' x '.join(map(str, shape))}")
    return array[tuple(slice(size) for size in shape)]


def init_array(n: int) -> tuple:
    """Return ``(alpha, beta, A, u1, v1, u2, v2, w, x, y, z)``."""
    step = (np.arange(n, dtype=float) + 1) / float(n)
    u2, v1, v2, y, z = (step / divisor for divisor in (2.0, 4.0, 6.0, 8.0, 9.0))
    i, j = np.indices((n, n))
    A = ((i * j) % n / n).astype(float)
    return 1.5, 1.2, A, np.arange(n, dtype=float), v1, u2, v2, np.zeros(n), np.zeros(n), y, z


def kernel_gemver(
    n: int,
    alpha: float,
    beta: float,
    A,
    u1,
    v1,
    u2,
    v2,
    w,
    x,
    y,
    z,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return the updated ``(A, x, w)``; the inputs are left unchanged.

    ``A += u1 v1' + u2 v2'``, ``x += beta A' y + z``, ``w += alpha A x``.
    """
    A = _block("A", A, n, n)
    names = ("u1", "v1", "u2", "v2", "w", "x", "y", "z")
    u1, v1, u2, v2, w, x, y, z = (
        _block(name, vector, n) for name, vector in zip(names, (u1, v1, u2, v2, w, x, y, z))
    )

    A_new = A + np.outer(u1, v1) + np.outer(u2, v2)
    x_new = x + beta * (A_new.T @ y) + z
    w_new = w + alpha * (A_new @ x_new)
    return A_new, x_new, w_new


def print_array(n: int, w) -> str:
    """Return the dump of the vector ``w``."""
    values = enumerate(float(value) for value in list(w)[:n])
    return f"{DUMP_START}{format_dump('w', values, False)}{DUMP_FINISH}"


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``w`` and the kernel time."""
    size = SIZES[parse_dataset(dataset)]
    arrays = init_array(size)
    tic = time.perf_counter()
    w = kernel_gemver(size, *arrays)[2]
    return w, time.perf_counter() - tic


def main(argv: Sequence[str] | None = None) -> int:
    parsed = parse_args(argv, "gemver")
    w, duration = run(parsed.dataset)
    if parsed.time:
        print(f"{duration:0.6f}")
    if parsed.dump:
        sys.stderr.write(print_array(len(w), w))
    return 0


if __name__ == "__main__":
    sys.exit(main())