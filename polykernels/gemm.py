"""General matrix multiply: C := alpha*A*B + beta*C."""

from __future__ import annotations

import sys
import time
from itertools import product
from typing import Sequence, Tuple

import numpy as np

from polykernels.common import DUMP_FINISH, DUMP_START, Dataset, format_dump, parse_args, parse_dataset

#: (ni, nj, nk) per dataset: C is ni x nj, A is ni x nk, B is nk x nj.
SIZES = {
    Dataset.MINI: (20, 25, 30),
    Dataset.SMALL: (60, 70, 80),
    Dataset.MEDIUM: (200, 220, 240),
    Dataset.LARGE: (1000, 1100, 1200),
    Dataset.EXTRALARGE: (2000, 2300, 2600),
}


def init_array(
    ni: int, nj: int, nk: int
) -> Tuple[float, float, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, C, A, B)``."""
    i, j = np.indices((ni, nj))
    C = ((i * j + 1) % ni) / ni
    i, j = np.indices((ni, nk))
    A = (i * (j + 1) % nk) / nk
    i, j = np.indices((nk, nj))
    B = (i * (j + 2) % nj) / nj
    return 1.5, 1.2, C.astype(float), A.astype(float), B.astype(float)


def kernel_gemm(
    ni: int,
    nj: int,
    nk: int,
    alpha: float,
    beta: float,
    C: np.ndarray,
    A: np.ndarray,
    B: np.ndarray,
) -> np.ndarray:
    """Return ``alpha*A*B + beta*C``; the inputs are left unchanged."""
    shapes = {"C": (ni, nj), "A": (ni, nk), "B": (nk, nj)}
    blocks = {}
    for label, given in zip(shapes, (C, A, B)):
        array = np.asarray(given, dtype=float)
        rows, cols = shapes[label]
        if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
            raise ValueError(f"{label} must be at least {rows} x {cols}")
        blocks[label] = array[:rows, :cols]
    return beta * blocks["C"] + alpha * (blocks["A"] @ blocks["B"])


def print_array(ni: int, nj: int, C: np.ndarray) -> str:
    """Return the dump of the ``ni`` by ``nj`` result matrix."""
    items = [(i * ni + j, float(C[i][j])) for i, j in product(range(ni), range(nj))]
    return "".join((DUMP_START, format_dump("C", items, False), DUMP_FINISH))


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    ni, nj, nk = SIZES[parse_dataset(dataset)]
    arrays = init_array(ni, nj, nk)
    t0 = time.perf_counter()
    product_matrix = kernel_gemm(ni, nj, nk, *arrays)
    return product_matrix, time.perf_counter() - t0


def main(argv: Sequence[str] | None = None) -> int:
    cli = parse_args(argv, "gemm")
    product_matrix, seconds = run(cli.dataset)
    if cli.time:
        print(f"{seconds:0.6f}")
    if cli.dump:
        sys.stderr.write(print_array(*product_matrix.shape, product_matrix))
    return 0


if __name__ == "__main__":
    sys.exit(main())