"""Two matrix multiplications: D := alpha*A*B*C + beta*D."""

from __future__ import annotations

import sys
import time
from itertools import product
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

# (ni, nj, nk, nl): A is ni x nk, B is nk x nj, C is nj x nl, D is ni x nl
SIZES = {
    Dataset.MINI: (32, 40, 48, 56),
    Dataset.SMALL: (128, 136, 144, 152),
    Dataset.MEDIUM: (512, 528, 544, 560),
    Dataset.LARGE: (1024, 1048, 1072, 1096),
    Dataset.EXTRALARGE: (2048, 2080, 2112, 2144),
}


def _matrix(name: str, array, rows: int, cols: int) -> np.ndarray:
    array = np.asarray(array, dtype=float)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows} x {cols}")
    return array[:rows, :cols]


def init_array(
    ni: int, nj: int, nk: int, nl: int
) -> Tuple[float, float, np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(alpha, beta, A, B, C, D)``."""
    i, j = np.indices((ni, nk))
    A = ((i * j + 1) % ni / ni).astype(float)
    i, j = np.indices((nk, nj))
    B = (i * (j + 1) % nj / nj).astype(float)
    i, j = np.indices((nj, nl))
    C = ((i * (j + 3) + 1) % nl / nl).astype(float)
    i, j = np.indices((ni, nl))
    D = (i * (j + 2) % nk / nk).astype(float)
    return 1.5, 1.2, A, B, C, D


def kernel_2mm(
    ni: int, nj: int, nk: int, nl: int, alpha: float, beta: float, A, B, C, D
) -> np.ndarray:
    """Return ``(alpha*A*B)*C + beta*D``; the inputs are left unchanged."""
    A = _matrix("A", A, ni, nk)
    B = _matrix("B", B, nk, nj)
    C = _matrix("C", C, nj, nl)
    D = _matrix("D", D, ni, nl)
    tmp = alpha * (A @ B)
    return beta * D + tmp @ C


def print_array(ni: int, nl: int, D) -> str:
    """Return the dump of the ``ni`` by ``nl`` result matrix."""
    items = ((i * ni + j, float(D[i][j])) for i, j in product(range(ni), range(nl)))
    return DUMP_START + format_dump("D", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    ni, nj, nk, nl = SIZES[parse_dataset(dataset)]
    alpha, beta, A, B, C, D = init_array(ni, nj, nk, nl)
    start = time.perf_counter()
    result = kernel_2mm(ni, nj, nk, nl, alpha, beta, A, B, C, D)
    return result, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "2mm")
    result, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        ni, nl = result.shape
        sys.stderr.write(print_array(ni, nl, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())