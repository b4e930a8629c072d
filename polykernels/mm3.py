"""Three matrix multiplications: G := (A*B)*(C*D)."""

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

# (ni, nj, nk, nl, nm): A is ni x nk, B is nk x nj, C is nj x nm, D is nm x nl
SIZES = {
    Dataset.MINI: (32, 40, 48, 56, 64),
    Dataset.SMALL: (128, 136, 144, 152, 168),
    Dataset.MEDIUM: (512, 528, 544, 560, 576),
    Dataset.LARGE: (1024, 1048, 1072, 1096, 1120),
    Dataset.EXTRALARGE: (2048, 2080, 2112, 2144, 2176),
}


def _matrix(name: str, array, rows: int, cols: int) -> np.ndarray:
    array = np.asarray(array, dtype=float)
    if array.ndim != 2 or array.shape[0] < rows or array.shape[1] < cols:
        raise ValueError(f"{name} must be at least {rows} x {cols}")
    return array[:rows, :cols]


def init_array(
    ni: int, nj: int, nk: int, nl: int, nm: int
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(A, B, C, D)``."""
    i, j = np.indices((ni, nk))
    A = ((i * j + 1) % ni / (5 * ni)).astype(float)
    i, j = np.indices((nk, nj))
    B = ((i * (j + 1) + 2) % nj / (5 * nj)).astype(float)
    i, j = np.indices((nj, nm))
    C = (i * (j + 3) % nl / (5 * nl)).astype(float)
    i, j = np.indices((nm, nl))
    D = ((i * (j + 2) + 2) % nk / (5 * nk)).astype(float)
    return A, B, C, D


def kernel_3mm(
    ni: int, nj: int, nk: int, nl: int, nm: int, A, B, C, D
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return ``(E, F, G)`` with ``E = A*B``, ``F = C*D`` and ``G = E*F``.

    The inputs are left unchanged.
    """
    A = _matrix("A", A, ni, nk)
    B = _matrix("B", B, nk, nj)
    C = _matrix("C", C, nj, nm)
    D = _matrix("D", D, nm, nl)
    E = A @ B
    F = C @ D
    G = E @ F
    return E, F, G


def print_array(ni: int, nl: int, G) -> str:
    """Return the dump of the ``ni`` by ``nl`` result matrix."""
    items = ((i * ni + j, float(G[i][j])) for i, j in product(range(ni), range(nl)))
    return DUMP_START + format_dump("G", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return ``G`` and the kernel time."""
    ni, nj, nk, nl, nm = SIZES[parse_dataset(dataset)]
    A, B, C, D = init_array(ni, nj, nk, nl, nm)
    start = time.perf_counter()
    _, _, G = kernel_3mm(ni, nj, nk, nl, nm, A, B, C, D)
    return G, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "3mm")
    G, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        ni, nl = G.shape
        sys.stderr.write(print_array(ni, nl, G))
    return 0


if __name__ == "__main__":
    sys.exit(main())