"""Multi-resolution analysis kernel: A[r, q, :] := A[r, q, :] * C4."""

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

# (nr, nq, np): A is nr x nq x np, C4 is np x np
SIZES = {
    Dataset.MINI: (18, 16, 20),
    Dataset.SMALL: (40, 32, 48),
    Dataset.MEDIUM: (136, 128, 144),
    Dataset.LARGE: (264, 256, 272),
    Dataset.EXTRALARGE: (520, 512, 528),
}


def init_array(nr: int, nq: int, np_: int) -> Tuple[np.ndarray, np.ndarray]:
    """Return ``(A, C4)``."""
    i, j, k = np.indices((nr, nq, np_))
    A = ((i * j + k) % np_ / np_).astype(float)
    i, j = np.indices((np_, np_))
    C4 = (i * j % np_ / np_).astype(float)
    return A, C4


def kernel_doitgen(nr: int, nq: int, np_: int, A, C4) -> np.ndarray:
    """Return ``A`` with every ``A[r, q, :]`` replaced by ``A[r, q, :] @ C4``.

    The inputs are left unchanged.
    """
    A = np.asarray(A, dtype=float)
    C4 = np.asarray(C4, dtype=float)
    if A.ndim != 3 or A.shape[0] < nr or A.shape[1] < nq or A.shape[2] < np_:
        raise ValueError(f"A must be at least {nr} x {nq} x {np_}")
    if C4.ndim != 2 or C4.shape[0] < np_ or C4.shape[1] < np_:
        raise ValueError(f"C4 must be at least {np_} x {np_}")
    return A[:nr, :nq, :np_] @ C4[:np_, :np_]


def print_array(nr: int, nq: int, np_: int, A) -> str:
    """Return the dump of the ``nr`` by ``nq`` by ``np_`` array."""
    items = (
        (i * nq * np_ + j * np_ + k, float(A[i][j][k]))
        for i, j, k in product(range(nr), range(nq), range(np_))
    )
    return DUMP_START + format_dump("A", items, False) + DUMP_FINISH


def run(dataset) -> Tuple[np.ndarray, float]:
    """Run the kernel on a dataset; return the result and the kernel time."""
    nr, nq, np_ = SIZES[parse_dataset(dataset)]
    A, C4 = init_array(nr, nq, np_)
    start = time.perf_counter()
    result = kernel_doitgen(nr, nq, np_, A, C4)
    return result, time.perf_counter() - start


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv, "doitgen")
    result, elapsed = run(args.dataset)
    if args.time:
        print(f"{elapsed:0.6f}")
    if args.dump:
        sys.stderr.write(print_array(*result.shape, result))
    return 0


if __name__ == "__main__":
    sys.exit(main())