# polykernels

A collection of classic polyhedral benchmark kernels from data mining and dense
linear algebra, built on numpy. Each kernel builds its input arrays the same
way every time, runs the computation, and can dump the live-out arrays so that
the results of two runs or two implementations can be compared value by value.

## Kernels

| Area | Modules |
| --- | --- |
| Data mining | `correlation`, `covariance` |
| BLAS | `gemm`, `gemver`, `gesummv`, `symm`, `syr2k`, `syrk`, `trmm` |
| Linear-algebra kernels | `mm2` (2mm), `mm3` (3mm), `atax`, `bicg`, `doitgen` |
| Solvers | `durbin` (Levinson-Durbin recursion), `trisolv` (forward substitution) |

Problem sizes come in five datasets, listed in `polykernels.common.Dataset`:
MINI, SMALL, MEDIUM, LARGE and EXTRALARGE. MEDIUM is the default. The larger
datasets are meant for measuring, the MINI dataset for checking results
quickly.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Command line

Every kernel has its own command:

```
polykernels-gemm --dataset mini --time
polykernels-trisolv --dataset small --dump
polykernels-2mm --help
```

The full list is `polykernels-correlation`, `polykernels-covariance`,
`polykernels-gemm`, `polykernels-gemver`, `polykernels-gesummv`,
`polykernels-symm`, `polykernels-syr2k`, `polykernels-syrk`,
`polykernels-trmm`, `polykernels-2mm`, `polykernels-3mm`, `polykernels-atax`,
`polykernels-bicg`, `polykernels-doitgen`, `polykernels-durbin` and
`polykernels-trisolv`.

All commands take the same options:

- `--dataset NAME` chooses the problem size (case does not matter);
- `--time` prints the kernel's execution time in seconds on standard output;
- `--dump` writes the live-out arrays to standard error.

## From Python

Each kernel module offers the same pieces:

- `SIZES` maps each `Dataset` to the kernel's problem sizes;
- `init_array(...)` builds the deterministic inputs for the given sizes;
- `kernel_<name>(...)` runs the computation and returns its results, leaving
  the inputs unchanged; arrays too small for the given sizes raise
  `ValueError`;
- `print_array(...)` returns the live-out arrays formatted as a dump;
- `run(dataset)` builds the inputs for a dataset, runs the kernel and returns
  the result together with the kernel time in seconds.

```python
from polykernels.common import parse_dataset
from polykernels import gemm, trisolv

result, seconds = gemm.run(parse_dataset("mini"))

L, b = trisolv.init_array(8)
x = trisolv.kernel_trisolv(8, L, b)
print(trisolv.print_array(8, x))
```

Dumps follow the benchmark convention: values are written with two decimals,
twenty to a line, between begin and end markers that carry the array's name.
`polykernels.common.format_dump` produces that layout for any sequence of
`(position, value)` pairs.

## What is not included

The package covers the kernels listed above only. It has no matrix
factorisation kernels (such as Cholesky or LU decomposition, or Gram-Schmidt
QR), and no paired matrix-vector transpose kernel; forward substitution and the
Levinson-Durbin recursion are its only solvers. Timings are plain wall-clock
measurements; there are no hardware counters, cache flushing or scheduler
settings.