"""Polyhedral benchmark kernels for data mining, BLAS, linear-algebra kernels and triangular and Toeplitz solvers."""

__version__ = "0.1.0"