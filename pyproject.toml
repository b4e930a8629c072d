[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polykernels"
version = "0.1.0"
description = "Polyhedral benchmark kernels for data mining and dense linear algebra, with reproducible inputs and array dumps"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "benchmark",
    "linear-algebra",
    "kernels",
    "polyhedral",
    "gemm",
    "blas",
    "correlation",
    "covariance",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
polykernels-correlation = "polykernels.correlation:main"
polykernels-covariance = "polykernels.covariance:main"
polykernels-gemm = "polykernels.gemm:main"
polykernels-gemver = "polykernels.gemver:main"
polykernels-gesummv = "polykernels.gesummv:main"
polykernels-symm = "polykernels.symm:main"
polykernels-syr2k = "polykernels.syr2k:main"
polykernels-syrk = "polykernels.syrk:main"
polykernels-trmm = "polykernels.trmm:main"
polykernels-2mm = "polykernels.mm2:main"
polykernels-3mm = "polykernels.mm3:main"
polykernels-atax = "polykernels.atax:main"
polykernels-bicg = "polykernels.bicg:main"
polykernels-doitgen = "polykernels.doitgen:main"
polykernels-durbin = "polykernels.durbin:main"
polykernels-trisolv = "polykernels.trisolv:main"

[tool.hatch.build.targets.wheel]
packages = ["polykernels"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
ignore_missing_imports = true
