"""
PyMatrix: dense row-major float64 matrices for Python.

A small, exact matrix engine with in-place, chainable operations and
reproducible products, meant as the numeric base of higher-level code
such as neural-network layers.

Submodules:
    dense: The Matrix type
    core: Exceptions, validation, protocols and compute kernels
"""

__version__ = "0.1.0"
__author__ = "PyMatrix contributors"

from pymatrix.dense import Matrix
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
)

__all__ = [
    "__version__",
    "Matrix",
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
]
