"""
Core infrastructure for PyMatrix.

Shared abstractions and utilities used by the dense matrix type.

Key components:
    protocols: MatrixLike structural protocol
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Flat-buffer kernels and the random source
"""

from pymatrix.core.protocols import MatrixLike
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
)

__all__ = [
    # Protocols
    "MatrixLike",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
]
