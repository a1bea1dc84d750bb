"""
Dense matrix module.

Public API:
    Matrix(rows, columns)  - zero-filled row-major float64 matrix
    Matrix.from_array(x)   - build from a 2D array-like
"""

from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
