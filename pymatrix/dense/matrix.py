"""
Matrix: dense row-major float64 matrix with in-place operations.

Every operation mutates the receiver and returns it, so calls chain:

    >>> m = Matrix(2, 3).set([1, 2, 3, 4, 5, 6])
    >>> m.multiply(Matrix(3, 1).set([1, 1, 1])).multiply_by_scalar(0.5)
    Matrix(rows=2, columns=1)

Operations validate their operands before touching any state. A raised
exception always leaves the receiver exactly as it was.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute import kernels
from pymatrix.core.compute.random import resolve_rng
from pymatrix.core.protocols import MatrixLike
from pymatrix.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_dimension,
    check_inner_dimensions,
    check_length,
    check_operand,
    check_same_shape,
    check_scalar,
)


class Matrix:
    """
    Dense rectangular matrix backed by a flat row-major float64 buffer.

    Element (r, c) lives at buffer[r * columns + c]. The shape is
    read-only from outside; it only changes together with a full buffer
    replacement (multiply, transpose).

    Attributes:
        rows: Number of rows (>= 0)
        columns: Number of columns (>= 0)
        buffer: The owned 1-D float64 buffer, length rows * columns

    Construction:
        Matrix(rows, columns)        zero-filled
        Matrix.from_array(data)      from a 2-D array-like
    """

    __slots__ = ('_rows', '_columns', '_buffer')

    def __init__(self, rows: int, columns: int):
        rows = check_dimension(rows, "rows")
        columns = check_dimension(columns, "columns")
        self._rows = rows
        self._columns = columns
        self._buffer = np.zeros(rows * columns, dtype=np.float64)

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2-D array-like.

        Parameters
        ----------
        data : array-like
            Nested lists or a numpy array. 1-D input becomes a single row.
        """
        array = check_array(data, "data")
        if array.ndim == 1:
            array = array.reshape(1, -1)
        check_2d(array, "data")
        matrix = cls(array.shape[0], array.shape[1])
        matrix._buffer = array.ravel()
        return matrix

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def buffer(self) -> NDArray[np.float64]:
        """Flat row-major buffer (live, owned by this matrix)."""
        return self._buffer

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def size(self) -> int:
        """Number of elements, rows * columns."""
        return self._buffer.shape[0]

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise IndexError(
                f"index ({row}, {column}) out of range for "
                f"{self._rows} x {self._columns} matrix"
            )
        return float(self._buffer[row * self._columns + column])

    def to_array(self) -> NDArray[np.float64]:
        """Copy of the elements as a (rows, columns) array."""
        return self._buffer.reshape(self._rows, self._columns).copy()

    def equals(self, other: MatrixLike) -> bool:
        """Exact equality of shape and every element (NaN != NaN)."""
        if not isinstance(other, MatrixLike):
            return False
        if self._rows != other.rows or self._columns != other.columns:
            return False
        return bool(np.array_equal(self._buffer, np.asarray(other.buffer)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MatrixLike):
            return NotImplemented
        return self.equals(other)

    # Mutable, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns})"

    def _replace(self, rows: int, columns: int, buffer: NDArray[np.float64]) -> Matrix:
        """Swap in a new shape and buffer together."""
        self._rows = rows
        self._columns = columns
        self._buffer = buffer
        return self

    # ------------------------------------------------------------------
    # Construction and assignment
    # ------------------------------------------------------------------

    def clone(self) -> Matrix:
        """Independent copy with the same shape and elements."""
        copy = Matrix(self._rows, self._columns)
        copy._buffer = self._buffer.copy()
        return copy

    def set(self, source: MatrixLike | ArrayLike) -> Matrix:
        """
        Overwrite all elements from another matrix or a flat sequence.

        Args:
            source: A matrix of the same shape, or a flat sequence of
                exactly rows * columns numbers

        Returns:
            self

        Raises:
            DimensionMismatchError: If shape or length differ
            DimensionError: If a sequence or a matrix buffer is not flat
            ValidationError: If the values are not real numbers
        """
        if isinstance(source, MatrixLike):
            buffer = check_operand(source, "source")
            check_same_shape(self, source, "set")
            self._buffer = np.array(buffer, dtype=np.float64, order='C', copy=True)
            return self

        values = check_array(source, "source")
        check_1d(values, "source")
        check_length(values, self.size, "set")
        self._buffer = values
        return self

    def map(self, func: Callable[[float, int], float]) -> Matrix:
        """
        Replace every element x at flat index i with func(x, i).

        Indices are visited in increasing order and func always sees the
        values from before the call. The results are swapped in only
        after every call returned.

        Raises:
            ValidationError: If func returns a non-numeric value
        """
        values = [func(x, i) for i, x in enumerate(self._buffer.tolist())]
        result = check_array(values, "map result")
        check_1d(result, "map result")
        self._buffer = result
        return self

    def randomize(self, rng: np.random.Generator | int | None = None) -> Matrix:
        """
        Fill every element with an independent uniform draw from [0, 1).

        Args:
            rng: Generator, int seed, or None for the package default
                (see pymatrix.core.compute.random)
        """
        generator = resolve_rng(rng)
        self._buffer = generator.random(self.size, dtype=np.float64)
        return self

    # ------------------------------------------------------------------
    # Element-wise arithmetic
    # ------------------------------------------------------------------

    def _elementwise_operand(self, other: MatrixLike, operation: str) -> NDArray[np.float64]:
        buffer = check_operand(other, "other")
        check_same_shape(self, other, operation)
        return buffer

    def add(self, other: MatrixLike) -> Matrix:
        """self[i] += other[i]. Raises DimensionMismatchError on shape mismatch."""
        kernels.add_inplace(self._buffer, self._elementwise_operand(other, "add"))
        return self

    def subtract(self, other: MatrixLike) -> Matrix:
        """self[i] -= other[i]. Raises DimensionMismatchError on shape mismatch."""
        kernels.subtract_inplace(self._buffer, self._elementwise_operand(other, "subtract"))
        return self

    def hadamard_product(self, other: MatrixLike) -> Matrix:
        """self[i] *= other[i]. Raises DimensionMismatchError on shape mismatch."""
        kernels.multiply_inplace(
            self._buffer, self._elementwise_operand(other, "hadamard_product")
        )
        return self

    def multiply_by_scalar(self, scalar: float) -> Matrix:
        """Multiply every element by scalar. NaN and infinities propagate."""
        kernels.scale_inplace(self._buffer, check_scalar(scalar, "scalar"))
        return self

    # ------------------------------------------------------------------
    # Shape-changing operations
    # ------------------------------------------------------------------

    def multiply(self, other: MatrixLike) -> Matrix:
        """
        Replace self with the matrix product self @ other.

        The receiver becomes rows x other.columns. For each output element
        the products are summed in increasing inner index, starting from
        0.0, so results are reproducible bit for bit.

        Raises:
            IncompatibleDimensionsError: If self.columns != other.rows
        """
        buffer = check_operand(other, "other")
        check_inner_dimensions(self, other, "multiply")
        result = kernels.matmul(
            self._buffer,
            self._rows,
            self._columns,
            buffer,
            other.columns,
        )
        return self._replace(self._rows, other.columns, result)

    def transpose(self) -> Matrix:
        """Swap rows and columns, relaying the buffer out row-major."""
        result = kernels.transpose(self._buffer, self._rows, self._columns)
        return self._replace(self._columns, self._rows, result)
