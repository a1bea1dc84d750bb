"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import numbers
import warnings

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    ValidationError,
)
from pymatrix.core.protocols import MatrixLike

# Largest magnitude below which every integer is exactly representable in float64
_FLOAT64_EXACT_INT = 2 ** 53


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result is always a fresh copy, never a view of the input.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64

    Raises:
        ValidationError: If input cannot be converted to numeric array

    Warns:
        UserWarning: If integer input holds values that float64 cannot
            represent exactly
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, bool, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    if np.issubdtype(result.dtype, np.integer) and result.size > 0:
        if result.max() > _FLOAT64_EXACT_INT or result.min() < -_FLOAT64_EXACT_INT:
            warnings.warn(
                f"{name}: integer values beyond 2**53 lose precision "
                f"when converted to float64",
                UserWarning,
                stacklevel=3,
            )

    return np.array(result, dtype=np.float64, order='C', copy=True)


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        )
    if value < 0:
        raise ValidationError(f"{name}: must be >= 0, got {value}")
    return int(value)


def check_scalar(value: Any, name: str) -> float:
    """
    Validate a real scalar.

    NaN and infinities are accepted; they propagate through arithmetic.

    Raises:
        ValidationError: If value is not a real number
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name}: expected a real number, got {type(value).__name__}"
        )
    return float(value)


def check_operand(other: Any, name: str) -> NDArray[np.float64]:
    """
    Verify other is a MatrixLike whose buffer is flat, numeric and agrees
    with its shape.

    A float64 ndarray buffer is returned as-is, without copying; anything
    else goes through check_array. Callers that store the buffer must
    copy it.

    Args:
        other: Candidate operand
        name: Parameter name for error messages

    Returns:
        The operand's buffer as a 1-D float64 array

    Raises:
        ValidationError: If other is not matrix-like or its buffer is
            not real numeric data
        DimensionError: If the buffer is not 1-D or its length differs
            from rows * columns
    """
    if not isinstance(other, MatrixLike):
        raise ValidationError(
            f"{name}: expected a matrix with rows, columns and buffer, "
            f"got {type(other).__name__}"
        )
    buffer = other.buffer
    if not (isinstance(buffer, np.ndarray) and buffer.dtype == np.float64):
        buffer = check_array(buffer, f"{name}.buffer")
    check_1d(buffer, f"{name}.buffer")
    length = buffer.shape[0]
    if length != other.rows * other.columns:
        raise DimensionError(
            f"{name}: buffer length {length} does not match shape "
            f"{other.rows} x {other.columns}"
        )
    return buffer


def check_same_shape(
    left: MatrixLike,
    right: MatrixLike,
    operation: str,
) -> None:
    """
    Verify two matrices have identical shapes.

    Raises:
        DimensionMismatchError: If rows or columns differ
    """
    if left.rows != right.rows or left.columns != right.columns:
        raise DimensionMismatchError(
            f"Cannot {operation}: matrix dimensions aren't the same: "
            f"{left.rows} x {left.columns} / {right.rows} x {right.columns}",
            expected=(left.rows, left.columns),
            actual=(right.rows, right.columns),
            operation=operation,
        )


def check_length(
    array: NDArray[np.floating[Any]],
    expected: int,
    operation: str,
) -> None:
    """
    Verify a flat buffer has exactly the expected number of elements.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    if array.shape[0] != expected:
        raise DimensionMismatchError(
            f"Cannot {operation}: buffer lengths aren't the same: "
            f"{expected} / {array.shape[0]}",
            expected=(expected,),
            actual=(array.shape[0],),
            operation=operation,
        )


def check_inner_dimensions(
    left: MatrixLike,
    right: MatrixLike,
    operation: str,
) -> None:
    """
    Verify left.columns == right.rows for a matrix product.

    Raises:
        IncompatibleDimensionsError: If the inner dimensions differ
    """
    if left.columns != right.rows:
        raise IncompatibleDimensionsError(
            f"Cannot {operation}: matrices have incompatible dimensions: "
            f"{left.rows} x {left.columns} / {right.rows} x {right.columns}",
            self_columns=left.columns,
            other_rows=right.rows,
            left_shape=(left.rows, left.columns),
            right_shape=(right.rows, right.columns),
            operation=operation,
        )
