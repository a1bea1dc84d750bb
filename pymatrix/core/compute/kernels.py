"""
Flat-buffer kernels for dense row-major matrices.

All functions take raw float64 buffers plus explicit shapes. They do no
validation; callers (Matrix) check shapes first.

Floating-point behaviour follows IEEE 754 without numpy warnings:
inf * 0 yields NaN silently, as it would in a scalar loop.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray


def add_inplace(out: NDArray[np.float64], other: NDArray[np.floating[Any]]) -> None:
    """out[i] += other[i] for every flat index."""
    with np.errstate(all='ignore'):
        np.add(out, other, out=out)


def subtract_inplace(out: NDArray[np.float64], other: NDArray[np.floating[Any]]) -> None:
    """out[i] -= other[i] for every flat index."""
    with np.errstate(all='ignore'):
        np.subtract(out, other, out=out)


def multiply_inplace(out: NDArray[np.float64], other: NDArray[np.floating[Any]]) -> None:
    """out[i] *= other[i] for every flat index."""
    with np.errstate(all='ignore'):
        np.multiply(out, other, out=out)


def scale_inplace(out: NDArray[np.float64], scalar: float) -> None:
    """out[i] *= scalar for every flat index."""
    with np.errstate(all='ignore'):
        np.multiply(out, scalar, out=out)


def matmul(
    left: NDArray[np.floating[Any]],
    rows: int,
    inner: int,
    right: NDArray[np.floating[Any]],
    columns: int,
) -> NDArray[np.float64]:
    """
    Product of a rows x inner and an inner x columns row-major buffer.

    Equivalent, bit for bit, to

        for i in range(rows):
            for j in range(columns):
                value = 0.0
                for k in range(inner):
                    value += left[i * inner + k] * right[k * columns + j]
                result[i * columns + j] = value

    The k loop is kept outermost and the (i, j) plane is updated as a
    whole, so every accumulator still sees its products in increasing k.
    np.matmul is not used: BLAS gives no guarantee on summation order.

    Returns:
        Fresh flat buffer of length rows * columns
    """
    a = left.reshape(rows, inner)
    b = right.reshape(inner, columns)
    acc = np.zeros((rows, columns), dtype=np.float64)
    term = np.empty((rows, columns), dtype=np.float64)
    with np.errstate(all='ignore'):
        for k in range(inner):
            np.multiply(a[:, k, np.newaxis], b[np.newaxis, k, :], out=term)
            np.add(acc, term, out=acc)
    return acc.ravel()


def transpose(
    buffer: NDArray[np.floating[Any]],
    rows: int,
    columns: int,
) -> NDArray[np.float64]:
    """
    Row-major transpose: result[j * rows + i] = buffer[i * columns + j].

    Returns:
        Fresh flat buffer of length rows * columns
    """
    return buffer.reshape(rows, columns).T.flatten()
