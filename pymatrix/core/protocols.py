"""
Core protocols for PyMatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so that
any shape-bearing container with a flat float64 buffer can be used as an
operand, not only Matrix instances.
"""

from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import NDArray


@runtime_checkable
class MatrixLike(Protocol):
    """
    Minimal protocol for a dense row-major matrix operand.

    Element (r, c) lives at buffer[r * columns + c], and
    len(buffer) == rows * columns.

    Note:
        runtime_checkable only verifies that the attributes exist.
        Shape consistency is checked by the operations themselves.
    """

    @property
    def rows(self) -> int:
        """Number of rows."""
        ...

    @property
    def columns(self) -> int:
        """Number of columns."""
        ...

    @property
    def buffer(self) -> NDArray[np.floating[Any]]:
        """Flat row-major element buffer."""
        ...
