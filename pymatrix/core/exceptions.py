"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error. Shape errors inherit from DimensionError.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every operation validates before mutating, so an exception always
      means the receiver is unchanged
"""


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks
    (negative dimensions, non-numeric data, unusable random source).
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Raised when an input has the wrong number of dimensions, and the
    base class for the two matrix shape errors below.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Two operands were required to have the same shape but do not.

    Raised by set(), add(), subtract() and hadamard_product().

    Attributes:
        expected: Shape of the receiver. For a raw flat sequence passed
            to set(), the 1-tuple (rows * columns,)
        actual: Shape of the offending operand, or (len(sequence),)
        operation: Name of the operation that rejected the operand
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...],
        actual: tuple[int, ...],
        operation: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.operation = operation


class IncompatibleDimensionsError(DimensionError):
    """
    Inner dimensions of a matrix product do not agree.

    Raised by multiply() when the left operand's column count differs
    from the right operand's row count.

    Attributes:
        self_columns: Column count of the left operand
        other_rows: Row count of the right operand
        left_shape: Full shape of the left operand, if known
        right_shape: Full shape of the right operand, if known
        operation: Name of the operation that rejected the operand
    """

    def __init__(
        self,
        message: str,
        self_columns: int,
        other_rows: int,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
        operation: str | None = None
    ):
        super().__init__(message)
        self.self_columns = self_columns
        self.other_rows = other_rows
        self.left_shape = left_shape
        self.right_shape = right_shape
        self.operation = operation
