"""
Exception hierarchy for densematrix.

All exceptions inherit from DenseMatrixError to allow catching any
library-specific error. Each data error maps to exactly one ErrorKind,
which is what callers inspect on a failed Result.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Operations record these on a Result; they raise only on unwrap()
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Error taxonomy shared by every operation."""
    INVALID_INDEX = 'invalid_index'
    INVALID_SHAPE = 'invalid_shape'
    INVALID_ARGUMENT = 'invalid_argument'
    NULL_OPERAND = 'null_operand'


class DenseMatrixError(Exception):
    """Base exception for all densematrix errors."""
    kind: ErrorKind | None = None


class ValidationError(DenseMatrixError):
    """
    Input validation failed.

    Raised directly for programming errors (bad constructor dimensions,
    unknown mode). Its subclasses describe data errors that operations
    report through Result.
    """
    pass


class InvalidIndexError(ValidationError):
    """
    Element index is out of bounds or the target matrix has no storage.

    Attributes:
        index: The (i, j) pair that was requested
        shape: (nrows, ncols) of the target, or None if it was absent
    """
    kind = ErrorKind.INVALID_INDEX

    def __init__(
        self,
        message: str,
        index: tuple[object, object] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionError(ValidationError):
    """
    Operand dimensions are inconsistent for the requested operation.

    Attributes:
        left_shape: (nrows, ncols) of the left operand
        right_shape: (nrows, ncols) of the right operand
    """
    kind = ErrorKind.INVALID_SHAPE

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class InvalidArgumentError(ValidationError):
    """
    Operand is unallocated, has non-positive dimensions, or a value is
    not numeric.

    Attributes:
        name: Parameter name of the offending argument
    """
    kind = ErrorKind.INVALID_ARGUMENT

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name


class NullOperandError(ValidationError):
    """
    An absent (None or destroyed) matrix was passed where a populated
    matrix was required.

    Attributes:
        operand: Parameter name of the absent operand
    """
    kind = ErrorKind.NULL_OPERAND

    def __init__(self, message: str, operand: str | None = None):
        super().__init__(message)
        self.operand = operand
