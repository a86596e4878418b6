"""
Core infrastructure for densematrix.

Key components:
    result: Generic Result[T] success/failure envelope
    exceptions: Exception hierarchy and ErrorKind taxonomy
    validation: Input validators
    modes: Compatibility mode constants
    compute: Timing and tolerance utilities
"""

from densematrix.core.result import Result
from densematrix.core.exceptions import (
    ErrorKind,
    DenseMatrixError,
    ValidationError,
    InvalidIndexError,
    DimensionError,
    InvalidArgumentError,
    NullOperandError,
)
from densematrix.core.modes import MODE_STANDARD, MODE_LEGACY, ALL_MODES

__all__ = [
    # Result
    "Result",
    # Exceptions
    "ErrorKind",
    "DenseMatrixError",
    "ValidationError",
    "InvalidIndexError",
    "DimensionError",
    "InvalidArgumentError",
    "NullOperandError",
    # Modes
    "MODE_STANDARD",
    "MODE_LEGACY",
    "ALL_MODES",
]
