"""
densematrix: a minimal dense-matrix library for Python.

Allocation, element access, entry-wise addition, matrix multiplication
and L1/L2 norms over rectangular float64 matrices. Every operation
reports data errors through a Result instead of raising.

Submodules:
    matrix: Matrix type and operations
    core: Result envelope, exceptions, validation, modes
"""

__version__ = "0.1.0"

import logging

from densematrix.core import (
    Result,
    ErrorKind,
    DenseMatrixError,
    ValidationError,
    InvalidIndexError,
    DimensionError,
    InvalidArgumentError,
    NullOperandError,
    MODE_STANDARD,
    MODE_LEGACY,
)
from densematrix.matrix import (
    Matrix,
    get,
    put,
    release,
    destroy,
    add,
    multiply,
    l1_norm,
    l2_norm,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Matrix
    "Matrix",
    "get",
    "put",
    "release",
    "destroy",
    "add",
    "multiply",
    "l1_norm",
    "l2_norm",
    # Result and errors
    "Result",
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
]
