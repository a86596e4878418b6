"""
Input validation utilities for densematrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages; the public operations catch the
data errors (ValidationError subclasses) and record them on a Result.

Design principles:
    - No silent coercion of indices, dimensions or element values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import TYPE_CHECKING, Any

import numpy as np

from densematrix.core.exceptions import (
    DimensionError,
    InvalidArgumentError,
    InvalidIndexError,
    NullOperandError,
    ValidationError,
)
from densematrix.core.modes import ALL_MODES, MODE_LEGACY

if TYPE_CHECKING:
    from densematrix.matrix.matrix import Matrix


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_absent(M: Matrix | None) -> bool:
    """True for None and for handles that went through destroy()."""
    return M is None or M.destroyed


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a requested dimension is an integer.

    Non-positive values are legal (they produce an empty matrix).

    Raises:
        ValidationError: If value is not an integer
    """
    if not _is_integer(value):
        raise ValidationError(
            f"{name}: expected integer dimension, got {type(value).__name__} {value!r}"
        )
    return int(value)


def check_array(data: Any, name: str) -> np.ndarray:
    """
    Validate and convert matrix data to a fresh 2D float64 array.

    Accepts any array-like, or any object with a ``.values`` attribute
    (e.g. a pandas DataFrame). 1D input becomes a single row. The result
    never shares memory with ``data``.

    Raises:
        ValidationError: If data is not numeric or not 1D/2D
    """
    if hasattr(data, 'values') and not isinstance(data, dict):
        data = data.values
    try:
        result = np.array(data, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )
    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )
    if np.iscomplexobj(result):
        raise ValidationError(f"{name}: complex values are not supported")

    if result.ndim == 1:
        result = result.reshape(1, -1)
    if result.ndim != 2:
        raise ValidationError(
            f"{name}: expected 1D or 2D data, got {result.ndim}D with shape {result.shape}"
        )
    return np.ascontiguousarray(result, dtype=np.float64)


def check_mode(mode: str) -> str:
    """
    Verify mode is one of the known compatibility modes.

    Raises:
        ValidationError: If mode is unknown
    """
    if mode not in ALL_MODES:
        raise ValidationError(
            f"mode: unknown mode {mode!r}, expected one of {sorted(ALL_MODES)}"
        )
    return mode


def check_present(M: Matrix | None, name: str) -> None:
    """
    Verify a matrix handle is present.

    Raises:
        NullOperandError: If M is None or destroyed
    """
    if is_absent(M):
        raise NullOperandError(f"{name}: matrix is absent", operand=name)


def check_allocated(M: Matrix, name: str) -> None:
    """
    Verify a matrix owns storage.

    Raises:
        InvalidArgumentError: If M is in the empty/unallocated state
    """
    if M.is_empty:
        raise InvalidArgumentError(
            f"{name}: matrix has no storage (shape {M.nrows}x{M.ncols})",
            name=name,
        )


def check_positive_dimensions(M: Matrix, name: str) -> None:
    """
    Verify both recorded dimensions are positive.

    Raises:
        InvalidArgumentError: If nrows <= 0 or ncols <= 0
    """
    if M.nrows <= 0 or M.ncols <= 0:
        raise InvalidArgumentError(
            f"{name}: dimensions must be positive, got {M.nrows}x{M.ncols}",
            name=name,
        )


def check_norm_operand(M: Matrix | None, name: str) -> None:
    """
    Verify a matrix can have a norm computed.

    Absent operands are an argument error here, not a null operand.

    Raises:
        InvalidArgumentError: If M is absent, unallocated, or has a
            non-positive dimension
    """
    if is_absent(M):
        raise InvalidArgumentError(f"{name}: matrix is absent", name=name)
    check_allocated(M, name)
    check_positive_dimensions(M, name)


def check_index(M: Matrix | None, i: Any, j: Any) -> tuple[int, int]:
    """
    Verify (i, j) addresses an existing element of M.

    Negative indices are rejected, never wrapped.

    Returns:
        (i, j) as plain ints

    Raises:
        InvalidIndexError: If M is absent or unallocated, an index is not
            an integer, negative, or past the last row/column
    """
    if is_absent(M):
        raise InvalidIndexError("matrix is absent", index=(i, j), shape=None)
    shape = (M.nrows, M.ncols)
    if M.is_empty:
        raise InvalidIndexError(
            f"matrix has no storage (shape {shape[0]}x{shape[1]})",
            index=(i, j), shape=shape,
        )
    if not (_is_integer(i) and _is_integer(j)):
        raise InvalidIndexError(
            f"indices must be integers, got ({i!r}, {j!r})",
            index=(i, j), shape=shape,
        )
    i, j = int(i), int(j)
    if i < 0 or j < 0 or i >= shape[0] or j >= shape[1]:
        raise InvalidIndexError(
            f"index ({i}, {j}) out of bounds for shape {shape[0]}x{shape[1]}",
            index=(i, j), shape=shape,
        )
    return i, j


def check_scalar(value: Any, name: str) -> float:
    """
    Verify value is a real number and convert it to float.

    Strings, bytes, bools and complex numbers are rejected, never parsed.

    Raises:
        InvalidArgumentError: If value is not a real number
    """
    is_real = isinstance(value, (numbers.Real, np.floating, np.integer))
    if not is_real or isinstance(value, (bool, np.bool_)):
        raise InvalidArgumentError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}",
            name=name,
        )
    return float(value)


def check_same_shape(A: Matrix, B: Matrix) -> None:
    """
    Verify two matrices have identical dimensions.

    Raises:
        DimensionError: If nrows or ncols differ
    """
    if A.nrows != B.nrows or A.ncols != B.ncols:
        raise DimensionError(
            f"shape mismatch: A is {A.nrows}x{A.ncols}, B is {B.nrows}x{B.ncols}",
            left_shape=A.shape, right_shape=B.shape,
        )


def check_product_shape(A: Matrix, B: Matrix, mode: str) -> None:
    """
    Verify A @ B is defined under the given mode.

    Standard mode requires A.ncols == B.nrows. Legacy mode additionally
    requires A.nrows == B.ncols.

    Raises:
        DimensionError: If the shapes are not conformant
    """
    if A.ncols != B.nrows:
        raise DimensionError(
            f"cannot multiply {A.nrows}x{A.ncols} by {B.nrows}x{B.ncols}: "
            f"A.ncols ({A.ncols}) != B.nrows ({B.nrows})",
            left_shape=A.shape, right_shape=B.shape,
        )
    if mode == MODE_LEGACY and A.nrows != B.ncols:
        raise DimensionError(
            f"cannot multiply {A.nrows}x{A.ncols} by {B.nrows}x{B.ncols} in legacy mode: "
            f"A.nrows ({A.nrows}) != B.ncols ({B.ncols})",
            left_shape=A.shape, right_shape=B.shape,
        )
