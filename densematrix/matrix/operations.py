"""
Arithmetic on Matrix values: add, multiply, l1_norm, l2_norm.

Every operation is pure: operands are never mutated and every Matrix
result owns a freshly allocated buffer. Data errors never raise; they
come back as a failed Result (value None for Matrix results, 0.0 for
norms). Sums are accumulated sequentially in float64 with no blocking,
pairwise summation or BLAS.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from densematrix.core.compute.timing import timed
from densematrix.core.exceptions import DimensionError, ValidationError
from densematrix.core.modes import MODE_LEGACY, MODE_STANDARD
from densematrix.core.result import Result
from densematrix.core.validation import (
    check_allocated,
    check_mode,
    check_norm_operand,
    check_present,
    check_product_shape,
    check_same_shape,
    is_absent,
)
from densematrix.matrix.matrix import Matrix

logger = logging.getLogger(__name__)


def _check_binary_operands(A: Matrix | None, B: Matrix | None) -> None:
    check_present(A, 'A')
    check_present(B, 'B')
    check_allocated(A, 'A')
    check_allocated(B, 'B')


def add(A: Matrix | None, B: Matrix | None) -> Result[Matrix]:
    """
    Entry-wise sum A + B.

    Fails with NULL_OPERAND if either operand is absent, INVALID_ARGUMENT
    if either has no storage, INVALID_SHAPE if the dimensions differ.

    Returns
    -------
    Result[Matrix] with a new (A.nrows, A.ncols) matrix on success.
    """
    try:
        _check_binary_operands(A, B)
        check_same_shape(A, B)
    except ValidationError as e:
        logger.debug("add failed: %s", e)
        return Result.failure(e, 'add')

    with timed() as timer:
        with timer.section('add'):
            out = np.empty(A.shape, dtype=np.float64)
            np.add(A.storage, B.storage, out=out)
            C = Matrix._from_owned(out)

    return Result.success(
        C, 'add',
        info={'shape': C.shape},
        timing=timer.result(),
    )


def multiply(
    A: Matrix | None,
    B: Matrix | None,
    *,
    mode: str = MODE_STANDARD,
) -> Result[Matrix]:
    """
    Matrix product A @ B by triple nested (i, j, k) iteration.

    Parameters
    ----------
    A, B : Matrix
        Left and right operands.
    mode : str
        'standard' requires A.ncols == B.nrows. 'legacy' also requires
        A.nrows == B.ncols.

    Returns
    -------
    Result[Matrix] with a new (A.nrows, B.ncols) matrix on success.

    Raises
    ------
    ValidationError
        If mode is unknown.
    """
    check_mode(mode)
    try:
        _check_binary_operands(A, B)
        check_product_shape(A, B, mode)
    except DimensionError as e:
        warnings: tuple[str, ...] = ()
        if mode == MODE_LEGACY and A.ncols == B.nrows:
            warnings = (
                f"legacy mode rejected a {A.nrows}x{A.ncols} @ {B.nrows}x{B.ncols} "
                f"product that is defined in standard mode",
            )
        logger.debug("multiply failed: %s", e)
        return Result.failure(e, 'multiply', info={'mode': mode}, warnings=warnings)
    except ValidationError as e:
        logger.debug("multiply failed: %s", e)
        return Result.failure(e, 'multiply', info={'mode': mode})

    n, inner, p = A.nrows, A.ncols, B.ncols
    with timed() as timer:
        with timer.section('multiply'):
            a = A.storage.tolist()
            b = B.storage.tolist()
            out = np.zeros((n, p), dtype=np.float64)
            for i in range(n):
                a_row = a[i]
                for j in range(p):
                    acc = 0.0
                    for k in range(inner):
                        acc += a_row[k] * b[k][j]
                    out[i, j] = acc
            C = Matrix._from_owned(out)

    return Result.success(
        C, 'multiply',
        info={'mode': mode, 'shape': C.shape, 'inner': inner},
        timing=timer.result(),
    )


def l1_norm(A: Matrix | None) -> Result[float]:
    """
    Entry-wise L1 norm: sum of absolute values.

    Fails with INVALID_ARGUMENT (value 0.0) if A is absent, has no
    storage, or a dimension is non-positive.
    """
    try:
        check_norm_operand(A, 'A')
    except ValidationError as e:
        logger.debug("l1_norm failed: %s", e)
        return Result.failure(e, 'l1_norm', sentinel=0.0)

    with timed() as timer:
        with timer.section('l1_norm'):
            total = 0.0
            for row in A.storage.tolist():
                for x in row:
                    total += abs(x)

    return Result.success(total, 'l1_norm', info={'shape': A.shape}, timing=timer.result())


def l2_norm(A: Matrix | None, *, mode: str = MODE_STANDARD) -> Result[float]:
    """
    Entry-wise L2 (Frobenius) norm: sqrt of the sum of squares.

    Parameters
    ----------
    A : Matrix
    mode : str
        'standard' validates A exactly like l1_norm. 'legacy' returns a
        successful 0.0 for an absent or unallocated A.

    Raises
    ------
    ValidationError
        If mode is unknown.
    """
    check_mode(mode)
    if mode == MODE_LEGACY and (is_absent(A) or A.is_empty):
        return Result.success(0.0, 'l2_norm', info={'mode': mode})

    try:
        check_norm_operand(A, 'A')
    except ValidationError as e:
        logger.debug("l2_norm failed: %s", e)
        return Result.failure(e, 'l2_norm', sentinel=0.0, info={'mode': mode})

    with timed() as timer:
        with timer.section('l2_norm'):
            total = 0.0
            for row in A.storage.tolist():
                for x in row:
                    total += x * x
            norm = math.sqrt(total)

    return Result.success(
        norm, 'l2_norm',
        info={'mode': mode, 'shape': A.shape},
        timing=timer.result(),
    )
