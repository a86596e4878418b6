"""
Matrix: dense float64 matrix with explicit lifecycle and element access.

A Matrix owns one contiguous C-ordered buffer of shape (nrows, ncols).
If either requested dimension is non-positive the matrix is in the
empty/unallocated state: the dimensions are recorded but there is no
buffer. This is distinct from a zero-filled matrix.

Usage:
    from densematrix import Matrix, get, put, release, destroy

    M = Matrix(2, 3)
    put(M, 0, 1, 4.5)
    get(M, 0, 1).value        # 4.5
    get(M, 2, 0).kind         # ErrorKind.INVALID_INDEX

    with Matrix.from_rows([[1, 2], [3, 4]]) as A:
        ...                   # released on exit

    M = destroy(M)            # M is None
"""

from __future__ import annotations

import logging
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from densematrix.core.compute.tolerances import ToleranceTier, select_tolerance
from densematrix.core.exceptions import ValidationError
from densematrix.core.result import Result
from densematrix.core.validation import (
    check_array,
    check_dimension,
    check_index,
    check_scalar,
    is_absent,
)

logger = logging.getLogger(__name__)


class Matrix:
    """
    Dense 2D array of double-precision values.

    Construction:
        Matrix(nrows, ncols)           zero-filled, or empty if a dim <= 0
        Matrix.zeros(nrows, ncols)     same as above
        Matrix.identity(n)
        Matrix.from_array(data)        copies any 1D/2D numeric array-like
        Matrix.from_rows(rows)

    Not safe for concurrent mutation. Serialize put/reinit/release per
    instance.
    """

    __slots__ = ('_nrows', '_ncols', '_vals', '_destroyed')

    def __init__(self, nrows: int, ncols: int):
        self._vals: NDArray[np.float64] | None = None
        self._nrows = 0
        self._ncols = 0
        self._destroyed = False
        self._allocate(nrows, ncols)

    def _allocate(self, nrows: int, ncols: int) -> None:
        nrows = check_dimension(nrows, 'nrows')
        ncols = check_dimension(ncols, 'ncols')
        self._nrows = nrows
        self._ncols = ncols
        if nrows <= 0 or ncols <= 0:
            self._vals = None
            return
        self._vals = np.zeros((nrows, ncols), dtype=np.float64)

    # === Alternative constructors ===

    @classmethod
    def zeros(cls, nrows: int, ncols: int) -> Matrix:
        return cls(nrows, ncols)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix (empty if n <= 0)."""
        M = cls(n, n)
        if M._vals is not None:
            np.fill_diagonal(M._vals, 1.0)
        return M

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from array-like data.

        Parameters
        ----------
        data : array-like
            1D or 2D numeric data. Objects with a ``.values`` attribute
            (pandas DataFrame) are accepted. 1D input becomes one row.
            The data is copied.
        """
        array = check_array(data, 'data')
        nrows, ncols = array.shape
        M = cls(nrows, ncols)
        if M._vals is not None:
            M._vals[...] = array
        return M

    @classmethod
    def _from_owned(cls, array: NDArray[np.float64]) -> Matrix:
        """Adopt a freshly allocated (nrows, ncols) float64 buffer without copying."""
        M = cls(0, 0)
        M._nrows, M._ncols = array.shape
        M._vals = array
        return M

    @classmethod
    def from_rows(cls, rows) -> Matrix:
        """Build a Matrix from a sequence of equal-length rows."""
        return cls.from_array(rows)

    # === Lifecycle ===

    def reinit(self, nrows: int, ncols: int) -> None:
        """
        Reinitialize to the given dimensions, zero-filled.

        Any existing storage is released first.

        Raises:
            ValidationError: If the handle was destroyed or a dimension is
                not an integer
        """
        if self._destroyed:
            raise ValidationError("cannot reinitialize a destroyed matrix")
        if self._vals is not None:
            logger.debug(
                "reinit %dx%d -> %sx%s: releasing live storage",
                self._nrows, self._ncols, nrows, ncols,
            )
            self.release()
        self._allocate(nrows, ncols)

    def release(self) -> None:
        """
        Drop storage and reset dimensions to 0x0.

        Does nothing if the matrix has no storage; safe to call repeatedly.
        """
        if self._vals is None:
            return
        self._vals = None
        self._nrows = 0
        self._ncols = 0

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()

    # === Properties ===

    @property
    def nrows(self) -> int:
        return self._nrows

    @property
    def ncols(self) -> int:
        return self._ncols

    @property
    def shape(self) -> tuple[int, int]:
        """Recorded (nrows, ncols), including for empty matrices."""
        return (self._nrows, self._ncols)

    @property
    def storage(self) -> NDArray[np.float64] | None:
        """Read-only view of the buffer, or None in the empty state."""
        if self._vals is None:
            return None
        view = self._vals.view()
        view.flags.writeable = False
        return view

    @property
    def is_allocated(self) -> bool:
        return self._vals is not None

    @property
    def is_empty(self) -> bool:
        """True in the empty/unallocated state."""
        return self._vals is None

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    # === Element access ===

    def get(self, i: int, j: int) -> Result[float]:
        return get(self, i, j)

    def put(self, i: int, j: int, val: float) -> Result[None]:
        return put(self, i, j, val)

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return get(self, i, j).unwrap()

    def __setitem__(self, index: tuple[int, int], val: float) -> None:
        i, j = index
        put(self, i, j, val).unwrap()

    # === Conversion ===

    def copy(self) -> Matrix:
        """
        Independent copy with its own buffer.

        Raises:
            ValidationError: If the handle was destroyed
        """
        if self._destroyed:
            raise ValidationError("cannot copy a destroyed matrix")
        M = Matrix(self._nrows, self._ncols)
        if self._vals is not None:
            M._vals[...] = self._vals
        return M

    def to_array(self) -> NDArray[np.float64]:
        """
        Copy of the data as a (nrows, ncols) array.

        Empty matrices give an array with zero rows or columns.
        """
        if self._vals is None:
            return np.zeros((max(self._nrows, 0), max(self._ncols, 0)), dtype=np.float64)
        return self._vals.copy()

    def tolist(self) -> list[list[float]]:
        return self.to_array().tolist()

    def allclose(self, other: Any, tolerance: ToleranceTier | None = None) -> bool:
        """
        Entry-wise comparison within a tolerance tier.

        The tier defaults to one chosen from the number of entries.
        """
        if not isinstance(other, Matrix):
            return False
        if self._destroyed or other._destroyed:
            return False
        if self.shape != other.shape or self.is_empty != other.is_empty:
            return False
        if self._vals is None:
            return True
        if tolerance is None:
            tolerance = select_tolerance(self._nrows * self._ncols)
        return bool(np.allclose(
            self._vals, other._vals, rtol=tolerance.rtol, atol=tolerance.atol,
        ))

    # === Operators ===

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.matrix.operations import add
        return add(self, other).unwrap()

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from densematrix.matrix.operations import multiply
        return multiply(self, other).unwrap()

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self._destroyed != other._destroyed:
            return False
        if self.shape != other.shape or self.is_empty != other.is_empty:
            return False
        if self._vals is None:
            return True
        return bool(np.array_equal(self._vals, other._vals))

    __hash__ = None  # type: ignore[assignment]

    def __len__(self) -> int:
        return 0 if self._vals is None else self._nrows

    def __repr__(self) -> str:
        if self._destroyed:
            return "Matrix(destroyed)"
        state = ", empty" if self._vals is None else ""
        return f"Matrix(nrows={self._nrows}, ncols={self._ncols}{state})"

    def __str__(self) -> str:
        if self._vals is None:
            return repr(self)
        return np.array2string(self._vals, precision=6, suppress_small=True)


def get(M: Matrix | None, i: int, j: int) -> Result[float]:
    """
    Value at row i, column j (0-indexed).

    On failure the Result has value 0.0 and an InvalidIndexError.
    """
    try:
        i, j = check_index(M, i, j)
    except ValidationError as e:
        logger.debug("get(%r, %r) failed: %s", i, j, e)
        return Result.failure(e, 'get', sentinel=0.0)
    return Result.success(float(M._vals[i, j]), 'get')


def put(M: Matrix | None, i: int, j: int, val: float) -> Result[None]:
    """
    Store val at row i, column j (0-indexed).

    Nothing is written on failure.
    """
    try:
        i, j = check_index(M, i, j)
        value = check_scalar(val, 'val')
    except ValidationError as e:
        logger.debug("put(%r, %r) failed: %s", i, j, e)
        return Result.failure(e, 'put')
    M._vals[i, j] = value
    return Result.success(None, 'put')


def release(M: Matrix | None) -> None:
    """Release M's storage. No-op for None."""
    if M is None:
        return
    M.release()


def destroy(M: Matrix | None) -> None:
    """
    Release M and mark the handle destroyed.

    A destroyed handle is treated as absent by every operation. Always
    returns None, so ``M = destroy(M)`` drops the reference.
    """
    if is_absent(M):
        return None
    M.release()
    M._destroyed = True
    return None
