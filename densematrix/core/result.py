"""
Generic result container for all densematrix operations.

Every public operation returns a Result instead of raising on bad input.
A Result is either a success (value set, error None) or a failure (error
set, value is the operation's sentinel). A valid zero and a failure are
therefore never confusable: check ``ok`` (or ``kind``) first.

Design decisions:
    - Generic over the payload T (float, Matrix, or None for put)
    - error holds the exception instance, so unwrap() raises it unchanged
    - timing is optional (element access is not timed)
    - Immutable (frozen=True)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import numpy as np

from densematrix.core.exceptions import DenseMatrixError, ErrorKind

T = TypeVar('T')


def _default_provenance() -> dict[str, str]:
    """Library versions that produced a result."""
    from densematrix import __version__

    return {
        'densematrix_version': __version__,
        'numpy_version': np.__version__,
    }


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Immutable success/failure envelope.

    Type Parameters:
        T: The payload type

    Attributes:
        value: Payload on success; sentinel (0.0 or None) on failure
        error: Exception describing the failure, or None on success
        operation: Name of the operation that produced this result
        info: Structured metadata (mode, shapes)
        timing: Execution timing breakdown, or None if not measured
        warnings: Non-fatal issues encountered during the operation
        provenance: Library versions

    Examples:
        >>> res = get(M, 0, 0)
        >>> if res.ok:
        ...     use(res.value)
        >>> product = multiply(A, B).unwrap()  # raises DimensionError on mismatch
    """
    value: T | None
    operation: str
    error: DenseMatrixError | None = None
    info: dict[str, Any] = field(default_factory=dict)
    timing: dict[str, float] | None = None
    warnings: tuple[str, ...] = field(default_factory=tuple)
    provenance: dict[str, str] = field(default_factory=_default_provenance)

    @classmethod
    def success(
        cls,
        value: T | None,
        operation: str,
        *,
        info: dict[str, Any] | None = None,
        timing: dict[str, float] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result[T]:
        return cls(
            value=value,
            operation=operation,
            info=info or {},
            timing=timing,
            warnings=tuple(warnings),
        )

    @classmethod
    def failure(
        cls,
        error: DenseMatrixError,
        operation: str,
        *,
        sentinel: T | None = None,
        info: dict[str, Any] | None = None,
        warnings: tuple[str, ...] = (),
    ) -> Result[T]:
        return cls(
            value=sentinel,
            operation=operation,
            error=error,
            info=info or {},
            timing=None,
            warnings=tuple(warnings),
        )

    @property
    def ok(self) -> bool:
        """True if the operation succeeded."""
        return self.error is None

    @property
    def failed(self) -> bool:
        return self.error is not None

    @property
    def kind(self) -> ErrorKind | None:
        """ErrorKind of the failure, or None on success."""
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self) -> T:
        """
        Return the payload, raising the recorded error on failure.

        Raises:
            DenseMatrixError: The exact exception recorded by the operation
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def value_or(self, default: Any) -> Any:
        """Return the payload on success, ``default`` on failure."""
        if self.error is not None:
            return default
        return self.value

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
