"""
Tests for the Result[T] envelope.

Validates:
    - success()/failure() constructors and the ok/failed/kind accessors
    - unwrap() returns the payload or raises the recorded error unchanged
    - Frozen immutability
    - Default factories (info, warnings, provenance)
"""

from dataclasses import FrozenInstanceError

import pytest

from densematrix.core.exceptions import DimensionError, ErrorKind, InvalidIndexError
from densematrix.core.result import Result, _default_provenance


# ═══════════════════════════════════════════════════════════════════════
# Success
# ═══════════════════════════════════════════════════════════════════════


class TestSuccess:
    """Result.success() carries a payload and no error."""

    def test_basic_creation(self):
        result = Result.success(
            3.5, "get",
            info={"shape": (2, 2)},
            timing={"total_seconds": 0.01},
        )
        assert result.value == 3.5
        assert result.operation == "get"
        assert result.info["shape"] == (2, 2)
        assert result.timing["total_seconds"] == 0.01

    def test_ok_flags(self):
        result = Result.success(0.0, "get")
        assert result.ok is True
        assert result.failed is False
        assert result.kind is None
        assert result.error is None

    def test_zero_value_is_still_ok(self):
        """A genuine 0.0 is distinguishable from a failure."""
        result = Result.success(0.0, "l1_norm")
        assert result.ok
        assert result.unwrap() == 0.0

    def test_none_payload(self):
        result = Result.success(None, "put")
        assert result.ok
        assert result.unwrap() is None

    def test_value_or_returns_value(self):
        assert Result.success(2.0, "get").value_or(-1.0) == 2.0


# ═══════════════════════════════════════════════════════════════════════
# Failure
# ═══════════════════════════════════════════════════════════════════════


class TestFailure:
    """Result.failure() carries the error and a sentinel payload."""

    def test_sentinel_value(self):
        err = InvalidIndexError("out of bounds")
        result = Result.failure(err, "get", sentinel=0.0)
        assert result.value == 0.0
        assert result.ok is False
        assert result.failed is True
        assert result.kind is ErrorKind.INVALID_INDEX

    def test_default_sentinel_is_none(self):
        result = Result.failure(DimensionError("mismatch"), "add")
        assert result.value is None
        assert result.timing is None

    def test_unwrap_raises_recorded_error(self):
        err = DimensionError("mismatch", left_shape=(2, 3), right_shape=(3, 3))
        result = Result.failure(err, "add")
        with pytest.raises(DimensionError) as exc_info:
            result.unwrap()
        assert exc_info.value is err

    def test_value_or_returns_default(self):
        result = Result.failure(InvalidIndexError("x"), "get", sentinel=0.0)
        assert result.value_or(None) is None

    def test_failure_warnings(self):
        result = Result.failure(
            DimensionError("mismatch"), "multiply",
            warnings=("legacy mode rejected a product",),
        )
        assert result.has_warning("legacy")
        assert not result.has_warning("standard")


# ═══════════════════════════════════════════════════════════════════════
# Defaults
# ═══════════════════════════════════════════════════════════════════════


class TestDefaults:
    """Default values for info, warnings and provenance."""

    def test_info_default_empty(self):
        assert Result.success(1.0, "get").info == {}

    def test_warnings_default_empty(self):
        result = Result(value=1.0, operation="get")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_warnings_coerced_to_tuple(self):
        result = Result.success(1.0, "get", warnings=["a", "b"])
        assert result.warnings == ("a", "b")

    def test_provenance_auto_generated(self):
        result = Result.success(1.0, "get")
        assert "densematrix_version" in result.provenance
        assert "numpy_version" in result.provenance

    def test_provenance_explicit_override(self):
        result = Result(value=1.0, operation="get", provenance={"custom": "metadata"})
        assert result.provenance == {"custom": "metadata"}


class TestDefaultProvenance:
    """_default_provenance() generates version metadata."""

    def test_versions_are_strings(self):
        prov = _default_provenance()
        assert isinstance(prov["densematrix_version"], str)
        assert isinstance(prov["numpy_version"], str)

    def test_independent_copies(self):
        prov1 = _default_provenance()
        prov2 = _default_provenance()
        assert prov1 is not prov2
        assert prov1 == prov2


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestImmutability:
    """Result is frozen."""

    def test_cannot_set_value(self):
        result = Result.success(1.0, "get")
        with pytest.raises(FrozenInstanceError):
            result.value = 2.0

    def test_cannot_set_error(self):
        result = Result.success(1.0, "get")
        with pytest.raises(FrozenInstanceError):
            result.error = InvalidIndexError("x")
