"""
Tests for pymatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - IndexOutOfRangeError is also a builtin IndexError
    - Diagnostic attributes on InvalidDimensionError, IndexOutOfRangeError,
      SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pymatrix.core.exceptions import (
    IndexOutOfRangeError,
    InvalidDimensionError,
    NumericalError,
    PyMatrixError,
    RankDeficiencyWarning,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    def test_validation_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise ValidationError("bad input")

    def test_invalid_dimension_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise InvalidDimensionError("not square")

    def test_index_out_of_range_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise IndexOutOfRangeError("out of range")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_pymatrix_error(self):
        with pytest.raises(PyMatrixError):
            raise SingularMatrixError("singular")

    def test_singular_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)

    def test_rank_deficiency_is_user_warning(self):
        assert issubclass(RankDeficiencyWarning, UserWarning)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimensionError:

    def test_all_attributes(self):
        err = InvalidDimensionError("expected square", rows=2, cols=3)
        assert str(err) == "expected square"
        assert err.rows == 2
        assert err.cols == 3

    def test_defaults_are_none(self):
        err = InvalidDimensionError("bad")
        assert err.rows is None
        assert err.cols is None


class TestIndexOutOfRangeError:

    def test_all_attributes(self):
        err = IndexOutOfRangeError("out", index=(3, 0), shape=(2, 2))
        assert err.index == (3, 0)
        assert err.shape == (2, 2)

    def test_defaults_are_none(self):
        err = IndexOutOfRangeError("out")
        assert err.index is None
        assert err.shape is None


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError("zero pivot", matrix_name="augmented", pivot_index=1)
        assert str(err) == "zero pivot"
        assert err.matrix_name == "augmented"
        assert err.pivot_index == 1

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.pivot_index is None

    def test_catchable_with_attributes(self):
        """Attributes accessible in except block."""
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", pivot_index=0)
        assert exc_info.value.pivot_index == 0
