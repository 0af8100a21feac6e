"""
Tests for PyLinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - Diagnostic attributes on InvalidDimension and SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    InvalidDimension,
    NumericalError,
    PyLinalgError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    def test_validation_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong shape")

    def test_invalid_dimension_is_dimension_error(self):
        with pytest.raises(DimensionError):
            raise InvalidDimension("zero rows", rows=0, columns=3)

    def test_invalid_dimension_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise InvalidDimension("zero rows", rows=0, columns=3)

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_numerical_error_is_not_validation_error(self):
        assert not isinstance(NumericalError("x"), ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# InvalidDimension
# ═══════════════════════════════════════════════════════════════════════


class TestInvalidDimension:
    """InvalidDimension carries the requested shape."""

    def test_attributes(self):
        err = InvalidDimension("columns must be >= 1", rows=2, columns=0)
        assert str(err) == "columns must be >= 1"
        assert err.rows == 2
        assert err.columns == 0


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "coefficients are singular",
            matrix_name="coefficients",
            determinant=0.0,
            method="cramer",
        )
        assert str(err) == "coefficients are singular"
        assert err.matrix_name == "coefficients"
        assert err.determinant == 0.0
        assert err.method == "cramer"

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.method is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", method="inverse")
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.method == "inverse"
