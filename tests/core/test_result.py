"""
Tests for the Result[P] envelope.

Validates:
    - Generic type parameter works with arbitrary payload types
    - Frozen immutability
    - Default warnings factory
    - has_warning() method
"""

from dataclasses import FrozenInstanceError, dataclass

import pytest

from pylinalg.core.result import Result
from pylinalg.equations.solution import EquationParams


# ═══════════════════════════════════════════════════════════════════════
# Test payload types
# ═══════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class FakeParams:
    """Minimal payload for testing."""
    value: float


# ═══════════════════════════════════════════════════════════════════════
# Construction and field access
# ═══════════════════════════════════════════════════════════════════════


class TestResultConstruction:
    """Result can be created with any payload type."""

    def test_basic_creation(self):
        result = Result(
            params=FakeParams(value=42.0),
            info={"order": 3},
            timing={"total_seconds": 0.01},
            method="cramer",
        )
        assert result.params.value == 42.0
        assert result.info["order"] == 3
        assert result.timing["total_seconds"] == 0.01
        assert result.method == "cramer"

    def test_equation_params_payload(self):
        result = Result(
            params=EquationParams(unknowns=(1.0, 2.0)),
            info={"order": 2, "determinant": 7.0},
            timing=None,
            method="cramer",
        )
        assert result.params.unknowns == (1.0, 2.0)
        assert result.info["determinant"] == 7.0

    def test_timing_none(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, method="inverse")
        assert result.timing is None


# ═══════════════════════════════════════════════════════════════════════
# Defaults and warnings
# ═══════════════════════════════════════════════════════════════════════


class TestWarnings:
    """Default warnings tuple and has_warning() lookup."""

    def test_warnings_default_empty(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, method="cramer")
        assert result.warnings == ()
        assert isinstance(result.warnings, tuple)

    def test_has_warning_substring(self):
        result = Result(
            params=FakeParams(value=1.0),
            info={},
            timing=None,
            method="cramer",
            warnings=("determinant is tiny", "order above 8"),
        )
        assert result.has_warning("tiny")
        assert result.has_warning("order above")
        assert not result.has_warning("singular")


# ═══════════════════════════════════════════════════════════════════════
# Immutability
# ═══════════════════════════════════════════════════════════════════════


class TestFrozen:
    """Result fields cannot be reassigned."""

    def test_cannot_set_params(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, method="cramer")
        with pytest.raises(FrozenInstanceError):
            result.params = FakeParams(value=2.0)

    def test_cannot_set_method(self):
        result = Result(params=FakeParams(value=1.0), info={}, timing=None, method="cramer")
        with pytest.raises(FrozenInstanceError):
            result.method = "inverse"

    def test_equation_params_frozen(self):
        params = EquationParams(unknowns=(1.0,))
        with pytest.raises(FrozenInstanceError):
            params.unknowns = (2.0,)
