"""
Tests for the element-wise vector helpers.
"""

from fractions import Fraction

import pytest

from pylinalg.core.sequence import add, cross, dot, equal, proportional, scale


class TestLengthMismatch:
    """Binary helpers return None when lengths differ."""

    @pytest.mark.parametrize("fn", [add, dot, cross, equal, proportional])
    def test_none_on_mismatch(self, fn):
        assert fn([1, 2, 3], [1, 2]) is None


class TestArithmetic:

    def test_add(self):
        assert add([1, 2, 3], [10, 20, 30]) == [11, 22, 33]

    def test_scale(self):
        assert scale([1, -2], 3) == [3, -6]

    def test_scale_empty(self):
        assert scale([], 5) == []

    def test_dot(self):
        assert dot([1, 2, 3], [4, 5, 6]) == 32

    def test_dot_empty_is_zero(self):
        assert dot([], []) == 0

    def test_dot_fractions_exact(self):
        assert dot([Fraction(1, 2), Fraction(1, 3)], [2, 3]) == Fraction(2)

    def test_cross_is_elementwise(self):
        assert cross([1, 2, 3], [4, 5, 6]) == [4, 10, 18]

    def test_equal(self):
        assert equal([1, 2], [1, 2]) is True
        assert equal([1, 2], [1, 3]) is False


class TestProportional:
    """Rate taken at the first nonzero entry of the second sequence."""

    def test_multiple(self):
        assert proportional([2, 4, 6], [1, 2, 3]) is True

    def test_not_proportional(self):
        assert proportional([2, 4, 7], [1, 2, 3]) is False

    def test_zero_in_second_requires_zero_in_first(self):
        assert proportional([0, 4], [0, 2]) is True
        assert proportional([1, 4], [0, 2]) is False

    def test_all_zero_pair(self):
        assert proportional([0, 0], [0, 0]) is True

    def test_zero_second_nonzero_first(self):
        assert proportional([1, 0], [0, 0]) is False

    def test_zero_first_is_proportional_with_rate_zero(self):
        assert proportional([0, 0], [1, 2]) is True

    def test_empty(self):
        assert proportional([], []) is True

    def test_fractions(self):
        assert proportional([Fraction(1, 3), Fraction(2, 3)], [1, 2]) is True
