"""
Tests for inversion counting and permutation sign.
"""

import operator
from itertools import permutations

import pytest

from pylinalg.core.compute.permutation import (
    count_inversions,
    inversions_of,
    permutation_sign,
)


class TestInversions:

    def test_identity_has_none(self):
        assert count_inversions([0, 1, 2, 3]) == 0

    def test_reversed(self):
        # n * (n - 1) / 2 pairs are all inverted
        assert count_inversions([3, 2, 1, 0]) == 6

    def test_inversions_of_single_element(self):
        # 0 is smaller than both 2 and 1 before it
        assert inversions_of([2, 1, 0], 2) == 2
        assert inversions_of([2, 1, 0], 0) == 0

    def test_custom_order(self):
        # Under >, an ascending sequence is fully inverted
        assert count_inversions([0, 1, 2], operator.gt) == 3


class TestSign:

    def test_transposition_is_odd(self):
        assert permutation_sign([1, 0, 2]) == -1

    def test_three_cycle_is_even(self):
        assert permutation_sign([1, 2, 0]) == 1

    @pytest.mark.parametrize("n", [2, 3, 4])
    def test_signs_balance(self, n):
        signs = [permutation_sign(p) for p in permutations(range(n))]
        assert sum(signs) == 0
