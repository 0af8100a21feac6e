"""
Tests for LinearEquations.

Validates:
    - Default construction and shape accessors
    - Cramer's rule and inverse paths agree
    - Abandoned solves leave the solution empty
    - 1-based unknown access
"""

from fractions import Fraction

import pytest

from pylinalg import LinearEquations, Matrix, Table
from pylinalg.core.exceptions import InvalidDimension


EXPECTED = (-0.4, -1.35, 0.7)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_default_single_equation(self):
        system = LinearEquations()
        assert system.equations == 1
        assert system.columns == 2
        assert system.get_row(1) == [1, 0]

    def test_shape(self, three_equations):
        assert three_equations.equations == 3
        assert three_equations.columns == 4
        assert three_equations.unknowns == 3

    def test_column_major_data(self):
        system = LinearEquations(2, 3, [3, -2, 2, 1, 7, 0])
        assert system.get_row(1) == [3, 2, 7]
        assert system.get_row(2) == [-2, 1, 0]

    def test_zero_dimension(self):
        with pytest.raises(InvalidDimension):
            LinearEquations(0, 3)

    def test_from_table_copies(self):
        table = Table.from_rows([[1, 2, 3]])
        system = LinearEquations.from_table(table)
        table.set_element(1, 1, 9)
        assert system.get_element(1, 1) == 1

    def test_coefficients_and_constants(self, three_equations):
        assert three_equations.coefficients() == Matrix.from_rows(
            [[1, 2, 3], [-1, 2, -1], [-5, 2, 1]]
        )
        assert three_equations.constants() == Matrix.from_rows([[-1], [-3], [0]])

    def test_no_unknowns_has_no_coefficients(self):
        assert LinearEquations(2, 1, [1, 2]).coefficients() is None


# ═══════════════════════════════════════════════════════════════════════
# Cramer's rule
# ═══════════════════════════════════════════════════════════════════════


class TestCalculate:

    def test_unsolved_is_empty(self, three_equations):
        assert three_equations.solution == ()
        assert three_equations.x_n(1) is None
        assert three_equations.last_result is None

    def test_three_equations(self, three_equations):
        three_equations.calculate()
        assert three_equations.solution == pytest.approx(EXPECTED)

    def test_x_n_is_one_based(self, three_equations):
        three_equations.calculate()
        assert three_equations.x_n(1) == pytest.approx(-0.4)
        assert three_equations.x_n(3) == pytest.approx(0.7)
        assert three_equations.x_n(0) is None
        assert three_equations.x_n(4) is None

    def test_last_result(self, three_equations):
        three_equations.calculate()
        result = three_equations.last_result
        assert result.method == 'cramer'
        assert result.info['order'] == 3
        assert result.info['determinant'] == pytest.approx(40)
        assert 'total_seconds' in result.timing

    def test_single_equation_is_noop(self):
        system = LinearEquations.from_rows([[2, 4]])
        system.calculate()
        assert system.solution == ()

    def test_singular_abandoned(self):
        system = LinearEquations.from_rows([[1, 2, 3], [2, 4, 6]])
        system.calculate()
        assert system.solution == ()

    def test_non_square_abandoned(self):
        system = LinearEquations.from_rows([[1, 2, 3, 4], [5, 6, 7, 9]])
        system.calculate()
        assert system.solution == ()

    def test_abandoned_solve_clears_previous(self, three_equations):
        three_equations.calculate()
        three_equations.set_row(3, [2, 4, 6, -2])
        assert three_equations.solution == ()
        three_equations.calculate()
        assert three_equations.solution == ()

    def test_equations_unchanged(self, three_equations):
        before = three_equations.to_table()
        three_equations.calculate()
        assert three_equations.to_table() == before

    def test_fractions_exact(self):
        rows = [[Fraction(v) for v in row] for row in [[1, 2, 3, -1], [-1, 2, -1, -3], [-5, 2, 1, 0]]]
        system = LinearEquations.from_rows(rows)
        system.calculate()
        assert system.solution == (Fraction(-2, 5), Fraction(-27, 20), Fraction(7, 10))


# ═══════════════════════════════════════════════════════════════════════
# Inverse path
# ═══════════════════════════════════════════════════════════════════════


class TestCalculateInverse:

    def test_three_equations(self, three_equations):
        three_equations.calculate_inverse()
        assert three_equations.solution == pytest.approx(EXPECTED)
        assert three_equations.last_result.method == 'inverse'

    def test_agrees_with_cramer(self, rng):
        a = rng.standard_normal((4, 5))
        cramer = LinearEquations.from_rows(a.tolist())
        inverse = LinearEquations.from_rows(a.tolist())
        cramer.calculate()
        inverse.calculate_inverse(max_workers=2)
        assert inverse.solution == pytest.approx(cramer.solution, rel=1e-9, abs=1e-12)

    def test_singular_abandoned(self):
        system = LinearEquations.from_rows([[1, 2, 3], [2, 4, 6]])
        system.calculate_inverse()
        assert system.solution == ()

    def test_single_equation_is_noop(self):
        system = LinearEquations()
        system.calculate_inverse()
        assert system.solution == ()


class TestOutput:

    def test_repr(self):
        assert repr(LinearEquations()) == "LinearEquations(1, 2, [1.0, 0.0])"

    def test_to_text(self):
        assert LinearEquations().to_text() == "matrix 1 2\n1.0 0.0\n"

    def test_equality(self, three_equations):
        assert three_equations == LinearEquations.from_table(three_equations.to_table())
