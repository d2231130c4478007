"""Tests for the linear solver over the numeric tower."""

from dataclasses import FrozenInstanceError
from fractions import Fraction

import pytest

from hypercomplex import Complex, Quaternion, Singular, Solution, solve


class TestSolveReal:
    """Test systems with real coefficients."""

    def test_exact_integer_system(self):
        """Test 2x + y = 5, x - y = 1 solves exactly."""
        result = solve([[2, 1], [1, -1]], [5, 1])
        assert isinstance(result, Solution)
        assert result.values == (2, 1)
        assert all(isinstance(value, Fraction) for value in result.values)

    def test_pivoting(self):
        """Test a zero leading coefficient is pivoted away."""
        result = solve([[0, 1], [1, 0]], [3, 4])
        assert result == Solution(values=(4, 3))

    def test_singular(self):
        """Test a singular system reports the failing column."""
        result = solve([[1, 2], [2, 4]], [3, 6])
        assert result == Singular(column=1)

    def test_zero_matrix(self):
        """Test an all-zero matrix fails at the first column."""
        assert solve([[0, 0], [0, 0]], [0, 0]) == Singular(column=0)

    def test_not_square(self):
        """Test mismatched sizes raise ValueError."""
        with pytest.raises(ValueError):
            solve([[1, 2]], [1])
        with pytest.raises(ValueError):
            solve([[1, 0], [0, 1]], [1])


class TestSolveHypercomplex:
    """Test systems with Complex and Quaternion coefficients."""

    def test_complex_system(self, assert_close):
        """Test a Complex system recovers the known solution."""
        x, y = Complex(1, 2), Complex(3, -1)
        matrix = [[Complex(1, 1), 2], [3, Complex(0, -1)]]
        constants = [matrix[0][0] * x + matrix[0][1] * y, matrix[1][0] * x + matrix[1][1] * y]
        assert constants == [Complex(5, 1), Complex(2, 3)]

        result = solve(matrix, constants)
        assert isinstance(result, Solution)
        assert_close(result.values[0], x)
        assert_close(result.values[1], y)

    def test_quaternion_single_equation(self, units):
        """Test J * x = K gives x = -I."""
        i, j, k = units
        assert solve([[j]], [k]) == Solution(values=(-i,))

    def test_quaternion_system_keeps_order(self, units, assert_close):
        """Test coefficients stay left of the unknowns."""
        i, j, k = units
        x = (Quaternion(1, 2, 0, 0), Quaternion(0, 0, 1, 1))
        matrix = [[i, j], [k, 2]]
        constants = [matrix[r][0] * x[0] + matrix[r][1] * x[1] for r in range(2)]

        result = solve(matrix, constants)
        assert isinstance(result, Solution)
        for actual, expected in zip(result.values, x):
            assert_close(actual, expected)

    def test_complex_singular(self):
        """Test a singular Complex system."""
        row = [Complex(1, 1), Complex(0, 2)]
        result = solve([row, [2 * c for c in row]], [1, 2])
        assert result == Singular(column=1)


class TestSolveResult:
    """Test the result types."""

    def test_results_are_frozen(self):
        """Test results cannot be modified."""
        with pytest.raises(FrozenInstanceError):
            Solution(values=(1,)).values = (2,)
        with pytest.raises(FrozenInstanceError):
            Singular(column=0).column = 1
