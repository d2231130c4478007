"""
Gaussian elimination over any numeric kind of the tower.

The solver only needs ``+ - *``, ``abs`` and a multiplicative inverse, so it
works unchanged for real scalars, Complex and Quaternion coefficients. For
quaternions the system is read as ``sum(A[r][c] * x[c]) = b[r]`` with the
unknowns on the right; every elimination step multiplies on the left so
that reading is preserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple, Union

from .coercion import reciprocal
from .core.logging import get_context_logger

logger = get_context_logger(__name__, component="solver")


@dataclass(frozen=True)
class Solution:
    """Unique solution of a linear system."""

    values: Tuple[Any, ...]


@dataclass(frozen=True)
class Singular:
    """The system has no unique solution; elimination found no pivot in ``column``."""

    column: int


SolveResult = Union[Solution, Singular]


def solve(matrix: Sequence[Sequence[Any]], constants: Sequence[Any]) -> SolveResult:
    """
    Solve ``matrix * x = constants`` with partial pivoting.

    Args:
        matrix: Square coefficient matrix, as a sequence of rows
        constants: Right-hand side, one entry per row

    Returns:
        Solution with the unknowns, or Singular when no pivot exists

    Raises:
        ValueError: If the matrix is not square or sizes disagree
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix) or len(constants) != size:
        raise ValueError("solve requires a square matrix and one constant per row")

    rows = [list(row) + [constants[index]] for index, row in enumerate(matrix)]

    for column in range(size):
        pivot_row = max(range(column, size), key=lambda r: abs(rows[r][column]))
        if rows[pivot_row][column] == 0:
            logger.debug("Singular system", extra_data={"column": column, "size": size})
            return Singular(column=column)
        rows[column], rows[pivot_row] = rows[pivot_row], rows[column]

        pivot_inverse = reciprocal(rows[column][column])
        for row in range(column + 1, size):
            factor = rows[row][column] * pivot_inverse
            if factor == 0:
                continue
            rows[row] = [a - factor * b for a, b in zip(rows[row], rows[column])]

    values = [0] * size
    for row in reversed(range(size)):
        remainder = rows[row][size] - sum(
            rows[row][column] * values[column] for column in range(row + 1, size)
        )
        values[row] = reciprocal(rows[row][row]) * remainder
    return Solution(values=tuple(values))
