"""
Row reduction to reduced row-echelon form.

Gauss-Jordan elimination with partial pivoting. The pivot for each column
is the largest-magnitude entry among the rows not yet used as pivots; a
column whose best candidate is <= epsilon contributes no pivot. The pivot
row is normalised and the column is eliminated from every other row.

Used directly by rref()/rank(), by the RREF branch of the linear solver,
and by the eigenvector null-space extraction.
"""

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray


@dataclass(frozen=True)
class RowReduction:
    """
    Result of row reduction.

    Attributes:
        matrix: The RREF matrix (same shape as the input)
        pivot_columns: Column index of the leading 1 in each non-zero row,
                       in row order
    """
    matrix: NDArray[np.floating[Any]]
    pivot_columns: tuple[int, ...]

    @property
    def rank(self) -> int:
        """Number of pivots."""
        return len(self.pivot_columns)

    @property
    def free_columns(self) -> tuple[int, ...]:
        """Columns without a pivot, in ascending order."""
        pivots = set(self.pivot_columns)
        return tuple(j for j in range(self.matrix.shape[1]) if j not in pivots)


def row_reduce(M: ArrayLike, epsilon: float) -> RowReduction:
    """
    Reduce M to reduced row-echelon form.

    Entries with |x| <= epsilon in the output are set to exactly 0.0 and
    pivots to exactly 1.0, so reducing the output again returns it unchanged.

    Args:
        M: 2D matrix (any shape). Never modified.
        epsilon: Pivot threshold

    Returns:
        RowReduction with the reduced matrix and its pivot columns
    """
    R = np.array(M, dtype=np.float64, copy=True)
    n_rows, n_cols = R.shape
    pivot_columns: list[int] = []

    row = 0
    for col in range(n_cols):
        if row == n_rows:
            break

        candidates = np.abs(R[row:, col])
        offset = int(np.argmax(candidates))
        if candidates[offset] <= epsilon:
            continue

        pivot_row = row + offset
        if pivot_row != row:
            R[[row, pivot_row]] = R[[pivot_row, row]]

        R[row] = R[row] / R[row, col]

        factors = R[:, col].copy()
        factors[row] = 0.0
        R -= np.outer(factors, R[row])

        R[:, col] = 0.0
        R[row, col] = 1.0
        pivot_columns.append(col)
        row += 1

    R[np.abs(R) <= epsilon] = 0.0
    return RowReduction(matrix=R, pivot_columns=tuple(pivot_columns))
