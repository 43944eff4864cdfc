"""
Matrix value type.

Matrix is the construction boundary: it validates a rectangular grid of
real numbers once and stores it as a read-only float64 array. The grid is
never mutated after construction. The only mutable piece is an optional
per-matrix tolerance override set with set_error(); without one, every
engine call reads the process-wide tolerance at call time.

Vectors are plain 1D numpy arrays.

Construction:
    Matrix([[1, 2], [3, 4]])
    Matrix(np.eye(3), epsilon=1e-19)
    Matrix.identity(3)
    Matrix.column([1.0, 2.0, 3.0])
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.tolerance import resolve_epsilon
from pylinalg.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_finite,
    check_nonempty,
)
from pylinalg.core.exceptions import DimensionError


def as_matrix_array(data: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a 2D, non-empty, finite, real matrix and return it as an array.

    Raises:
        BadDataError: Ragged rows, empty input, non-numeric or non-finite data
        DimensionError: Input is not 2D
    """
    array = check_array(data, name)
    check_2d(array, name)
    check_nonempty(array, name)
    check_finite(array, name)
    return array


def resolve_matrix_epsilon(A: object, epsilon: float | None) -> float:
    """
    Tolerance for one engine call on A.

    An explicit epsilon wins; otherwise a Matrix's own override; otherwise
    the current process-wide value.
    """
    if epsilon is None and isinstance(A, Matrix):
        return A.epsilon
    return resolve_epsilon(epsilon)


class Matrix:
    """
    Immutable rectangular matrix of real numbers.

    Engine methods (det, rref, solve, eigenvalues, ...) delegate to the
    linsolve and eigen solvers and pass this matrix's tolerance explicitly.
    """

    __slots__ = ('_data', '_epsilon')

    def __init__(self, data: ArrayLike, *, epsilon: float | None = None):
        array = np.array(as_matrix_array(data, 'data'), dtype=np.float64, copy=True)
        array.flags.writeable = False
        self._data = array
        self._epsilon = None if epsilon is None else resolve_epsilon(epsilon)

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        return cls(np.eye(n))

    @classmethod
    def column(cls, vector: ArrayLike) -> Matrix:
        """Single-column matrix view of a vector."""
        array = check_array(vector, 'vector')
        check_1d(array, 'vector')
        return cls(array.reshape(-1, 1))

    # --- Shape ---

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only (rows x cols) float64 array."""
        return self._data

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def n_rows(self) -> int:
        return self._data.shape[0]

    @property
    def n_cols(self) -> int:
        return self._data.shape[1]

    @property
    def is_square(self) -> bool:
        return self.n_rows == self.n_cols

    # --- Tolerance ---

    @property
    def epsilon(self) -> float:
        """This matrix's override if set, else the current process-wide tolerance."""
        if self._epsilon is not None:
            return self._epsilon
        return resolve_epsilon(None)

    def set_error(self, epsilon: float | None) -> None:
        """
        Set the tolerance used by this matrix's engine methods.

        Args:
            epsilon: Finite, non-negative threshold, or None to follow the
                     process-wide tolerance again
        """
        self._epsilon = None if epsilon is None else resolve_epsilon(epsilon)

    # --- Building blocks ---

    def augment(self, other: ArrayLike) -> Matrix:
        """
        Append the columns of other (a matrix or a vector) on the right.

        Raises:
            DimensionError: If row counts differ
        """
        right = check_array(other, 'other')
        if right.ndim == 1:
            right = right.reshape(-1, 1)
        if right.ndim != 2 or right.shape[0] != self.n_rows:
            raise DimensionError(
                f"Cannot augment {self.n_rows}x{self.n_cols} matrix with shape {right.shape}"
            )
        return Matrix(np.hstack([self._data, right]), epsilon=self._epsilon)

    # --- Engine ---

    def det(self) -> float:
        from pylinalg.linsolve.solvers import det
        return det(self)

    def is_singular(self) -> bool:
        from pylinalg.linsolve.solvers import is_singular
        return is_singular(self, tol=self.epsilon)

    def is_nonsingular(self) -> bool:
        from pylinalg.linsolve.solvers import is_nonsingular
        return is_nonsingular(self, tol=self.epsilon)

    def rref(self) -> Matrix:
        from pylinalg.linsolve.solvers import rref
        return Matrix(rref(self, tol=self.epsilon), epsilon=self._epsilon)

    def rank(self) -> int:
        from pylinalg.linsolve.solvers import rank
        return rank(self, tol=self.epsilon)

    def solve(self, b: ArrayLike, method: str = 'auto') -> NDArray[np.floating[Any]]:
        """Solve self @ x = b. See pylinalg.linsolve.solve."""
        from pylinalg.linsolve.solvers import solve
        return solve(self, b, method=method, tol=self.epsilon)

    def eigenvalues(self, method: str | None = None) -> NDArray[np.floating[Any]]:
        """
        Eigenvalues by the named method.

        Args:
            method: Eigenvalue method identifier; None selects
                    CLOSED_FORM_POLYNOMIAL_ROOT_METHOD

        Raises:
            InvalidMethodError: If method is not a recognised identifier
        """
        from pylinalg.eigen.solvers import eigenvalues
        from pylinalg.eigen.methods import CLOSED_FORM_POLYNOMIAL_ROOT_METHOD

        if method is None:
            method = CLOSED_FORM_POLYNOMIAL_ROOT_METHOD
        return eigenvalues(self, method=method, tol=self.epsilon)

    def eigenvectors(self, eigenvalues: ArrayLike | None = None) -> Matrix:
        """Unit eigenvectors as columns, one per eigenvalue slot."""
        from pylinalg.eigen.solvers import eigenvectors
        return Matrix(eigenvectors(self, eigenvalues, tol=self.epsilon), epsilon=self._epsilon)

    # --- Protocols ---

    def __array__(self, dtype=None, copy=None) -> NDArray[Any]:
        array = self._data if dtype is None else self._data.astype(dtype)
        if copy:
            array = array.copy()
        return array

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def __repr__(self) -> str:
        override = f", epsilon={self._epsilon:g}" if self._epsilon is not None else ""
        return f"Matrix({self.n_rows}x{self.n_cols}{override})"
