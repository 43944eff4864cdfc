"""
LinearSystemDesign: validated A x = b problem.

Validation happens here, once, at the boundary. Backends trust the design.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.matrix import as_matrix_array, resolve_matrix_epsilon
from pylinalg.core.validation import (
    check_array,
    check_1d,
    check_finite,
    check_matching_rows,
    check_square,
)


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Square linear system A x = b.

    Immutable after construction. The tolerance is resolved when the design
    is built, i.e. at the time of the solve call.

    Construction:
        LinearSystemDesign.build(A, b)
        LinearSystemDesign.build(A, b, epsilon=1e-19)
    """
    _A: NDArray[np.floating[Any]]
    _b: NDArray[np.floating[Any]]
    _n: int
    _epsilon: float

    @classmethod
    def build(
        cls,
        A: ArrayLike,
        b: ArrayLike,
        *,
        epsilon: float | None = None,
    ) -> LinearSystemDesign:
        """
        Validate and build the design.

        Args:
            A: Square coefficient matrix (n x n), array-like or Matrix
            b: Right-hand side, shape (n,) or (n, 1)
            epsilon: Tolerance; None uses A's override or the process-wide value

        Raises:
            DimensionError: A not square, b not a vector, or len(b) != n
            BadDataError: Non-numeric, empty or non-finite input
        """
        tol = resolve_matrix_epsilon(A, epsilon)

        A_arr = as_matrix_array(A, 'A')
        check_square(A_arr, 'A')

        b_arr = check_array(b, 'b')
        if b_arr.ndim == 2 and b_arr.shape[1] == 1:
            b_arr = b_arr.ravel()
        check_1d(b_arr, 'b')
        check_finite(b_arr, 'b')
        check_matching_rows(A_arr, b_arr, ('A', 'b'))

        return cls(
            _A=np.asarray(A_arr, dtype=np.float64),
            _b=np.asarray(b_arr, dtype=np.float64),
            _n=A_arr.shape[0],
            _epsilon=tol,
        )

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        """Coefficient matrix (n x n)."""
        return self._A

    @property
    def b(self) -> NDArray[np.floating[Any]]:
        """Right-hand side (n,)."""
        return self._b

    @property
    def n(self) -> int:
        """System order."""
        return self._n

    @property
    def epsilon(self) -> float:
        return self._epsilon

    def __repr__(self) -> str:
        return f"LinearSystemDesign(n={self._n}, epsilon={self._epsilon:g})"
