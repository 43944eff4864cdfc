"""
LU decomposition, determinant and LU solve.

Wraps LAPACK getrf/getrs through SciPy. The determinant is the product of
U's diagonal with one sign flip per row interchange, which is the same
route R's det() takes, so values agree with R to rounding.
"""

import warnings
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.tolerance import is_zero


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition with partial pivoting (PA = LU).

    Attributes:
        lu: Packed L (unit lower, below diagonal) and U (upper) factors
        piv: LAPACK pivot indices; row i was interchanged with row piv[i]
        pivots: Diagonal of U, the pivot used at each elimination step
        min_pivot: Smallest |pivot|
        n_swaps: Number of row interchanges
    """
    lu: NDArray[np.floating[Any]]
    piv: NDArray[np.integer[Any]]
    pivots: NDArray[np.floating[Any]]
    min_pivot: float
    n_swaps: int

    @property
    def determinant(self) -> float:
        sign = -1.0 if self.n_swaps % 2 else 1.0
        return sign * float(np.prod(self.pivots))

    def has_small_pivot(self, epsilon: float) -> bool:
        """True if any elimination step used a pivot with |u_ii| <= epsilon."""
        return is_zero(self.min_pivot, epsilon)


def lu_cpu(A: NDArray[np.floating[Any]]) -> LUResult:
    """
    LU decomposition with partial pivoting (LAPACK getrf).

    Never raises on singular input: an exactly zero pivot simply shows up
    in `pivots`, and callers decide what to do with it.

    Args:
        A: Square matrix (n x n)

    Returns:
        LUResult
    """
    with warnings.catch_warnings():
        # getrf reports exact zero pivots as LinAlgWarning; callers inspect pivots.
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(A, check_finite=False)

    pivots = np.diag(lu).copy()
    n_swaps = int(np.count_nonzero(piv != np.arange(piv.shape[0])))

    return LUResult(
        lu=lu,
        piv=piv,
        pivots=pivots,
        min_pivot=float(np.min(np.abs(pivots))),
        n_swaps=n_swaps,
    )


def det_cpu(A: NDArray[np.floating[Any]]) -> float:
    """Determinant of a square matrix via LU."""
    return lu_cpu(A).determinant


def lu_solve_cpu(
    lu_result: LUResult,
    b: NDArray[np.floating[Any]],
    epsilon: float,
) -> NDArray[np.floating[Any]]:
    """
    Solve A x = b from a precomputed factorisation.

    Args:
        lu_result: Output of lu_cpu(A)
        b: Right-hand side (n,)
        epsilon: Pivot threshold

    Returns:
        Solution vector x (n,)

    Raises:
        SingularMatrixError: If a pivot is <= epsilon in magnitude; back
            substitution would divide by (effectively) zero
    """
    if lu_result.has_small_pivot(epsilon):
        raise SingularMatrixError(
            f"LU pivot {lu_result.min_pivot:.6e} is within tolerance "
            f"{epsilon:.1e} of zero; cannot back-substitute.",
            matrix_name='A',
            determinant=lu_result.determinant,
            min_pivot=lu_result.min_pivot,
            epsilon=epsilon,
        )
    return lu_solve((lu_result.lu, lu_result.piv), b, check_finite=False)
