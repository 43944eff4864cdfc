"""
Solver dispatch for determinants, row reduction and linear systems.

Every function here validates its input at the boundary, resolves the
tolerance at call time, and hands plain arrays to the compute kernels.
"""

from typing import Any, Literal
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import InvalidMethodError
from pylinalg.core.matrix import as_matrix_array, resolve_matrix_epsilon
from pylinalg.core.tolerance import is_zero
from pylinalg.core.validation import check_square
from pylinalg.core.compute.linalg import det_cpu, row_reduce
from pylinalg.linsolve.design import LinearSystemDesign
from pylinalg.linsolve.solution import LinearSystemSolution
from pylinalg.linsolve.backends.cpu import CPULUBackend, CPUQRBackend, CPURREFBackend


# Type alias for solve method selection
SolveMethod = Literal['auto', 'lu', 'qr', 'rref']

SOLVE_METHODS: tuple[str, ...] = ('auto', 'lu', 'qr', 'rref')


def _square(A: ArrayLike) -> NDArray[np.floating[Any]]:
    array = as_matrix_array(A, 'A')
    check_square(array, 'A')
    return array


def det(A: ArrayLike) -> float:
    """
    Determinant of a square matrix.

    Computed from an LU factorisation with partial pivoting, as R's det()
    does. The value does not depend on the tolerance.

    Raises:
        DimensionError: If A is not square
    """
    return det_cpu(_square(A))


def is_singular(A: ArrayLike, *, tol: float | None = None) -> bool:
    """
    True if |det(A)| <= tol.

    Matches R's matrixcalc::is.singular.matrix(A, tol).

    Args:
        A: Square matrix
        tol: Tolerance; None uses A's override or the process-wide value

    Raises:
        DimensionError: If A is not square
    """
    eps = resolve_matrix_epsilon(A, tol)
    return is_zero(det(A), eps)


def is_nonsingular(A: ArrayLike, *, tol: float | None = None) -> bool:
    """Negation of is_singular()."""
    return not is_singular(A, tol=tol)


def rref(M: ArrayLike, *, tol: float | None = None) -> NDArray[np.floating[Any]]:
    """
    Reduced row-echelon form of M (any shape). M is not modified.

    Entries within tol of zero come out as exact zeros, so
    rref(rref(M)) == rref(M).
    """
    eps = resolve_matrix_epsilon(M, tol)
    return row_reduce(as_matrix_array(M, 'M'), eps).matrix


def rank(M: ArrayLike, *, tol: float | None = None) -> int:
    """Number of pivots in the RREF of M."""
    eps = resolve_matrix_epsilon(M, tol)
    return row_reduce(as_matrix_array(M, 'M'), eps).rank


def solve_system(
    A: ArrayLike,
    b: ArrayLike,
    *,
    method: SolveMethod = 'auto',
    tol: float | None = None,
) -> LinearSystemSolution:
    """
    Solve the square linear system A x = b.

    Args:
        A: Coefficient matrix (n x n). Can be any array-like or a Matrix.
        b: Right-hand side, length n (1D or an n x 1 column)
        method: Algorithm:
            - 'auto': LU with partial pivoting; if a pivot is within tol
              of zero, solve by row reduction of [A | b] instead
            - 'lu': LU only; a near-zero pivot raises SingularMatrixError
            - 'qr': Householder QR; rank < n raises SingularMatrixError
            - 'rref': row reduction of [A | b]
        tol: Tolerance; None uses A's override or the process-wide value

    Returns:
        LinearSystemSolution with x, residuals and the method that ran

    Raises:
        DimensionError: A not square, or b does not have n entries
        BadDataError: Non-numeric, empty or non-finite input
        InvalidMethodError: Unknown method
        SingularMatrixError: See method; also for an inconsistent system
            on the row reduction route

    Note:
        On the row reduction route x is read from the last column of
        rref([A | b]) by pivot column: the value in pivot row i goes to
        x[p_i], where p_i is that row's pivot column, and free variables are
        0. For full-rank A this is the last column itself. For rank-deficient
        A it is not. For example A = [[0, 1], [0, 2]], b = [1, 2] reduces to
        rows [0, 1 | 1] and [0, 0 | 0], so x = [0, 1] while the last column
        reads [1, 0]. Only the pivot-column reading satisfies A x = b.

    Example:
        >>> from pylinalg.linsolve import solve_system
        >>> sol = solve_system([[2, 1], [1, 3]], [3, 5])
        >>> sol.x
        array([0.8, 1.4])
        >>> sol.method
        'lu'
    """
    backend_impl = _get_backend(method)
    design = LinearSystemDesign.build(A, b, epsilon=tol)
    result = backend_impl.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def solve(
    A: ArrayLike,
    b: ArrayLike,
    *,
    method: SolveMethod = 'auto',
    tol: float | None = None,
) -> NDArray[np.floating[Any]]:
    """Solve A x = b and return x. See solve_system()."""
    return solve_system(A, b, method=method, tol=tol).x


def _get_backend(method: str):
    """
    Instantiate the backend for a method name.

    Raises:
        InvalidMethodError: If method is not one of SOLVE_METHODS
    """
    if method == 'auto':
        return CPULUBackend(fallback=True)
    elif method == 'lu':
        return CPULUBackend(fallback=False)
    elif method == 'qr':
        return CPUQRBackend()
    elif method == 'rref':
        return CPURREFBackend()
    else:
        raise InvalidMethodError(
            f"Unknown solve method: {method!r}. Valid: {', '.join(SOLVE_METHODS)}",
            method=method,
            valid=SOLVE_METHODS,
        )
