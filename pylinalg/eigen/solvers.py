"""
Solver dispatch for eigenvalues and eigenvectors.

Public functions:
    eigenvalues(A, method=..., tol=None) -> ndarray
    eigenvectors(A, eigenvalues=None, tol=None) -> ndarray
    eigen(A, eigenvalues=None, method=..., tol=None) -> EigenSolution
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenSolution
from pylinalg.eigen.backends.cpu import CPUClosedFormBackend
from pylinalg.eigen.methods import CLOSED_FORM_POLYNOMIAL_ROOT_METHOD, EigenvalueMethod


def eigen(
    A: ArrayLike,
    eigenvalues: ArrayLike | None = None,
    *,
    method: EigenvalueMethod = CLOSED_FORM_POLYNOMIAL_ROOT_METHOD,
    tol: float | None = None,
) -> EigenSolution:
    """
    Eigenvalues and unit eigenvectors of a square matrix.

    Args:
        A: Square matrix. Without supplied eigenvalues it must be 2x2 or 3x3.
        eigenvalues: Optional eigenvalues, one per row of A. Each must be a
            real number with |det(A − λI)| <= tol.
        method: Eigenvalue method identifier (see pylinalg.eigen.methods)
        tol: Tolerance; None uses A's override or the process-wide value

    Returns:
        EigenSolution; column k of .vectors belongs to .values[k]

    Raises:
        DimensionError: A not square, wrong eigenvalue count, or no supplied
            eigenvalues for a matrix other than 2x2 / 3x3
        InvalidDataError: Non-numeric eigenvalue, or not an eigenvalue of A
        InvalidMethodError: Unknown method
        ComplexEigenvalueError: A has complex eigenvalues

    Example:
        >>> from pylinalg.eigen import eigen
        >>> sol = eigen([[6, -1], [2, 3]])
        >>> sol.values
        array([4., 5.])
    """
    design = EigenDesign.build(A, eigenvalues, method=method, epsilon=tol)
    result = CPUClosedFormBackend(vectors=True).solve(design)
    return EigenSolution(_result=result, _design=design)


def eigenvalues(
    A: ArrayLike,
    *,
    method: EigenvalueMethod = CLOSED_FORM_POLYNOMIAL_ROOT_METHOD,
    tol: float | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Eigenvalues of a 2x2 or 3x3 matrix, in the order the formula produces.

    2x2: [(tr − √D)/2, (tr + √D)/2]
    3x3: Viète order, largest root first, then the smallest, then the middle

    Raises:
        DimensionError: A is not 2x2 or 3x3
        InvalidMethodError: Unknown method
        ComplexEigenvalueError: A has complex eigenvalues
    """
    design = EigenDesign.build(A, method=method, epsilon=tol)
    result = CPUClosedFormBackend(vectors=False).solve(design)
    return result.params.values


def eigenvectors(
    A: ArrayLike,
    eigenvalues: ArrayLike | None = None,
    *,
    tol: float | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Unit eigenvectors of A as the columns of an n x n array.

    Column k belongs to eigenvalue k. Repeated eigenvalues get distinct
    null-space basis vectors where the null space is large enough. Signs
    are not normalised. See eigen() for arguments and errors.
    """
    return eigen(A, eigenvalues, tol=tol).vectors
