"""
Closed-form eigenvalues and null-space eigenvectors.

Public API:
    eigenvalues(A, method=CLOSED_FORM_POLYNOMIAL_ROOT_METHOD, tol=None) -> ndarray
    eigenvectors(A, eigenvalues=None, tol=None) -> ndarray
    eigen(A, eigenvalues=None, method=..., tol=None) -> EigenSolution

Eigenvalues are the real roots of the characteristic polynomial of a 2x2
or 3x3 matrix. Eigenvectors are read from the RREF of A − λI and work for
any square matrix when the eigenvalues are supplied.

Example:
    >>> from pylinalg.eigen import eigenvalues, eigenvectors
    >>> eigenvalues([[2, 0, 1], [2, 1, 2], [3, 0, 4]])
    array([5., 1., 1.])
"""

from pylinalg.eigen.methods import (
    CLOSED_FORM_POLYNOMIAL_ROOT_METHOD,
    EIGENVALUE_METHODS,
    EigenvalueMethod,
)
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenSolution, EigenParams
from pylinalg.eigen.solvers import eigen, eigenvalues, eigenvectors

__all__ = [
    "eigen",
    "eigenvalues",
    "eigenvectors",
    "CLOSED_FORM_POLYNOMIAL_ROOT_METHOD",
    "EIGENVALUE_METHODS",
    "EigenvalueMethod",
    "EigenDesign",
    "EigenSolution",
    "EigenParams",
]
