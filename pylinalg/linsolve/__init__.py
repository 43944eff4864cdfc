"""
Determinants, singularity tests, row reduction and square linear systems.

Public API:
    det(A) -> float
    is_singular(A, tol=None) / is_nonsingular(A, tol=None) -> bool
    rref(M, tol=None) -> ndarray
    rank(M, tol=None) -> int
    solve(A, b, method='auto', tol=None) -> ndarray
    solve_system(A, b, method='auto', tol=None) -> LinearSystemSolution

With method='auto', solve() never divides by a pivot that is within the
tolerance of zero: such systems are solved by row reduction of [A | b].

Example:
    >>> from pylinalg.linsolve import solve, is_singular
    >>> x = solve(A, b)
    >>> is_singular(A, tol=1e-19)
"""

from pylinalg.linsolve.design import LinearSystemDesign
from pylinalg.linsolve.solution import LinearSystemSolution, SolveParams
from pylinalg.linsolve.solvers import (
    SOLVE_METHODS,
    SolveMethod,
    det,
    is_singular,
    is_nonsingular,
    rref,
    rank,
    solve,
    solve_system,
)

__all__ = [
    "det",
    "is_singular",
    "is_nonsingular",
    "rref",
    "rank",
    "solve",
    "solve_system",
    "SOLVE_METHODS",
    "SolveMethod",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "SolveParams",
]
