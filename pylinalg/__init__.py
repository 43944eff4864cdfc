"""
pylinalg: tolerance-aware dense linear algebra for Python.

Determinants and singularity tests, row reduction, square linear systems
that never divide by a near-zero pivot, and closed-form eigen-decomposition
of 2x2 and 3x3 matrices. Results are validated against R.

Submodules:
    core: Matrix type, tolerance policy, exceptions, compute kernels
    linsolve: det, is_singular, rref, rank, solve
    eigen: eigenvalues, eigenvectors
"""

__version__ = "0.1.0"

from pylinalg import core
from pylinalg import linsolve
from pylinalg import eigen
from pylinalg.core import (
    Matrix,
    DEFAULT_EPSILON,
    get_epsilon,
    set_epsilon,
    reset_epsilon,
    error_tolerance,
)

__all__ = [
    "__version__",
    "core",
    "linsolve",
    "eigen",
    "Matrix",
    "DEFAULT_EPSILON",
    "get_epsilon",
    "set_epsilon",
    "reset_epsilon",
    "error_tolerance",
]
