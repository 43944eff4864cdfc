"""
Core infrastructure for pylinalg.

Shared abstractions used by the linsolve and eigen domains.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    tolerance: Process-wide ε policy and per-call resolution
    matrix: Matrix value type (construction boundary)
    result: Generic Result[P] envelope
    timing: Section timer for backends
    compute: Row reduction, LU and QR kernels
"""

from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    BadDataError,
    DimensionError,
    InvalidDataError,
    InvalidMethodError,
    NumericalError,
    SingularMatrixError,
    ComplexEigenvalueError,
)
from pylinalg.core.tolerance import (
    DEFAULT_EPSILON,
    get_epsilon,
    set_epsilon,
    reset_epsilon,
    error_tolerance,
)
from pylinalg.core.matrix import Matrix
from pylinalg.core.result import Result

__all__ = [
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "BadDataError",
    "DimensionError",
    "InvalidDataError",
    "InvalidMethodError",
    "NumericalError",
    "SingularMatrixError",
    "ComplexEigenvalueError",
    # Tolerance
    "DEFAULT_EPSILON",
    "get_epsilon",
    "set_epsilon",
    "reset_epsilon",
    "error_tolerance",
    # Values
    "Matrix",
    "Result",
]
