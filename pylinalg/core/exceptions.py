"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError so callers can catch any
library-specific error in one place. Shape and value problems with the
caller's input are ValidationErrors; failures that arise from the numbers
themselves are NumericalErrors.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual and expected values
    - Near-zero pivots and determinants on default paths are NOT errors;
      they are handled by tolerance-aware branches in the algorithms
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class BadDataError(ValidationError):
    """
    Input data cannot be used to build or feed a matrix computation.

    Raised at the construction boundary for ragged rows, empty input,
    non-numeric or non-finite entries. Parent of DimensionError and
    InvalidDataError, so one except clause covers every bad-input case.
    """
    pass


class DimensionError(BadDataError):
    """
    Matrix or vector dimensions are incorrect or inconsistent.

    Raised for non-square input where a square matrix is required, for
    unsupported sizes (closed-form eigenvalues), for an eigenvalue count that
    does not match the matrix order, and for A/b size mismatches in solve.
    """
    pass


class InvalidDataError(BadDataError):
    """
    A supplied value is not valid for the requested computation.

    Raised when a caller-supplied eigenvalue is non-numeric or does not
    satisfy det(A - λI) ≈ 0 within the tolerance.

    Attributes:
        value: The offending value, if available
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class InvalidMethodError(ValidationError):
    """
    An unknown method identifier was requested.

    Attributes:
        method: The identifier that was requested
        valid: The identifiers that are accepted
    """

    def __init__(
        self,
        message: str,
        method: object = None,
        valid: tuple[str, ...] = (),
    ):
        super().__init__(message)
        self.method = method
        self.valid = valid


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for errors arising from the numbers rather than the shapes.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular for an operation that cannot
    proceed without inverting it.

    Only raised by explicitly requested strict methods (LU, QR) and for
    inconsistent systems. The default solve path falls back to row
    reduction instead.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: Determinant, if computed
        min_pivot: Smallest pivot magnitude encountered, if available
        rank: Numerical rank, if computed
        expected_rank: Rank required for the operation
        epsilon: Tolerance the decision was made under
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        min_pivot: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None,
        epsilon: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.min_pivot = min_pivot
        self.rank = rank
        self.expected_rank = expected_rank
        self.epsilon = epsilon


class ComplexEigenvalueError(NumericalError):
    """
    The characteristic polynomial has complex roots.

    Only real eigenvalues are supported. Raised when the quadratic
    discriminant is negative, or the cubic discriminant positive, beyond
    the tolerance.

    Attributes:
        discriminant: The discriminant that was evaluated
        degree: Degree of the characteristic polynomial (2 or 3)
    """

    def __init__(
        self,
        message: str,
        discriminant: float | None = None,
        degree: int | None = None,
    ):
        super().__init__(message)
        self.discriminant = discriminant
        self.degree = degree
