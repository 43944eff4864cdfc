"""
EigenDesign: validated eigen-decomposition problem.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, InvalidDataError
from pylinalg.core.matrix import as_matrix_array, resolve_matrix_epsilon
from pylinalg.core.validation import check_real_scalar, check_square
from pylinalg.core.compute.linalg import lu_cpu
from pylinalg.core.tolerance import is_zero
from pylinalg.eigen.methods import CLOSED_FORM_POLYNOMIAL_ROOT_METHOD, check_method


@dataclass(frozen=True)
class EigenDesign:
    """
    Square matrix plus optional caller-supplied eigenvalues.

    Supplied eigenvalues have already been checked to be real numbers that
    satisfy det(A − λI) ≈ 0, measured relative to the size of A − λI (see
    relative_determinant). When none are supplied the backend computes
    them with the selected method.

    Construction:
        EigenDesign.build(A)
        EigenDesign.build(A, eigenvalues=[5, 1, 1])
    """
    _A: NDArray[np.floating[Any]]
    _n: int
    _eigenvalues: NDArray[np.floating[Any]] | None
    _method: str
    _epsilon: float

    @classmethod
    def build(
        cls,
        A: ArrayLike,
        eigenvalues: ArrayLike | None = None,
        *,
        method: str = CLOSED_FORM_POLYNOMIAL_ROOT_METHOD,
        epsilon: float | None = None,
    ) -> EigenDesign:
        """
        Validate and build the design.

        Checks run in this order: A square, eigenvalue count equals n, each
        eigenvalue is a real number, each is a root of det(A − λI).

        Raises:
            DimensionError: A not square, or wrong number of eigenvalues
            InvalidDataError: Non-numeric eigenvalue, or a value that is not
                an eigenvalue of A
            InvalidMethodError: Unknown method
            BadDataError: Non-numeric, empty or non-finite A
        """
        check_method(method)
        tol = resolve_matrix_epsilon(A, epsilon)

        A_arr = np.asarray(as_matrix_array(A, 'A'), dtype=np.float64)
        check_square(A_arr, 'A')
        n = A_arr.shape[0]

        values = None
        if eigenvalues is not None:
            values = _check_eigenvalues(A_arr, eigenvalues, tol)

        return cls(
            _A=A_arr,
            _n=n,
            _eigenvalues=values,
            _method=method,
            _epsilon=tol,
        )

    @property
    def A(self) -> NDArray[np.floating[Any]]:
        return self._A

    @property
    def n(self) -> int:
        return self._n

    @property
    def eigenvalues(self) -> NDArray[np.floating[Any]] | None:
        """Caller-supplied eigenvalues, or None."""
        return self._eigenvalues

    @property
    def method(self) -> str:
        return self._method

    @property
    def epsilon(self) -> float:
        return self._epsilon


def _check_eigenvalues(
    A: NDArray[np.floating[Any]],
    eigenvalues: ArrayLike,
    epsilon: float,
) -> NDArray[np.floating[Any]]:
    n = A.shape[0]

    if isinstance(eigenvalues, np.ndarray):
        if eigenvalues.ndim != 1:
            raise DimensionError(
                f"eigenvalues: expected a 1D sequence, got shape {eigenvalues.shape}"
            )
        items = list(eigenvalues)
    else:
        try:
            items = list(eigenvalues)
        except TypeError as e:
            raise InvalidDataError(
                f"eigenvalues: expected a sequence of real numbers, got {type(eigenvalues).__name__}",
                value=eigenvalues,
            ) from e

    if len(items) != n:
        raise DimensionError(
            f"eigenvalues: expected {n} values for a {n}x{n} matrix, got {len(items)}"
        )

    values = np.array(
        [check_real_scalar(v, f"eigenvalues[{i}]") for i, v in enumerate(items)],
        dtype=np.float64,
    )

    identity = np.eye(n)
    for i, lam in enumerate(values):
        ratio = relative_determinant(A - lam * identity)
        if not is_zero(ratio, epsilon):
            raise InvalidDataError(
                f"eigenvalues[{i}] = {lam!r} is not an eigenvalue of A: "
                f"|det(A - λI)| / Π‖row‖ = {ratio:.3e} > {epsilon:.1e}",
                value=float(lam),
            )
    return values


def relative_determinant(M: NDArray[np.floating[Any]]) -> float:
    """
    |det(M)| divided by the product of M's row 2-norms.

    By Hadamard's inequality the ratio lies in [0, 1] and does not change
    when M is scaled, so one tolerance serves matrices of any magnitude.
    Computed in log space from the LU pivots so large n cannot overflow.
    A zero row or zero pivot gives 0.
    """
    row_norms = np.linalg.norm(M, axis=1)
    pivots = np.abs(lu_cpu(M).pivots)
    if np.any(row_norms == 0.0) or np.any(pivots == 0.0):
        return 0.0
    return float(np.exp(np.sum(np.log(pivots)) - np.sum(np.log(row_norms))))
