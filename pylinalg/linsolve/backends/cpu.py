"""
CPU backends for square linear systems.

CPULUBackend is the default route: LU with partial pivoting, and when a
pivot is effectively zero the system is handed to row reduction of the
augmented matrix [A | b] instead of dividing by it. CPUQRBackend and
CPURREFBackend are the explicit alternatives.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.result import Result
from pylinalg.core.timing import Timer
from pylinalg.core.compute.linalg import (
    lu_cpu,
    lu_solve_cpu,
    qr_solve_cpu,
    row_reduce,
)
from pylinalg.linsolve.design import LinearSystemDesign
from pylinalg.linsolve.solution import SolveParams


def solve_by_row_reduction(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    epsilon: float,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Solve A x = b by reducing [A | b] to RREF.

    Each non-zero row i has its leading 1 in pivot column j, and x[j] is
    read from the last column of that row. Columns of A without a pivot
    are free variables and are set to 0.

    Returns:
        (x, rank of A)

    Raises:
        SingularMatrixError: If the system is inconsistent, i.e. a row
            reduces to 0 = c with |c| > epsilon
    """
    n = A.shape[1]
    augmented = np.column_stack([A, b])
    reduction = row_reduce(augmented, epsilon)

    if n in reduction.pivot_columns:
        rank = reduction.rank - 1
        raise SingularMatrixError(
            f"Linear system is inconsistent: rank(A)={rank} < rank([A|b])={reduction.rank} "
            f"at tolerance {epsilon:.1e}.",
            matrix_name='A',
            rank=rank,
            expected_rank=n,
            epsilon=epsilon,
        )

    R = reduction.matrix
    x = np.zeros(n)
    for i, col in enumerate(reduction.pivot_columns):
        x[col] = R[i, n]
    return x, reduction.rank


def _params(design: LinearSystemDesign, x: NDArray[np.floating[Any]], rank: int) -> SolveParams:
    return SolveParams(x=x, residuals=design.A @ x - design.b, rank=rank)


class CPULUBackend:
    """
    LU with partial pivoting.

    With fallback=True (method='auto'), a pivot |u_ii| <= epsilon switches
    to augmented-matrix row reduction. With fallback=False (method='lu'),
    it raises SingularMatrixError.
    """

    def __init__(self, fallback: bool = True):
        self._fallback = fallback

    @property
    def name(self) -> str:
        return 'cpu_lu'

    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        """
        Solve via LU decomposition.

        Algorithm:
            1. Factor PA = LU
            2. If every |u_ii| > epsilon: x = U⁻¹ L⁻¹ P b
            3. Otherwise (fallback enabled): x from RREF of [A | b]

        Raises:
            SingularMatrixError: Small pivot without fallback, or an
                inconsistent system on the fallback route
        """
        timer = Timer()
        timer.start()

        A, b, eps = design.A, design.b, design.epsilon

        with timer.section('lu_factor'):
            lu = lu_cpu(A)

        info: dict[str, Any] = {
            'method': 'lu',
            'fell_back': False,
            'min_pivot': lu.min_pivot,
            'determinant': lu.determinant,
            'epsilon': eps,
        }
        warnings_list: list[str] = []

        if self._fallback and lu.has_small_pivot(eps):
            with timer.section('rref'):
                x, rank = solve_by_row_reduction(A, b, eps)
            info['method'] = 'rref'
            info['fell_back'] = True
            warnings_list.append(
                f"LU pivot {lu.min_pivot:.3e} <= {eps:.1e}; solved by row reduction of [A|b]"
            )
            backend_name = 'cpu_rref'
        else:
            with timer.section('lu_solve'):
                x = lu_solve_cpu(lu, b, eps)
            rank = design.n
            backend_name = self.name

        info['rank'] = rank

        with timer.section('residuals'):
            params = _params(design, x, rank)

        timer.stop()

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=backend_name,
            epsilon=eps,
            warnings=tuple(warnings_list),
        )


class CPUQRBackend:
    """Householder QR. Rank-deficient A raises SingularMatrixError."""

    @property
    def name(self) -> str:
        return 'cpu_qr'

    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        timer = Timer()
        timer.start()

        with timer.section('qr_solve'):
            x, rank = qr_solve_cpu(design.A, design.b, design.epsilon)

        with timer.section('residuals'):
            params = _params(design, x, rank)

        timer.stop()

        return Result(
            params=params,
            info={'method': 'qr', 'fell_back': False, 'rank': rank, 'epsilon': design.epsilon},
            timing=timer.result(),
            backend_name=self.name,
            epsilon=design.epsilon,
        )


class CPURREFBackend:
    """Gauss-Jordan elimination of [A | b]."""

    @property
    def name(self) -> str:
        return 'cpu_rref'

    def solve(self, design: LinearSystemDesign) -> Result[SolveParams]:
        timer = Timer()
        timer.start()

        with timer.section('rref'):
            x, rank = solve_by_row_reduction(design.A, design.b, design.epsilon)

        with timer.section('residuals'):
            params = _params(design, x, rank)

        timer.stop()

        warnings_list = []
        if rank < design.n:
            warnings_list.append(
                f"A has rank {rank} < {design.n}; free variables were set to 0"
            )

        return Result(
            params=params,
            info={'method': 'rref', 'fell_back': False, 'rank': rank, 'epsilon': design.epsilon},
            timing=timer.result(),
            backend_name=self.name,
            epsilon=design.epsilon,
            warnings=tuple(warnings_list),
        )
