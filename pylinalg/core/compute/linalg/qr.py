"""
QR decomposition and QR solve.

Householder QR via LAPACK (through NumPy). Used by the 'qr' method of the
linear solver.
"""

from dataclasses import dataclass
from typing import Literal, Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import SingularMatrixError


@dataclass(frozen=True)
class QRResult:
    """
    Result of QR decomposition.

    Attributes:
        Q: Orthogonal matrix (n x k where k = min(n, p) for reduced mode)
        R: Upper triangular matrix (k x p)
        rank: Number of |r_ii| above the tolerance
    """
    Q: NDArray[np.floating[Any]]
    R: NDArray[np.floating[Any]]
    rank: int


def qr_cpu(
    X: NDArray[np.floating[Any]],
    epsilon: float,
    mode: Literal['reduced', 'complete'] = 'reduced',
) -> QRResult:
    """
    QR decomposition using LAPACK (via NumPy).

    Computes X = QR where Q is orthogonal and R is upper triangular.

    Args:
        X: Matrix to decompose (n x p)
        epsilon: Threshold below which |r_ii| counts as zero
        mode: 'reduced' for economy QR, 'complete' for full QR

    Returns:
        QRResult with Q, R, and numerical rank
    """
    Q, R = np.linalg.qr(X, mode=mode)
    diag_R = np.abs(np.diag(R))
    rank = int(np.sum(diag_R > epsilon))
    return QRResult(Q=Q, R=R, rank=rank)


def qr_solve_cpu(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    epsilon: float,
) -> tuple[NDArray[np.floating[Any]], int]:
    """
    Solve A x = b via QR decomposition.

    The solution is computed as:
        A = QR
        x = R⁻¹ Q'b

    Args:
        A: Square coefficient matrix (n x n)
        b: Right-hand side (n,)
        epsilon: Rank threshold on R's diagonal

    Returns:
        (x, rank)

    Raises:
        SingularMatrixError: If A is numerically rank-deficient
    """
    from scipy.linalg import solve_triangular

    n = A.shape[1]
    qr_result = qr_cpu(A, epsilon, mode='reduced')

    if qr_result.rank < n:
        raise SingularMatrixError(
            f"Coefficient matrix is rank-deficient: rank={qr_result.rank}, expected={n} "
            f"at tolerance {epsilon:.1e}.",
            matrix_name='A',
            rank=qr_result.rank,
            expected_rank=n,
            epsilon=epsilon,
        )

    Qtb = qr_result.Q.T @ b
    x = solve_triangular(qr_result.R[:n, :n], Qtb[:n], lower=False)
    return x, qr_result.rank
