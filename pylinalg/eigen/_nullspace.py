"""
Null-space basis extraction for eigenvectors.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.linalg import row_reduce


def null_space_basis(
    M: NDArray[np.floating[Any]],
    epsilon: float,
) -> tuple[list[NDArray[np.floating[Any]]], bool]:
    """
    Basis of the null space of M from its RREF.

    Each free column f gives one vector v with v[f] = 1, every other free
    entry 0, and v[p] = −R[i, f] for pivot row i whose leading 1 is in
    column p. Pivot rows are matched by their pivot column, not their row
    index. A zero RREF makes every column free and gives the standard
    unit vectors.

    When rounding leaves no free column, the right singular vector of the
    smallest singular value is returned instead.

    Returns:
        (basis vectors, True if the SVD fallback was used). Vectors are
        not normalised.
    """
    reduction = row_reduce(M, epsilon)
    R = reduction.matrix
    n = M.shape[1]

    free = reduction.free_columns
    if not free:
        _, _, Vt = np.linalg.svd(M)
        return [Vt[-1].copy()], True

    basis = []
    for f in free:
        v = np.zeros(n)
        v[f] = 1.0
        for i, pivot_col in enumerate(reduction.pivot_columns):
            v[pivot_col] = -R[i, f]
        basis.append(v)
    return basis, False
