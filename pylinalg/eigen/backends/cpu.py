"""
CPU backend for closed-form eigen-decomposition.

Eigenvalues come from the roots of the 2x2 / 3x3 characteristic
polynomial. Eigenvectors come from the null space of A − λI, found by
row reduction.
"""

import warnings
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result
from pylinalg.core.timing import Timer
from pylinalg.eigen.design import EigenDesign
from pylinalg.eigen.solution import EigenParams
from pylinalg.eigen._polynomial import closed_form_eigenvalues
from pylinalg.eigen._nullspace import null_space_basis


def group_eigenvalues(values: NDArray[np.floating[Any]], epsilon: float) -> list[list[int]]:
    """
    Group slot indices whose eigenvalues agree within epsilon.

    Each slot joins the first group whose leading value it matches. Groups
    and the slots inside them keep their original order.
    """
    groups: list[list[int]] = []
    for k, lam in enumerate(values):
        for group in groups:
            if abs(lam - values[group[0]]) <= epsilon:
                group.append(k)
                break
        else:
            groups.append([k])
    return groups


class CPUClosedFormBackend:
    """
    Closed-form eigenvalues and null-space eigenvectors.

    With vectors=False only the eigenvalues are computed.
    """

    def __init__(self, vectors: bool = True):
        self._vectors = vectors

    @property
    def name(self) -> str:
        return 'cpu_closed_form'

    def solve(self, design: EigenDesign) -> Result[EigenParams]:
        """
        Compute eigenpairs.

        Algorithm:
            1. Eigenvalues: supplied ones, else roots of det(λI − A)
            2. Group equal eigenvalues
            3. For each group: null-space basis of A − λI from its RREF;
               the k-th slot of the group takes basis vector k
            4. Normalise every column to unit 2-norm

        Raises:
            DimensionError: No supplied eigenvalues and A is not 2x2 / 3x3
            ComplexEigenvalueError: The characteristic polynomial has complex roots
        """
        timer = Timer()
        timer.start()

        A, n, eps = design.A, design.n, design.epsilon
        warnings_list: list[str] = []

        with timer.section('eigenvalues'):
            if design.eigenvalues is not None:
                values = design.eigenvalues.copy()
            else:
                values = closed_form_eigenvalues(A, eps)

        groups = group_eigenvalues(values, eps)
        multiplicities = np.zeros(n, dtype=np.int64)
        for group in groups:
            multiplicities[group] = len(group)

        vectors = None
        info: dict[str, Any] = {
            'method': design.method,
            'supplied_eigenvalues': design.eigenvalues is not None,
            'n_distinct': len(groups),
            'epsilon': eps,
        }

        if self._vectors:
            with timer.section('eigenvectors'):
                vectors, geometric = self._eigenvectors(A, values, groups, eps, warnings_list)
            info['geometric_multiplicities'] = geometric

        timer.stop()

        return Result(
            params=EigenParams(values=values, vectors=vectors, multiplicities=multiplicities),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            epsilon=eps,
            warnings=tuple(warnings_list),
        )

    def _eigenvectors(
        self,
        A: NDArray[np.floating[Any]],
        values: NDArray[np.floating[Any]],
        groups: list[list[int]],
        epsilon: float,
        warnings_list: list[str],
    ) -> tuple[NDArray[np.floating[Any]], list[int]]:
        n = A.shape[0]
        vectors = np.zeros((n, n))
        geometric = [0] * n
        identity = np.eye(n)

        for group in groups:
            lam = values[group[0]]
            basis, used_svd = null_space_basis(A - lam * identity, epsilon)

            if used_svd:
                warnings_list.append(
                    f"A - λI has full rank at tolerance {epsilon:.1e} for λ = {lam:.6g}; "
                    f"used the smallest right singular vector"
                )

            if len(basis) < len(group):
                message = (
                    f"Eigenvalue {lam:.6g} has multiplicity {len(group)} but only "
                    f"{len(basis)} independent eigenvector(s); the matrix is defective "
                    f"and eigenvectors are repeated"
                )
                warnings.warn(message, RuntimeWarning, stacklevel=2)
                warnings_list.append(message)

            for k, slot in enumerate(group):
                v = basis[k % len(basis)]
                vectors[:, slot] = v / np.linalg.norm(v)
                geometric[slot] = len(basis)

        return vectors, geometric
