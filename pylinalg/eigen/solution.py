"""
Eigen-decomposition solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.eigen.design import EigenDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Eigenvalues and (optionally) eigenvectors.

    values[k] pairs with column k of vectors. multiplicities[k] is the
    number of slots whose eigenvalue equals values[k] within the tolerance.
    """
    values: NDArray[np.floating[Any]]
    vectors: NDArray[np.floating[Any]] | None
    multiplicities: NDArray[np.integer[Any]]


@dataclass
class EigenSolution:
    """User-facing eigen-decomposition results."""
    _result: Result[EigenParams]
    _design: 'EigenDesign'

    @property
    def values(self) -> NDArray[np.floating[Any]]:
        """Eigenvalues in the order the method produced them (not sorted)."""
        return self._result.params.values

    @property
    def vectors(self) -> NDArray[np.floating[Any]] | None:
        """Unit eigenvectors as columns (n x n), or None if not computed."""
        return self._result.params.vectors

    @property
    def multiplicities(self) -> NDArray[np.integer[Any]]:
        return self._result.params.multiplicities

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def epsilon(self) -> float:
        return self._result.epsilon

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __repr__(self) -> str:
        values = np.array2string(self.values, precision=6, separator=', ')
        return f"EigenSolution(n={self._design.n}, values={values})"
