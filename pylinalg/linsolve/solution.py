"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.result import Result

if TYPE_CHECKING:
    from pylinalg.linsolve.design import LinearSystemDesign


@dataclass(frozen=True)
class SolveParams:
    """
    Parameter payload for A x = b.

    This is the immutable data computed by backends.
    """
    x: NDArray[np.floating[Any]]
    residuals: NDArray[np.floating[Any]]   # A @ x - b
    rank: int


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps Result[SolveParams] and records which algorithm produced x.
    """
    _result: Result[SolveParams]
    _design: 'LinearSystemDesign'

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Solution vector, shape (n,)."""
        return self._result.params.x

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """A @ x - b, shape (n,)."""
        return self._result.params.residuals

    @property
    def residual_norm(self) -> float:
        return float(np.linalg.norm(self._result.params.residuals))

    @property
    def rank(self) -> int:
        """Numerical rank of A at the solve tolerance (n unless the RREF route saw fewer pivots)."""
        return self._result.params.rank

    @property
    def method(self) -> str:
        """Algorithm that produced x: 'lu', 'qr' or 'rref'."""
        return self._result.info['method']

    @property
    def fell_back(self) -> bool:
        """True if LU hit a near-zero pivot and the RREF route was used instead."""
        return bool(self._result.info.get('fell_back', False))

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

    def summary(self) -> str:
        """Short text report."""
        lines = [
            f"Linear system: n={self._design.n}",
            f"Method: {self.method}" + (" (fallback from lu)" if self.fell_back else ""),
            f"Rank: {self.rank}",
            f"Tolerance: {self.epsilon:g}",
            f"Residual norm: {self.residual_norm:.6e}",
        ]
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self._design.n}, method={self.method!r}, "
            f"residual_norm={self.residual_norm:.3e})"
        )
