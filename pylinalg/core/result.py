"""
Generic result container for pylinalg computations.

Every backend returns a Result envelope: the domain-specific payload plus
the metadata needed to reproduce the computation: the algorithm that
actually ran, the tolerance it ran under, timing and non-fatal warnings
(for example an LU solve that fell back to row reduction).

Design decisions:
    - Generic over parameter payload P
    - epsilon is recorded because every zero/non-zero decision depends on it
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Attributes:
        params: Domain-specific payload (solution vector, eigenpairs, ...)
        info: Structured metadata (method, rank, min_pivot, ...)
        timing: Section timings from core.timing.Timer, or None
        backend_name: Identifier of the backend that produced this result
        epsilon: Tolerance used for every zero test in the computation
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SolveParams(x=x, residuals=r, rank=3),
        ...     info={'method': 'rref', 'fell_back': True},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_rref',
        ...     epsilon=1e-11,
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    epsilon: float
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
