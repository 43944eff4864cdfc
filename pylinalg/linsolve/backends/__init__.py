"""
Linear system backends.

Available backends:
    CPULUBackend: LU with partial pivoting, optional fallback to row reduction
    CPUQRBackend: Householder QR
    CPURREFBackend: Gauss-Jordan elimination of the augmented matrix
"""

from pylinalg.linsolve.backends.cpu import (
    CPULUBackend,
    CPUQRBackend,
    CPURREFBackend,
    solve_by_row_reduction,
)

__all__ = [
    "CPULUBackend",
    "CPUQRBackend",
    "CPURREFBackend",
    "solve_by_row_reduction",
]
