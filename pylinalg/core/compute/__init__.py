"""
Shared numeric infrastructure for pylinalg.

This is NOT where domain solvers live; those go in linsolve/ and eigen/.
This package holds the dense kernels they share.

Submodules:
    linalg: Row reduction, LU and QR kernels
"""

from pylinalg.core.compute.linalg import (
    RowReduction,
    row_reduce,
    LUResult,
    lu_cpu,
    det_cpu,
    QRResult,
    qr_cpu,
)

__all__ = [
    "RowReduction",
    "row_reduce",
    "LUResult",
    "lu_cpu",
    "det_cpu",
    "QRResult",
    "qr_cpu",
]
