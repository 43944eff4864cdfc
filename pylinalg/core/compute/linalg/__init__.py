"""
Linear algebra kernels for pylinalg.

All functions follow these conventions:
    - Dense NumPy arrays in, dense NumPy arrays out (LAPACK via NumPy/SciPy)
    - Tolerances are passed explicitly; kernels never read global state
    - Factorisations return a structured result dataclass

Submodules:
    rref: Gauss-Jordan row reduction with partial pivoting
    lu: LU decomposition, determinant, LU solve
    qr: QR decomposition, QR solve
"""

from pylinalg.core.compute.linalg.rref import RowReduction, row_reduce
from pylinalg.core.compute.linalg.lu import LUResult, lu_cpu, det_cpu, lu_solve_cpu
from pylinalg.core.compute.linalg.qr import QRResult, qr_cpu, qr_solve_cpu

__all__ = [
    # Row reduction
    "RowReduction",
    "row_reduce",
    # LU
    "LUResult",
    "lu_cpu",
    "det_cpu",
    "lu_solve_cpu",
    # QR
    "QRResult",
    "qr_cpu",
    "qr_solve_cpu",
]
