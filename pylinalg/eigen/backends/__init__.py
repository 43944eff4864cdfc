"""
Eigen-decomposition backends.

Available backends:
    CPUClosedFormBackend: Characteristic-polynomial roots and RREF null spaces
"""

from pylinalg.eigen.backends.cpu import CPUClosedFormBackend, group_eigenvalues

__all__ = [
    "CPUClosedFormBackend",
    "group_eigenvalues",
]
