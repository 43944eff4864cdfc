"""
Characteristic polynomials and their closed-form real roots.

Polynomials here are monic and given by their lower coefficients:
    quadratic: λ² + a1·λ + a0
    cubic:     λ³ + a2·λ² + a1·λ + a0

Cubic roots use the trigonometric (Viète) form. With

    Q = (3·a1 − a2²) / 9
    R = (9·a2·a1 − 27·a0 − 2·a2³) / 54
    D = Q³ + R²

three real roots exist when D <= 0, and with θ = arccos(R / √(−Q³)):

    z_k = 2·√(−Q)·cos((θ + 2πk) / 3) − a2/3,   k = 0, 1, 2

z_0 is the largest root, z_1 the smallest and z_2 the middle one. Roots are
returned in that order, not sorted.
"""

import math
from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.exceptions import ComplexEigenvalueError, DimensionError


def characteristic_coefficients(A: NDArray[np.floating[Any]]) -> tuple[float, ...]:
    """
    Lower coefficients of det(λI − A) for a 2x2 or 3x3 matrix.

    2x2: (−tr A, det A)
    3x3: (−tr A, sum of principal 2x2 minors, −det A)

    Raises:
        DimensionError: For any other size
    """
    n = A.shape[0]
    trace = float(np.trace(A))

    if n == 2:
        det = A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]
        return (-trace, float(det))

    if n == 3:
        minors = (
            A[0, 0] * A[1, 1] - A[0, 1] * A[1, 0]
            + A[0, 0] * A[2, 2] - A[0, 2] * A[2, 0]
            + A[1, 1] * A[2, 2] - A[1, 2] * A[2, 1]
        )
        det = (
            A[0, 0] * (A[1, 1] * A[2, 2] - A[1, 2] * A[2, 1])
            - A[0, 1] * (A[1, 0] * A[2, 2] - A[1, 2] * A[2, 0])
            + A[0, 2] * (A[1, 0] * A[2, 1] - A[1, 1] * A[2, 0])
        )
        return (-trace, float(minors), -float(det))

    raise DimensionError(
        f"Closed-form eigenvalues require a 2x2 or 3x3 matrix, got {n}x{n}"
    )


def quadratic_roots(a1: float, a0: float, epsilon: float) -> list[float]:
    """
    Real roots of λ² + a1·λ + a0, as [(−a1 − √D)/2, (−a1 + √D)/2].

    A discriminant within epsilon·max(a1², 4·|a0|) below zero is treated
    as 0 (double root). Both terms scale with λ², like D itself.

    Raises:
        ComplexEigenvalueError: If the discriminant is negative beyond that
    """
    discriminant = a1 * a1 - 4.0 * a0
    if discriminant < -epsilon * max(a1 * a1, 4.0 * abs(a0)):
        raise ComplexEigenvalueError(
            f"Characteristic polynomial has complex roots "
            f"(discriminant {discriminant:.6g} < 0)",
            discriminant=discriminant,
            degree=2,
        )

    root = math.sqrt(max(discriminant, 0.0))
    return [(-a1 - root) / 2.0, (-a1 + root) / 2.0]


def cubic_roots(a2: float, a1: float, a0: float, epsilon: float) -> list[float]:
    """
    Real roots of λ³ + a2·λ² + a1·λ + a0 in Viète order.

    The tolerance tests run on the cubic rescaled by
    s = max(|a2|, √|a1|, ∛|a0|), whose roots are those of the original
    divided by s. That makes them independent of the matrix magnitude:
    diag(1e-6, 2e-6, 3e-6) and diag(1, 2, 3) take the same branches.

    When the rescaled D is within epsilon·max(1, |Q|³, R²) of zero the
    polynomial has a repeated root; θ is then taken as exactly 0 or π so
    the repeated roots come out equal. Rescaled Q within epsilon of zero is
    a triple root.

    Raises:
        ComplexEigenvalueError: If D is positive beyond the tolerance, or Q > 0
    """
    Q = (3.0 * a1 - a2 * a2) / 9.0
    R = (9.0 * a2 * a1 - 27.0 * a0 - 2.0 * a2 ** 3) / 54.0
    D = Q ** 3 + R * R
    shift = a2 / 3.0

    s = max(abs(a2), math.sqrt(abs(a1)), abs(a0) ** (1.0 / 3.0))
    if s == 0.0:
        return [-shift] * 3

    # Q scales as s², R as s³
    Qs = Q / (s * s)
    Rs = R / (s * s * s)
    Ds = Qs ** 3 + Rs * Rs
    scale = max(1.0, abs(Qs) ** 3, Rs * Rs)

    if Ds > epsilon * scale or Qs > epsilon:
        raise ComplexEigenvalueError(
            f"Characteristic polynomial has complex roots "
            f"(discriminant {D:.6g} > 0)",
            discriminant=D,
            degree=3,
        )

    if abs(Qs) <= epsilon:
        return [-shift] * 3

    if abs(Ds) <= epsilon * scale:
        theta = 0.0 if R > 0 else math.pi
    else:
        ratio = R / math.sqrt((-Q) ** 3)
        theta = math.acos(min(1.0, max(-1.0, ratio)))

    amplitude = 2.0 * math.sqrt(-Q)
    return [
        amplitude * math.cos((theta + 2.0 * math.pi * k) / 3.0) - shift
        for k in range(3)
    ]


def closed_form_eigenvalues(A: NDArray[np.floating[Any]], epsilon: float) -> NDArray[np.floating[Any]]:
    """
    Eigenvalues of a 2x2 or 3x3 matrix from its characteristic polynomial.

    Raises:
        DimensionError: If A is not 2x2 or 3x3
        ComplexEigenvalueError: If any eigenvalue is complex
    """
    coefficients = characteristic_coefficients(A)
    if len(coefficients) == 2:
        roots = quadratic_roots(*coefficients, epsilon)
    else:
        roots = cubic_roots(*coefficients, epsilon)
    return np.array(roots, dtype=np.float64)
