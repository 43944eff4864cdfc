"""
Numeric tolerance policy.

A single threshold ε decides when a floating-point quantity is "effectively
zero": pivot selection in row reduction, LU pivot checks, determinant-based
singularity tests, and the eigenvalue check det(A - λI) ≈ 0.

The process-wide value is mutable. Every engine function takes an explicit
``tol`` argument and resolves it at call time with resolve_epsilon(), so a
caller can either thread its own value through or rely on the latest
process-wide setting. Nothing caches ε at import or construction time.

The module-level state has no locking. Hosts that change ε from several
threads must serialise those calls themselves.
"""

import math
from contextlib import contextmanager
from typing import Iterator

from pylinalg.core.exceptions import ValidationError


DEFAULT_EPSILON: float = 1e-11

_epsilon: float = DEFAULT_EPSILON


def _check_epsilon(epsilon: float) -> float:
    if isinstance(epsilon, bool):
        raise ValidationError(f"epsilon: expected a real number, got {epsilon!r}")
    try:
        value = float(epsilon)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"epsilon: expected a real number, got {epsilon!r}") from e
    if not math.isfinite(value) or value < 0.0:
        raise ValidationError(
            f"epsilon: must be a finite, non-negative number, got {epsilon!r}"
        )
    return value


def get_epsilon() -> float:
    """Current process-wide tolerance."""
    return _epsilon


def set_epsilon(epsilon: float) -> None:
    """
    Replace the process-wide tolerance.

    Args:
        epsilon: New threshold, finite and >= 0

    Raises:
        ValidationError: If epsilon is negative, non-finite or not a number
    """
    global _epsilon
    _epsilon = _check_epsilon(epsilon)


def reset_epsilon() -> None:
    """Restore DEFAULT_EPSILON."""
    global _epsilon
    _epsilon = DEFAULT_EPSILON


@contextmanager
def error_tolerance(epsilon: float) -> Iterator[float]:
    """
    Temporarily set the process-wide tolerance.

    Usage:
        with error_tolerance(1e-19):
            assert is_nonsingular(A)

    Yields:
        The validated tolerance in effect inside the block
    """
    previous = _epsilon
    set_epsilon(epsilon)
    try:
        yield _epsilon
    finally:
        set_epsilon(previous)


def resolve_epsilon(epsilon: float | None = None) -> float:
    """
    Resolve the tolerance for a single engine call.

    Args:
        epsilon: Explicit tolerance, or None to use the process-wide value
                 as it stands right now

    Returns:
        A validated, finite, non-negative float
    """
    if epsilon is None:
        return _epsilon
    return _check_epsilon(epsilon)


def is_zero(value: float, epsilon: float) -> bool:
    """True if |value| <= epsilon."""
    return abs(value) <= epsilon
