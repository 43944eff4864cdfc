"""
Eigenvalue method identifiers.

This module is the single source of truth for method strings.
Import from here, never use raw strings.

Usage:
    from pylinalg.eigen.methods import CLOSED_FORM_POLYNOMIAL_ROOT_METHOD

    values = A.eigenvalues(CLOSED_FORM_POLYNOMIAL_ROOT_METHOD)
"""

from typing import Literal

from pylinalg.core.exceptions import InvalidMethodError


# Roots of the 2x2 / 3x3 characteristic polynomial by closed-form formulas
CLOSED_FORM_POLYNOMIAL_ROOT_METHOD = 'closed_form_polynomial_root'

EigenvalueMethod = Literal['closed_form_polynomial_root']

# All methods as a frozenset for validation
EIGENVALUE_METHODS = frozenset({
    CLOSED_FORM_POLYNOMIAL_ROOT_METHOD,
})


def check_method(method: object) -> str:
    """
    Validate an eigenvalue method identifier.

    Raises:
        InvalidMethodError: If method is not in EIGENVALUE_METHODS
    """
    if not isinstance(method, str) or method not in EIGENVALUE_METHODS:
        valid = tuple(sorted(EIGENVALUE_METHODS))
        raise InvalidMethodError(
            f"Unknown eigenvalue method: {method!r}. Valid: {', '.join(valid)}",
            method=method,
            valid=valid,
        )
    return method


__all__ = [
    'CLOSED_FORM_POLYNOMIAL_ROOT_METHOD',
    'EIGENVALUE_METHODS',
    'EigenvalueMethod',
    'check_method',
]
