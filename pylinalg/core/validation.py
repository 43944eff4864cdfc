"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or reinterpreting a shape.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    BadDataError,
    DimensionError,
    InvalidDataError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a float numpy array.

    Accepts any array-like. Ragged nested sequences, object dtype and
    non-numeric dtypes (strings, bytes, datetimes) are rejected.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        BadDataError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise BadDataError(f"{name}: cannot convert to array (ragged rows?): {e}") from e

    if result.dtype == object:
        raise BadDataError(
            f"{name}: converted to object dtype, indicating ragged rows, "
            f"mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise BadDataError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        BadDataError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise BadDataError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one element.

    Raises:
        BadDataError: If any dimension is zero
    """
    if array.size == 0:
        raise BadDataError(f"{name}: empty input with shape {array.shape}")


def check_square(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify a 2D array is square.

    Raises:
        DimensionError: If rows != columns
    """
    check_2d(array, name)
    n, m = array.shape
    if n != m:
        raise DimensionError(
            f"{name}: expected a square matrix, got {n}x{m}"
        )


def check_matching_rows(
    A: NDArray[np.floating[Any]],
    b: NDArray[np.floating[Any]],
    names: tuple[str, str],
) -> None:
    """
    Verify b has one entry per row of A.

    Raises:
        DimensionError: If len(b) != A.shape[0]
    """
    if A.shape[0] != b.shape[0]:
        raise DimensionError(
            f"Inconsistent sizes: {names[0]} has {A.shape[0]} rows, "
            f"{names[1]} has {b.shape[0]} entries"
        )


def check_real_scalar(value: object, name: str) -> float:
    """
    Verify a single value is a finite real number.

    bool and strings are rejected even though Python would convert them.

    Returns:
        The value as float

    Raises:
        InvalidDataError: If value is not a finite real number
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidDataError(
            f"{name}: expected a real number, got {type(value).__name__} {value!r}",
            value=value,
        )
    result = float(value)
    if not np.isfinite(result):
        raise InvalidDataError(f"{name}: expected a finite number, got {value!r}", value=value)
    return result
