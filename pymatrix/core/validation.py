"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No rounding of non-integral values into the integer store
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    InvalidDimensionError,
    IndexOutOfRangeError,
)

INT64_MIN = int(np.iinfo(np.int64).min)
INT64_MAX = int(np.iinfo(np.int64).max)


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data)
    and non-numeric dtypes such as strings or booleans.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype (integer or floating, unchanged)

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional and non-empty.

    Raises:
        InvalidDimensionError: If array is not 2D or has a zero-length axis
    """
    if array.ndim != 2:
        raise InvalidDimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )
    rows, cols = array.shape
    if rows < 1 or cols < 1:
        raise InvalidDimensionError(
            f"{name}: expected non-empty 2D array, got shape {array.shape}",
            rows=rows,
            cols=cols,
        )


def check_square(array: NDArray[Any], name: str) -> None:
    """
    Verify a 2D array has as many rows as columns.

    Raises:
        InvalidDimensionError: If rows != cols
    """
    rows, cols = array.shape
    if rows != cols:
        raise InvalidDimensionError(
            f"{name}: expected square matrix, got {rows}x{cols}",
            rows=rows,
            cols=cols,
        )


def check_integral(array: NDArray[Any], name: str) -> None:
    """
    Verify every entry is a whole number within int64 range.

    Integer dtypes pass unless they hold values beyond int64 (uint64).
    Floating dtypes must be finite and carry no fractional part.

    Raises:
        ValidationError: If any value is fractional, non-finite, or too large
    """
    if np.issubdtype(array.dtype, np.integer):
        if array.size and np.issubdtype(array.dtype, np.unsignedinteger):
            if int(array.max()) > INT64_MAX:
                raise ValidationError(f"{name}: values exceed int64 range")
        return

    check_finite(array, name)
    fractional = array != np.trunc(array)
    if np.any(fractional):
        loc = np.argwhere(fractional)[0]
        raise ValidationError(
            f"{name}: non-integral value {float(array[tuple(loc)])} at {tuple(int(k) for k in loc)}"
        )
    if np.any((array < INT64_MIN) | (array >= 2.0 ** 63)):
        raise ValidationError(f"{name}: values exceed int64 range")


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a matrix dimension.

    Args:
        value: Proposed row/column count
        name: Parameter name for error messages

    Returns:
        The dimension as a plain int

    Raises:
        InvalidDimensionError: If value is not a positive integer
    """
    if not _is_integer(value):
        raise InvalidDimensionError(
            f"{name}: expected int, got {type(value).__name__}"
        )
    if value < 1:
        raise InvalidDimensionError(f"{name}: must be positive, got {value}")
    return int(value)


def check_index(i: Any, j: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Validate an (i, j) element position against a matrix shape.

    Returns:
        (i, j) as plain ints

    Raises:
        ValidationError: If either index is not an integer
        IndexOutOfRangeError: If the position lies outside [0, rows) x [0, cols)
    """
    for label, value in (("i", i), ("j", j)):
        if not _is_integer(value):
            raise ValidationError(
                f"index {label}: expected int, got {type(value).__name__}"
            )

    rows, cols = shape
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexOutOfRangeError(
            f"index ({i}, {j}) out of range for {rows}x{cols} matrix",
            index=(int(i), int(j)),
            shape=shape,
        )
    return int(i), int(j)


def check_element(value: Any, name: str) -> int:
    """
    Validate a single element for the integer store.

    Accepts ints, numpy integers, and integral finite floats.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is non-numeric, fractional, or outside int64
    """
    if _is_integer(value):
        result = int(value)
    elif isinstance(value, (float, np.floating)):
        if not np.isfinite(value):
            raise ValidationError(f"{name}: non-finite value {value}")
        if value != int(value):
            raise ValidationError(f"{name}: non-integral value {value}")
        result = int(value)
    else:
        raise ValidationError(
            f"{name}: expected integer, got {type(value).__name__}"
        )

    if not (INT64_MIN <= result <= INT64_MAX):
        raise ValidationError(f"{name}: value {result} exceeds int64 range")
    return result
