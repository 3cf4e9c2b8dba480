"""
Input validation utilities for PyMoments.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.array on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymoments.core.exceptions import (
    DimensionError,
    DomainError,
    EmptySampleError,
    InsufficientSampleSizeError,
    NumericalError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to a private float64 numpy array.

    Accepts any array-like and copies it into a new float64 array, so the
    caller's object is never aliased. Rejects inputs that result in object
    dtype (indicating mixed types or non-numeric data).

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray of dtype float64 owned by the caller of this function

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array, copy=True)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, expected real data"
        )

    return result.astype(np.float64, copy=False)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DomainError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise DomainError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)",
            n_invalid=n_nan + n_inf,
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array is 1-dimensional.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        DimensionError: If array is not 1D
    """
    if array.ndim != 1:
        raise DimensionError(
            f"{name}: expected 1D array, got {array.ndim}D with shape {array.shape}"
        )


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array has at least one observation.

    Raises:
        EmptySampleError: If array has zero elements
    """
    if array.size == 0:
        raise EmptySampleError(f"{name}: sample is empty, need at least 1 observation")


def check_min_samples(
    n: int,
    min_samples: int,
    statistic: str,
) -> None:
    """
    Verify a sample has at least the minimum number of observations.

    Args:
        n: Number of observations in the sample
        min_samples: Minimum required observations for the statistic
        statistic: Statistic name for error messages

    Raises:
        InsufficientSampleSizeError: If n < min_samples
    """
    if n < min_samples:
        raise InsufficientSampleSizeError(
            f"{statistic}: requires at least {min_samples} observations, got {n}",
            statistic=statistic,
            required=min_samples,
            actual=n,
        )


def check_moment_order(k: Any, name: str = "k") -> int:
    """
    Validate a central-moment order.

    Args:
        k: Candidate order
        name: Parameter name for error messages

    Returns:
        k as a Python int

    Raises:
        ValidationError: If k is not a non-negative integer
    """
    if isinstance(k, (bool, np.bool_)) or not isinstance(k, numbers.Integral):
        raise ValidationError(f"{name}: moment order must be an integer, got {k!r}")
    if k < 0:
        raise ValidationError(f"{name}: moment order must be non-negative, got {k}")
    return int(k)


def check_finite_result(value: float, statistic: str) -> float:
    """
    Verify a computed statistic is finite.

    Finite input can still overflow float64 (e.g. squaring deviations of
    order 1e200). Such results are reported rather than returned.

    Raises:
        NumericalError: If value is NaN or Inf
    """
    if not np.isfinite(value):
        raise NumericalError(
            f"{statistic}: result is not finite ({value}); "
            f"the sample magnitude exceeds float64 range for this statistic"
        )
    return float(value)
