"""
Location statistics: arithmetic, geometric and harmonic means, median.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.exceptions import DivisionByZeroError, DomainError, NumericalError
from pymoments.core.validation import check_finite_result
from pymoments.descriptive.design import SampleDesign, ensure_sample
from pymoments.descriptive._reductions import reduce_product, reduce_sum

_TINY = np.finfo(np.float64).tiny


def mean(x: ArrayLike | SampleDesign) -> float:
    """Arithmetic mean, sum(x) / n."""
    arr = ensure_sample(x)
    return reduce_sum(arr) / arr.shape[0]


def geometric_mean(x: ArrayLike | SampleDesign) -> float:
    """
    Geometric mean, prod(x) ** (1/n).

    Only defined here for strictly positive samples. When the product
    leaves the normal float64 range the same quantity is computed as
    exp(mean(log x)).

    Raises
    ------
    DomainError
        Any observation is <= 0.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]

    n_bad = int(np.sum(arr <= 0))
    if n_bad:
        raise DomainError(
            f"geometric_mean: requires strictly positive observations, "
            f"got {n_bad} non-positive value(s)",
            statistic='geometric_mean',
            n_invalid=n_bad,
        )

    try:
        product = reduce_product(arr)
    except NumericalError:
        product = None

    if product is not None and product >= _TINY:
        return float(product ** (1.0 / n))

    return check_finite_result(np.exp(np.mean(np.log(arr))), 'geometric_mean')


def harmonic_mean(x: ArrayLike | SampleDesign) -> float:
    """
    Harmonic mean, n / sum(1/x).

    Raises
    ------
    DivisionByZeroError
        An observation is zero, or the reciprocals sum to zero.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]

    n_zero = int(np.sum(arr == 0))
    if n_zero:
        raise DivisionByZeroError(
            f"harmonic_mean: sample contains {n_zero} zero value(s)",
            statistic='harmonic_mean',
        )

    denom = reduce_sum(arr, np.reciprocal)
    if denom == 0:
        raise DivisionByZeroError(
            "harmonic_mean: reciprocals of the sample sum to zero",
            statistic='harmonic_mean',
        )
    return check_finite_result(n / denom, 'harmonic_mean')


def _median_sorted(s: NDArray[np.floating[Any]]) -> float:
    """Median of an already sorted, non-empty array."""
    n = s.shape[0]
    mid = n // 2
    if n % 2 == 1:
        return float(s[mid])
    # Halving is exact, so this equals (a + b) / 2 without overflowing
    return float(s[mid - 1] / 2.0 + s[mid] / 2.0)


def median(x: ArrayLike | SampleDesign) -> float:
    """
    Median: middle element of the sorted sample, or the mean of the two
    middle elements when n is even.

    Sorting happens on a copy; the input is never reordered.
    """
    return _median_sorted(np.sort(ensure_sample(x)))
