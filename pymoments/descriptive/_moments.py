"""
Central moments, variance and standard deviation.

Two variance algorithms are provided:

Two-pass (variance, variance_pop):
    Compute the mean, then sum squared deviations from it. This is the
    textbook definition and is exact enough for most data.

Online / Knuth (stable_variance, stable_variance_pop):
    One left-to-right pass keeping a running mean and a running sum of
    squared deviations M2 (Welford 1962; Knuth TAOCP vol. 2, 4.2.2):

        delta = x - mean
        mean += delta / i
        M2   += delta * (x - mean)      # uses the updated mean

    Its rounding error does not grow with the size of the mean relative
    to the spread, so it is the reference for data clustered far from 0.

Both population variants divide by n; both sample variants are
Bessel-corrected (n - 1). Standard deviations are the square roots of the
matching variance.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.validation import (
    check_finite_result,
    check_min_samples,
    check_moment_order,
)
from pymoments.descriptive.design import SampleDesign, ensure_sample
from pymoments.descriptive._location import mean


def central_moment(x: ArrayLike | SampleDesign, k: int) -> float:
    """
    k-th central moment, sum((x - mean)^k) / n.

    Always the population form (divides by n). The 0th moment is 1 by
    convention.

    Parameters
    ----------
    x : array-like or SampleDesign
        Non-empty sample.
    k : int
        Non-negative moment order.

    Raises
    ------
    ValidationError
        k is negative or not an integer.
    """
    k = check_moment_order(k)
    arr = ensure_sample(x)
    if k == 0:
        return 1.0

    xbar = mean(arr)
    with np.errstate(over='ignore', invalid='ignore'):
        total = np.sum((arr - xbar) ** k)
    return check_finite_result(total / arr.shape[0], 'central_moment')


def _sum_sq_dev(arr: NDArray[np.floating[Any]], statistic: str) -> float:
    mu = mean(arr)
    with np.errstate(over='ignore', invalid='ignore'):
        ss = np.sum((arr - mu) ** 2)
    return check_finite_result(ss, statistic)


def variance_pop(x: ArrayLike | SampleDesign) -> float:
    """Population variance, sum((x - mu)^2) / n (two-pass)."""
    arr = ensure_sample(x)
    return _sum_sq_dev(arr, 'variance_pop') / arr.shape[0]


def variance(x: ArrayLike | SampleDesign) -> float:
    """
    Sample variance, sum((x - xbar)^2) / (n - 1) (two-pass).

    Raises
    ------
    InsufficientSampleSizeError
        n < 2.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    check_min_samples(n, 2, 'variance')
    return _sum_sq_dev(arr, 'variance') / (n - 1)


def _welford_m2(arr: NDArray[np.floating[Any]]) -> float:
    """Sum of squared deviations from the mean in a single online pass."""
    xbar = 0.0
    m2 = 0.0
    for i, x in enumerate(arr.tolist(), start=1):
        delta = x - xbar
        xbar += delta / i
        m2 += delta * (x - xbar)
    return m2


def stable_variance_pop(x: ArrayLike | SampleDesign) -> float:
    """Population variance by Knuth's online algorithm, M2 / n."""
    arr = ensure_sample(x)
    m2 = check_finite_result(_welford_m2(arr), 'stable_variance_pop')
    return m2 / arr.shape[0]


def stable_variance(x: ArrayLike | SampleDesign) -> float:
    """
    Sample variance by Knuth's online algorithm,
    stable_variance_pop * n / (n - 1).

    Raises
    ------
    InsufficientSampleSizeError
        n < 2.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    check_min_samples(n, 2, 'stable_variance')
    return stable_variance_pop(arr) * n / (n - 1)


def std_dev(x: ArrayLike | SampleDesign) -> float:
    """Sample standard deviation, sqrt(variance). Requires n >= 2."""
    return float(np.sqrt(variance(x)))


def std_dev_pop(x: ArrayLike | SampleDesign) -> float:
    """Population standard deviation, sqrt(variance_pop)."""
    return float(np.sqrt(variance_pop(x)))


def stable_std_dev(x: ArrayLike | SampleDesign) -> float:
    """Sample standard deviation, sqrt(stable_variance). Requires n >= 2."""
    return float(np.sqrt(stable_variance(x)))


def stable_std_dev_pop(x: ArrayLike | SampleDesign) -> float:
    """Population standard deviation, sqrt(stable_variance_pop)."""
    return float(np.sqrt(stable_variance_pop(x)))
