"""
Shape statistics: skewness and kurtosis.

Applications disagree on which variant "skewness" and "kurtosis" mean.
Mathematica reports the biased population forms; Excel, SAS and R's
e1071 (type 2) report the bias-corrected sample forms. Both are provided,
with m_k the k-th central moment (divide by n):

    skewness_pop = m3 / m2^(3/2)
    skewness     = skewness_pop * sqrt(n (n-1)) / (n-2)

    kurtosis_pop = m4 / m2^2                    (3 for a normal population)
    kurtosis     = (n-1) / ((n-2)(n-3)) * ((n+1) * (kurtosis_pop - 3) + 6)

kurtosis_pop is kurtosis proper; kurtosis is the corrected *excess*
kurtosis (0 for a normal population).

Reference:
    Joanes, D.N. and Gill, C.A. (1998) "Comparing measures of sample
    skewness and kurtosis", The Statistician, 47(1), 183-189.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.exceptions import DivisionByZeroError
from pymoments.core.validation import check_finite_result, check_min_samples
from pymoments.descriptive.design import SampleDesign, ensure_sample
from pymoments.descriptive._moments import central_moment


def _second_moment(arr: NDArray[np.floating[Any]], statistic: str) -> float:
    """m2 of a sample, rejecting samples with no spread."""
    # A constant sample can give m2 slightly above 0 when its mean rounds
    if arr.min() == arr.max():
        raise DivisionByZeroError(
            f"{statistic}: sample has zero dispersion (all values equal {arr[0]})",
            statistic=statistic,
        )
    m2 = central_moment(arr, 2)
    if m2 == 0:
        raise DivisionByZeroError(
            f"{statistic}: second central moment is zero",
            statistic=statistic,
        )
    return m2


def skewness_pop(x: ArrayLike | SampleDesign) -> float:
    """
    Population (biased) skewness, m3 / m2^(3/2).

    Raises
    ------
    DivisionByZeroError
        All observations are equal.
    """
    arr = ensure_sample(x)
    m2 = _second_moment(arr, 'skewness_pop')
    m3 = central_moment(arr, 3)
    # m3 / m2^(3/2), ordered so m2^(3/2) itself never overflows
    return check_finite_result(m3 / m2 / np.sqrt(m2), 'skewness_pop')


def skewness(x: ArrayLike | SampleDesign) -> float:
    """
    Sample (bias-corrected) skewness. Matches Excel SKEW() and
    R e1071::skewness(type=2).

    Raises
    ------
    InsufficientSampleSizeError
        n < 3.
    DivisionByZeroError
        All observations are equal.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    check_min_samples(n, 3, 'skewness')
    c = np.sqrt(n * (n - 1.0)) / (n - 2.0)
    return float(c * skewness_pop(arr))


def kurtosis_pop(x: ArrayLike | SampleDesign) -> float:
    """
    Population kurtosis proper, m4 / m2^2. Subtract 3 for excess kurtosis.

    Raises
    ------
    DivisionByZeroError
        All observations are equal.
    """
    arr = ensure_sample(x)
    m2 = _second_moment(arr, 'kurtosis_pop')
    m4 = central_moment(arr, 4)
    return check_finite_result(m4 / m2 / m2, 'kurtosis_pop')


def kurtosis(x: ArrayLike | SampleDesign) -> float:
    """
    Sample (bias-corrected) excess kurtosis. Matches Excel KURT() and
    R e1071::kurtosis(type=2).

    Raises
    ------
    InsufficientSampleSizeError
        n < 4.
    DivisionByZeroError
        All observations are equal.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    check_min_samples(n, 4, 'kurtosis')
    g2 = kurtosis_pop(arr) - 3.0
    c1 = (n - 1.0) / ((n - 2.0) * (n - 3.0))
    return float(c1 * ((n + 1.0) * g2 + 6.0))
