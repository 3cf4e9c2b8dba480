"""
Histogram bin-width heuristics.

Each rule suggests a bin count k and a bin width h for a sample:

    Sturges:            k = ceil(log2(n) + 1),   h = range / k
    Scott:              h = 3.5 * sd / n^(1/3),  k = ceil(range / h)
    Square root:        k = ceil(sqrt(n)),       h = range / k
    Freedman-Diaconis:  h = 2 * IQR / n^(1/3),   k = ceil(range / h)

None of them is "correct"; they are starting points. A rule that would
produce a zero width (constant sample, zero IQR) raises instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.exceptions import InvalidBinWidthError
from pymoments.core.validation import check_finite_result
from pymoments.descriptive.design import SampleDesign, ensure_sample
from pymoments.descriptive._reductions import data_range
from pymoments.descriptive._order import quartiles
from pymoments.descriptive._moments import std_dev

SCOTT_FACTOR = 3.5
FD_FACTOR = 2.0


@dataclass(frozen=True)
class BinWidth:
    """
    Suggested histogram binning.

    Attributes:
        k: Number of bins (>= 1)
        h: Bin width (> 0)
    """
    k: int
    h: float


def _check_width(h: float, rule: str, basis: str) -> None:
    if not h > 0:
        raise InvalidBinWidthError(
            f"{rule}: bin width is {h} because the sample {basis} is zero",
            rule=rule,
            width=h,
        )


def _bin_count(arr: NDArray[np.floating[Any]], h: float, rule: str) -> int:
    """Bins of width h needed to span the sample range."""
    with np.errstate(over='ignore'):
        ratio = np.float64(data_range(arr)) / h
    # A tiny width against a huge range overflows before the ceiling
    return max(1, math.ceil(check_finite_result(ratio, rule)))


def sturges(x: ArrayLike | SampleDesign) -> BinWidth:
    """Sturges' formula. Assumes roughly normal data; undersmooths large n."""
    arr = ensure_sample(x)
    n = arr.shape[0]
    k = math.ceil(math.log2(n) + 1)
    h = data_range(arr) / k
    _check_width(h, 'sturges', 'range')
    return BinWidth(k=k, h=h)


def scott(x: ArrayLike | SampleDesign) -> BinWidth:
    """
    Scott's normal reference rule.

    Raises
    ------
    InsufficientSampleSizeError
        n < 2 (the sample standard deviation is undefined).
    InvalidBinWidthError
        Zero standard deviation.
    NumericalError
        range / h overflows float64.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    h = SCOTT_FACTOR * std_dev(arr) / n ** (1.0 / 3.0)
    _check_width(h, 'scott', 'standard deviation')
    k = _bin_count(arr, h, 'scott')
    return BinWidth(k=k, h=h)


def square_root_choice(x: ArrayLike | SampleDesign) -> BinWidth:
    """
    Square-root choice, as used by Excel's histogram tool.

    The bin count is rounded up to an integer, k = ceil(sqrt(n)), and the
    width follows from it, h = range / k. h is therefore not range / sqrt(n)
    unless n is a perfect square.
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    k = math.ceil(np.sqrt(n))
    h = data_range(arr) / k
    _check_width(h, 'square_root_choice', 'range')
    return BinWidth(k=k, h=h)


def freedman_diaconis(x: ArrayLike | SampleDesign) -> BinWidth:
    """
    Freedman-Diaconis rule. Based on the IQR, so robust to outliers.

    Raises
    ------
    InvalidBinWidthError
        Zero IQR (e.g. more than half the observations are equal).
    NumericalError
        range / h overflows float64 (tiny IQR, extreme outlier).
    """
    arr = ensure_sample(x)
    n = arr.shape[0]
    h = FD_FACTOR * quartiles(arr).iqr / n ** (1.0 / 3.0)
    _check_width(h, 'freedman_diaconis', 'IQR')
    k = _bin_count(arr, h, 'freedman_diaconis')
    return BinWidth(k=k, h=h)
