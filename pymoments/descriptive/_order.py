"""
Order statistics: quartiles (TI-83 method) and outlier fences.

The TI-83 method splits the sorted sample into lower and upper halves and
takes the median of each. For odd n the median element belongs to
neither half:

    n = 8: [1 2 3 4 | 5 6 7 8]      q1 = 2.5, q3 = 6.5
    n = 7: [1 2 3] 4 [5 6 7]        q1 = 2,   q3 = 6

Other quartile definitions exist (R offers nine, see Hyndman & Fan 1996);
this one always returns observed values or midpoints of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.descriptive.design import SampleDesign, ensure_sample
from pymoments.descriptive._location import _median_sorted

FENCE_FACTOR = 1.5


@dataclass(frozen=True)
class Quartiles:
    """
    Quartiles and Tukey outlier fences of a sample.

    Attributes:
        q1: Median of the lower half
        q2: Median of the whole sample
        q3: Median of the upper half
        iqr: Interquartile range, q3 - q1
        lower_fence: q1 - 1.5 * iqr
        upper_fence: q3 + 1.5 * iqr
    """
    q1: float
    q2: float
    q3: float
    iqr: float
    lower_fence: float
    upper_fence: float

    def as_dict(self) -> dict[str, float]:
        return {
            'q1': self.q1,
            'q2': self.q2,
            'q3': self.q3,
            'iqr': self.iqr,
            'lower_fence': self.lower_fence,
            'upper_fence': self.upper_fence,
        }


def _split_halves(
    s: NDArray[np.floating[Any]],
) -> tuple[NDArray[np.floating[Any]], NDArray[np.floating[Any]]]:
    """Lower and upper halves of a sorted array (TI-83 split)."""
    n = s.shape[0]
    if n == 1:
        # Both halves would be empty; a single value is its own quartiles
        return s, s
    if n % 2 == 0:
        c1 = c2 = n // 2
    else:
        c1 = (n - 1) // 2
        c2 = c1 + 1
    return s[:c1], s[c2:]


def quartiles(x: ArrayLike | SampleDesign) -> Quartiles:
    """
    Quartiles of a sample by the TI-83 method, with outlier fences.

    All values come from one sorted copy of the sample; the input is never
    reordered. For n < 4 the quartiles are still defined but describe the
    sample poorly: n = 1 gives q1 = q2 = q3, n = 2 and n = 3 take q1 and
    q3 from single observations.

    Parameters
    ----------
    x : array-like or SampleDesign
        Non-empty sample.

    Returns
    -------
    Quartiles
    """
    s = np.sort(ensure_sample(x))
    lower, upper = _split_halves(s)

    q1 = _median_sorted(lower)
    q2 = _median_sorted(s)
    q3 = _median_sorted(upper)
    iqr = q3 - q1

    return Quartiles(
        q1=q1,
        q2=q2,
        q3=q3,
        iqr=iqr,
        lower_fence=q1 - FENCE_FACTOR * iqr,
        upper_fence=q3 + FENCE_FACTOR * iqr,
    )


def outliers(x: ArrayLike | SampleDesign) -> NDArray[np.floating[Any]]:
    """
    Observations strictly outside the outlier fences, in original order.

    Returns a new array (possibly empty).
    """
    arr = ensure_sample(x)
    q = quartiles(arr)
    mask = (arr < q.lower_fence) | (arr > q.upper_fence)
    return arr[mask]
