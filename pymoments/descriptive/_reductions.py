"""
Reductions over a sample: sum, product, size and extremes.

Every other statistic in this package is built on these. A reduction has
no identity element here, so an empty sample is an error rather than 0
or 1.
"""

from __future__ import annotations

from typing import Any, Callable
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.exceptions import DomainError, ValidationError
from pymoments.core.validation import check_finite_result
from pymoments.descriptive.design import SampleDesign, ensure_sample

Transform = Callable[[NDArray[np.floating[Any]]], ArrayLike]


def _apply(
    x: NDArray[np.floating[Any]],
    transform: Transform | None,
    statistic: str,
) -> NDArray[np.floating[Any]]:
    """Apply an elementwise transform, rejecting non-finite output."""
    if transform is None:
        return x

    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        values = np.asarray(transform(x), dtype=np.float64)

    if values.shape != x.shape:
        raise ValidationError(
            f"{statistic}: transform must be elementwise, "
            f"got shape {values.shape} for input shape {x.shape}"
        )
    bad = ~np.isfinite(values)
    if np.any(bad):
        raise DomainError(
            f"{statistic}: transform produced {int(bad.sum())} non-finite values",
            statistic=statistic,
            n_invalid=int(bad.sum()),
        )
    return values


def reduce_sum(
    x: ArrayLike | SampleDesign,
    transform: Transform | None = None,
) -> float:
    """
    Sum of a sample, optionally after an elementwise transform.

    Parameters
    ----------
    x : array-like or SampleDesign
        Non-empty sample.
    transform : callable, optional
        Vectorised elementwise function applied before summing, e.g.
        ``lambda v: 1 / v``. Identity when omitted.

    Raises
    ------
    EmptySampleError
        Sample has no observations.
    DomainError
        The transform produced NaN or Inf.
    """
    values = _apply(ensure_sample(x), transform, 'reduce_sum')
    with np.errstate(over='ignore', invalid='ignore'):
        total = np.sum(values)
    return check_finite_result(total, 'reduce_sum')


def reduce_product(
    x: ArrayLike | SampleDesign,
    transform: Transform | None = None,
) -> float:
    """
    Product of a sample, optionally after an elementwise transform.

    Same contract as reduce_sum().
    """
    values = _apply(ensure_sample(x), transform, 'reduce_product')
    with np.errstate(over='ignore', under='ignore'):
        total = np.prod(values)
    return check_finite_result(total, 'reduce_product')


def size(x: ArrayLike | SampleDesign) -> int:
    """Number of observations."""
    return int(ensure_sample(x).shape[0])


def minimum(x: ArrayLike | SampleDesign) -> float:
    """Smallest observation."""
    return float(np.min(ensure_sample(x)))


def maximum(x: ArrayLike | SampleDesign) -> float:
    """Largest observation."""
    return float(np.max(ensure_sample(x)))


def data_range(x: ArrayLike | SampleDesign) -> float:
    """Sample range, max - min."""
    arr = ensure_sample(x)
    with np.errstate(over='ignore'):
        spread = np.max(arr) - np.min(arr)
    return check_finite_result(spread, 'data_range')
