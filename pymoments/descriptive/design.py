"""
SampleDesign: data wrapper for descriptive statistics.

Wraps a 1D sample and provides validation and metadata for every
statistic in this package. The wrapped array is a private, read-only
copy, so no statistic can alter the caller's data.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymoments.core.validation import (
    check_1d,
    check_array,
    check_finite,
    check_not_empty,
)


@dataclass(frozen=True)
class SampleDesign:
    """
    Design for descriptive statistics.

    Wraps a finite, non-empty sample of n real observations. Immutable
    after construction: the underlying array has its writeable flag
    cleared.

    Construction:
        SampleDesign.from_array(data)
    """
    _data: NDArray[np.floating[Any]]
    _n: int
    _name: str | None

    @classmethod
    def from_array(cls, data: ArrayLike, *, name: str | None = None) -> SampleDesign:
        """
        Build SampleDesign from array-like data.

        Parameters
        ----------
        data : array-like
            1D sample. Can be a list, numpy array, pandas Series or any
            array-like with a .values attribute.
        name : str, optional
            Label used in error messages and summaries. Defaults to the
            Series name when available.

        Raises
        ------
        ValidationError
            Non-numeric data.
        DimensionError
            Data is not 1D.
        EmptySampleError
            Data has no observations.
        DomainError
            Data contains NaN or Inf.
        """
        if hasattr(data, 'values'):
            if name is None and getattr(data, 'name', None) is not None:
                name = str(data.name)
            data = data.values

        label = name or 'sample'
        arr = check_array(data, label)
        check_1d(arr, label)
        check_not_empty(arr, label)
        check_finite(arr, label)

        arr.setflags(write=False)
        return cls(_data=arr, _n=int(arr.shape[0]), _name=name)

    @property
    def data(self) -> NDArray[np.floating[Any]]:
        """Read-only sample array, shape (n,)."""
        return self._data

    @property
    def n(self) -> int:
        """Number of observations."""
        return self._n

    @property
    def name(self) -> str | None:
        """Sample label, or None if not available."""
        return self._name

    def __len__(self) -> int:
        return self._n

    def __repr__(self) -> str:
        label = f", name={self._name!r}" if self._name is not None else ""
        return f"SampleDesign(n={self._n}{label})"


def ensure_sample(data: ArrayLike | SampleDesign) -> NDArray[np.floating[Any]]:
    """Validated, read-only sample array for raw data or a SampleDesign."""
    if isinstance(data, SampleDesign):
        return data.data
    return SampleDesign.from_array(data).data
