"""
Tests for reductions: reduce_sum, reduce_product, size and extremes.
"""

import numpy as np
import pytest

from pymoments.core.exceptions import (
    DomainError,
    EmptySampleError,
    NumericalError,
    ValidationError,
)
from pymoments.descriptive import (
    data_range,
    maximum,
    minimum,
    reduce_product,
    reduce_sum,
    size,
)


class TestReduceSum:

    def test_identity(self):
        assert reduce_sum([1, 2, 3]) == 6.0

    def test_transform(self):
        assert reduce_sum([1, 2, 3], lambda v: v ** 2) == 14.0

    def test_reciprocal_transform(self):
        assert reduce_sum([1, 2, 4], np.reciprocal) == 1.75

    def test_returns_python_float(self):
        assert type(reduce_sum([1, 2])) is float

    def test_empty_raises(self):
        with pytest.raises(EmptySampleError):
            reduce_sum([])

    def test_transform_non_finite_raises(self):
        with pytest.raises(DomainError, match="non-finite") as exc_info:
            reduce_sum([1.0, 0.0, 2.0], lambda v: 1 / v)
        assert exc_info.value.n_invalid == 1

    def test_transform_must_be_elementwise(self):
        with pytest.raises(ValidationError, match="elementwise"):
            reduce_sum([1.0, 2.0], lambda v: v.sum())

    def test_overflow_raises(self):
        with pytest.raises(NumericalError, match="not finite"):
            reduce_sum([1e308, 1e308])


class TestReduceProduct:

    def test_identity(self):
        assert reduce_product([1, 2, 3, 4]) == 24.0

    def test_transform(self):
        assert reduce_product([1, 2, 3], lambda v: v + 1) == 24.0

    def test_empty_raises(self):
        with pytest.raises(EmptySampleError):
            reduce_product([])

    def test_overflow_raises(self):
        with pytest.raises(NumericalError):
            reduce_product([1e200, 1e200])


class TestExtremes:

    def test_size(self):
        assert size([3, -1, 7]) == 3

    def test_minimum_maximum(self):
        assert minimum([3, -1, 7]) == -1.0
        assert maximum([3, -1, 7]) == 7.0

    def test_range(self):
        assert data_range([3, -1, 7]) == 8.0

    def test_range_single_value(self):
        assert data_range([5.0]) == 0.0

    def test_empty_raises(self):
        for func in (size, minimum, maximum, data_range):
            with pytest.raises(EmptySampleError):
                func([])
