"""
Tests for the histogram bin-width rules and bin_width() dispatch.

Reference sample 1..8: n = 8, range 7, sample sd sqrt(6), TI-83 IQR 4.
"""

import numpy as np
import pytest

from pymoments.core.exceptions import (
    DivisionByZeroError,
    InsufficientSampleSizeError,
    InvalidBinWidthError,
    NumericalError,
    ValidationError,
)
from pymoments.descriptive import (
    BinWidth,
    bin_width,
    freedman_diaconis,
    quartiles,
    scott,
    square_root_choice,
    sturges,
)

X = [1, 2, 3, 4, 5, 6, 7, 8]


class TestSturges:

    def test_reference(self):
        b = sturges(X)
        assert b == BinWidth(k=4, h=1.75)

    def test_thousand(self, normal_sample):
        """ceil(log2(1000) + 1) = ceil(10.97) = 11."""
        assert sturges(normal_sample).k == 11

    def test_single_value_raises(self):
        with pytest.raises(InvalidBinWidthError) as exc_info:
            sturges([3.0])
        err = exc_info.value
        assert err.rule == 'sturges'
        assert err.width == 0.0

    def test_constant_raises(self):
        with pytest.raises(InvalidBinWidthError, match="range"):
            sturges([2.0, 2.0, 2.0, 2.0])


class TestScott:

    def test_reference(self):
        b = scott(X)
        np.testing.assert_allclose(b.h, 3.5 * np.sqrt(6.0) / 2.0, rtol=1e-12)
        assert b.k == 2

    def test_single_value_needs_sd(self):
        with pytest.raises(InsufficientSampleSizeError):
            scott([3.0])

    def test_constant_raises(self):
        with pytest.raises(InvalidBinWidthError, match="standard deviation"):
            scott([3.0, 3.0, 3.0])


class TestSquareRootChoice:

    def test_reference(self):
        b = square_root_choice(X)
        assert b.k == 3
        np.testing.assert_allclose(b.h, 7.0 / 3.0, rtol=1e-15)

    def test_perfect_square(self):
        assert square_root_choice(np.arange(16.0)).k == 4

    def test_constant_raises(self):
        with pytest.raises(InvalidBinWidthError):
            square_root_choice([1.0, 1.0, 1.0])


class TestFreedmanDiaconis:

    def test_reference(self):
        b = freedman_diaconis(X)
        np.testing.assert_allclose(b.h, 4.0, rtol=1e-12)
        assert b.k == 2

    def test_ignores_outlier(self):
        """One extreme value widens the range but not the IQR."""
        base = freedman_diaconis(X)
        wild = freedman_diaconis([1, 2, 3, 4, 5, 6, 7, 1000])
        np.testing.assert_allclose(wild.h, base.h, rtol=1e-12)
        assert wild.k > base.k

    def test_zero_iqr_raises(self):
        with pytest.raises(InvalidBinWidthError, match="IQR"):
            freedman_diaconis([1, 1, 1, 1, 1, 1, 2])

    def test_is_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            freedman_diaconis([1, 1, 1, 1, 1, 1, 2])


class TestCoverage:
    """k bins of width h always span the sample range."""

    @pytest.mark.parametrize("func", [sturges, scott, square_root_choice, freedman_diaconis])
    def test_bins_cover_range(self, rng, func):
        x = rng.gamma(2.0, size=300)
        b = func(x)
        assert b.k >= 1
        assert b.h > 0
        assert b.k * b.h >= np.ptp(x) * (1 - 1e-12)


class TestBinWidthDispatch:

    @pytest.mark.parametrize("rule,func", [
        ('sturges', sturges),
        ('scott', scott),
        ('sqrt', square_root_choice),
        ('fd', freedman_diaconis),
    ])
    def test_named_rule(self, rule, func):
        assert bin_width(X, rule=rule) == func(X)

    def test_default_is_sturges(self):
        assert bin_width(X) == sturges(X)

    def test_unknown_rule(self):
        with pytest.raises(ValidationError, match="Unknown bin-width rule"):
            bin_width(X, rule='rice')


class TestUsesSampleArgument:
    """Each rule reads only the sample it is given, never outside state."""

    @pytest.mark.parametrize("func", [sturges, scott, square_root_choice, freedman_diaconis])
    def test_width_scales_with_sample(self, func):
        narrow = func(X)
        wide = func([10 * v for v in X])
        assert wide.k == narrow.k
        np.testing.assert_allclose(wide.h, 10 * narrow.h, rtol=1e-12)

    @pytest.mark.parametrize("func", [sturges, scott, square_root_choice, freedman_diaconis])
    def test_calls_are_independent(self, func):
        first = func(X)
        func([0.0, 500.0, 1000.0, 2000.0, 2500.0, 4000.0, 8000.0, 9000.0])
        assert func(X) == first


class TestOverflow:
    """range / h overflowing float64 is a typed error, not OverflowError."""

    TINY_IQR = [0, 1e-10, 2e-10, 3e-10, 4e-10, 5e-10, 6e-10, 1e300]

    def test_freedman_diaconis_bin_count_overflow(self):
        assert quartiles(self.TINY_IQR).iqr > 0
        with pytest.raises(NumericalError, match="freedman_diaconis"):
            freedman_diaconis(self.TINY_IQR)

    def test_dispatch_overflow(self):
        with pytest.raises(NumericalError):
            bin_width(self.TINY_IQR, rule='fd')
