"""
Tests for skewness and kurtosis.

Expected sample values verified against R e1071::skewness(type=2) and
e1071::kurtosis(type=2), which use the same bias corrections as Excel's
SKEW() and KURT().
"""

import numpy as np
import pytest

from pymoments.core.exceptions import DivisionByZeroError, InsufficientSampleSizeError
from pymoments.descriptive import kurtosis, kurtosis_pop, skewness, skewness_pop


class TestSkewness:

    def test_symmetric_zero_skewness(self):
        np.testing.assert_allclose(skewness([1, 2, 3, 4, 5]), 0.0, atol=1e-12)

    def test_matches_r_negative_skew(self):
        """R: skewness(c(2,4,5,4,5), type=2) = -1.3608276348795434."""
        np.testing.assert_allclose(
            skewness([2, 4, 5, 4, 5]), -1.3608276348795434, rtol=1e-10
        )

    def test_matches_r_positive_skew(self):
        """R: skewness(c(1,1,1,1,1,2,2,3,10), type=2) = 2.6862825854169157."""
        np.testing.assert_allclose(
            skewness([1, 1, 1, 1, 1, 2, 2, 3, 10]), 2.6862825854169157, rtol=1e-10
        )

    def test_correction_factor(self, rng):
        x = rng.exponential(size=50)
        n = len(x)
        np.testing.assert_allclose(
            skewness(x), skewness_pop(x) * np.sqrt(n * (n - 1)) / (n - 2), rtol=1e-14
        )

    def test_minimum_size(self):
        skewness([1.0, 2.0, 4.0])
        with pytest.raises(InsufficientSampleSizeError) as exc_info:
            skewness([1.0, 2.0])
        assert exc_info.value.required == 3

    def test_constant_raises(self):
        with pytest.raises(DivisionByZeroError, match="zero dispersion"):
            skewness([5, 5, 5, 5, 5])


class TestSkewnessPop:

    def test_symmetric(self):
        assert skewness_pop([1, 2, 3, 4, 5]) == 0.0

    def test_two_points(self):
        """Defined for n = 2 (population form has no n - 2 term)."""
        assert skewness_pop([1.0, 3.0]) == 0.0

    def test_sign_follows_tail(self):
        assert skewness_pop([1, 1, 1, 10]) > 0
        assert skewness_pop([-10, 1, 1, 1]) < 0

    def test_scale_invariant(self, rng):
        x = rng.exponential(size=100)
        np.testing.assert_allclose(skewness_pop(x), skewness_pop(1000 * x + 7), rtol=1e-9)

    def test_constant_raises(self):
        with pytest.raises(DivisionByZeroError):
            skewness_pop([2.0])

    def test_constant_with_inexact_mean_raises(self):
        """0.1 * 10 / 10 does not round back to 0.1; still zero dispersion."""
        with pytest.raises(DivisionByZeroError):
            skewness_pop([0.1] * 10)


class TestKurtosis:

    def test_matches_r_uniform_like(self):
        """R: kurtosis(1:5, type=2) = -1.2000000000000004."""
        np.testing.assert_allclose(kurtosis([1, 2, 3, 4, 5]), -1.2, rtol=1e-10)

    def test_matches_r_leptokurtic(self):
        """R: kurtosis(c(2,4,5,4,5), type=2) = 2.0."""
        np.testing.assert_allclose(kurtosis([2, 4, 5, 4, 5]), 2.0, rtol=1e-10)

    def test_matches_r_heavy_tail(self):
        """R: kurtosis(c(1,1,1,1,1,2,2,3,10), type=2) = 7.5125798985362451."""
        np.testing.assert_allclose(
            kurtosis([1, 1, 1, 1, 1, 2, 2, 3, 10]), 7.5125798985362451, rtol=1e-10
        )

    def test_correction_formula(self, rng):
        x = rng.standard_normal(40)
        n = len(x)
        g2 = kurtosis_pop(x) - 3
        expected = (n - 1) / ((n - 2) * (n - 3)) * ((n + 1) * g2 + 6)
        np.testing.assert_allclose(kurtosis(x), expected, rtol=1e-12)

    def test_normal_excess_near_zero(self, rng):
        x = rng.standard_normal(10000)
        assert abs(kurtosis(x)) < 0.3

    def test_minimum_size(self):
        kurtosis([1.0, 2.0, 3.0, 5.0])
        with pytest.raises(InsufficientSampleSizeError) as exc_info:
            kurtosis([1.0, 2.0, 3.0])
        assert exc_info.value.required == 4
        assert exc_info.value.actual == 3

    def test_constant_raises(self):
        with pytest.raises(DivisionByZeroError):
            kurtosis([5, 5, 5, 5, 5])


class TestKurtosisPop:

    def test_one_to_five(self):
        """m4 = 6.8, m2 = 2."""
        np.testing.assert_allclose(kurtosis_pop([1, 2, 3, 4, 5]), 1.7, rtol=1e-14)

    def test_two_points(self):
        assert kurtosis_pop([1.0, 3.0]) == 1.0

    def test_normal_converges_to_three(self, rng):
        x = rng.standard_normal(100_000)
        np.testing.assert_allclose(kurtosis_pop(x), 3.0, atol=0.1)

    def test_uniform_below_three(self, rng):
        """Uniform distribution has kurtosis 1.8."""
        x = rng.uniform(size=100_000)
        np.testing.assert_allclose(kurtosis_pop(x), 1.8, atol=0.05)

    def test_at_least_one(self, rng):
        """Pearson's inequality: kurtosis >= skewness^2 + 1."""
        x = rng.exponential(size=500)
        assert kurtosis_pop(x) >= skewness_pop(x) ** 2 + 1
