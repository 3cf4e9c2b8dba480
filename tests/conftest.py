"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def normal_sample(rng):
    """Standard normal sample, n = 1000."""
    return rng.standard_normal(1000)


@pytest.fixture
def offset_sample():
    """
    Four values clustered around 1e9 (spread ~5).

    Classic example where the mean is large relative to the spread.
    Exact sample variance is 30, population variance 22.5.
    """
    return np.array([4.0, 7.0, 13.0, 16.0]) + 1e9
