"""
PyMoments: descriptive statistics for a single numeric sample.

Location, dispersion, shape and quartile statistics with explicit
population/sample variants and a numerically stable (Knuth) variance
path. Every statistic is a pure function of the sample.

Submodules:
    descriptive: The statistics themselves
    core: Exceptions, validation, result envelope, timing
"""

__version__ = "0.1.0"

from pymoments import descriptive
from pymoments.descriptive import describe

__all__ = [
    "__version__",
    "descriptive",
    "describe",
]
