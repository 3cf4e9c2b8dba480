"""
Descriptive statistics module.

Central tendency, dispersion, shape and quartile statistics for a finite
1D sample, with two variance algorithms (two-pass and Knuth's online
method) and four histogram bin-width rules.

Public API:
    describe(x)                 - All statistics at once
    mean, geometric_mean, harmonic_mean, median
    quartiles(x), outliers(x)   - TI-83 quartiles and Tukey fences
    central_moment(x, k)
    variance, variance_pop, stable_variance, stable_variance_pop
    std_dev, std_dev_pop, stable_std_dev, stable_std_dev_pop
    skewness, skewness_pop, kurtosis, kurtosis_pop
    sturges, scott, square_root_choice, freedman_diaconis, bin_width
    reduce_sum, reduce_product, size, minimum, maximum, data_range

Every function accepts an array-like or a SampleDesign and never modifies
its input.
"""

from pymoments.descriptive.design import SampleDesign
from pymoments.descriptive.solution import DescriptiveParams, DescriptiveSolution
from pymoments.descriptive.solvers import describe, bin_width
from pymoments.descriptive._reductions import (
    reduce_sum,
    reduce_product,
    size,
    minimum,
    maximum,
    data_range,
)
from pymoments.descriptive._location import (
    mean,
    geometric_mean,
    harmonic_mean,
    median,
)
from pymoments.descriptive._order import Quartiles, quartiles, outliers
from pymoments.descriptive._moments import (
    central_moment,
    variance,
    variance_pop,
    stable_variance,
    stable_variance_pop,
    std_dev,
    std_dev_pop,
    stable_std_dev,
    stable_std_dev_pop,
)
from pymoments.descriptive._shape import (
    skewness,
    skewness_pop,
    kurtosis,
    kurtosis_pop,
)
from pymoments.descriptive._binning import (
    BinWidth,
    sturges,
    scott,
    square_root_choice,
    freedman_diaconis,
)

__all__ = [
    # Bundled
    "describe",
    "SampleDesign",
    "DescriptiveParams",
    "DescriptiveSolution",
    # Reductions
    "reduce_sum",
    "reduce_product",
    "size",
    "minimum",
    "maximum",
    "data_range",
    # Location
    "mean",
    "geometric_mean",
    "harmonic_mean",
    "median",
    # Order statistics
    "Quartiles",
    "quartiles",
    "outliers",
    # Moments and dispersion
    "central_moment",
    "variance",
    "variance_pop",
    "stable_variance",
    "stable_variance_pop",
    "std_dev",
    "std_dev_pop",
    "stable_std_dev",
    "stable_std_dev_pop",
    # Shape
    "skewness",
    "skewness_pop",
    "kurtosis",
    "kurtosis_pop",
    # Histogram binning
    "BinWidth",
    "sturges",
    "scott",
    "square_root_choice",
    "freedman_diaconis",
    "bin_width",
]
